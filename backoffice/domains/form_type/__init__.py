# backoffice/domains/form_type/__init__.py

"""
'form_type' 도메인 패키지입니다.

제품의 형태 유형(예: 액체, 분말)을 관리합니다.
형태 유형은 관리자 화면의 포장(packings) 페이지에서 함께 편집되며,
제품(products.form_type)이 참조하는 동안에는 수정/삭제할 수 없습니다.

주요 서브모듈:
- `models.py`: form_types 테이블 SQLModel 정의.
- `schemas.py`: 요청 및 응답 스키마.
- `crud.py`: 참조 검사를 포함한 CRUD 로직과 사용자 메시지.
- `routers.py`: `/api/admin/formtypes` 엔드포인트.
"""

__all__ = []
