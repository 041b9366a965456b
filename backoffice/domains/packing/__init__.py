# backoffice/domains/packing/__init__.py

"""
'packing' 도메인 패키지입니다.

포장 유형(병, 캔 등)을 관리합니다. 포장은 선택적으로 형태 유형을 가리키며,
제품(products.packing)이 참조하는 포장은 수정/삭제할 수 없습니다.
"""

__all__ = []
