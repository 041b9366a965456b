# backoffice/core/__init__.py

"""
백오피스 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 비동기 엔진, 커넥션 풀, 세션 관리 (SQLModel / SQLAlchemy).
- `security.py`: 비밀번호 해싱, 세션 토큰, 역할 기반 접근 제어.
- `dependencies.py`: 라우터에서 사용하는 공통 의존성 함수들.
- `crud_base.py`: 참조 검사를 포함한 공통 CRUD 기본 클래스.
- `validation.py`, `responses.py`: 요청 검증 유틸리티와 응답 봉투.
"""

__all__ = []
