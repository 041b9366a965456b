# tests/__init__.py

"""
백오피스 FastAPI 애플리케이션의 테스트 스위트 패키지입니다.

- `conftest.py`: 메모리 SQLite 엔진, 세션, 역할별 클라이언트, 테스트 데이터 팩토리
- `test_main.py`: 루트/헬스 체크와 공통 응답 봉투
- `test_core.py`: core 유틸리티 단위 테스트
- `domains/`: 도메인별 API 통합 테스트
"""

__title__ = "Catalog Back-Office API Tests"
__all__ = []
