# backoffice/__init__.py

"""
카탈로그/주문 관리 백오피스 FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 FastAPI 애플리케이션의 진입점 (main.py)과
설정, 데이터베이스 연결, 보안, 공통 CRUD 를 담는 core 서브패키지,
그리고 관리 대상 엔티티별 모듈을 담는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Catalog Back-Office API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/admin"   # 관리자 API 라우트의 공통 접두사 (main.py에서 적용)
PUBLIC_API_PREFIX = "/api"  # 사이트 방문자용 접수 API 접두사

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Admin back-office API for the product catalog and customer orders."
__all__ = []
