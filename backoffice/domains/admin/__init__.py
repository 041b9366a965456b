# backoffice/domains/admin/__init__.py

"""
'admin' 도메인 패키지입니다.

관리자 화면의 공통 틀(헤더)을 담당합니다.
- 세션 역할에 따른 메뉴 필터링 (`navigation.py`)
- 로그인 / 로그아웃 / 현재 세션 조회 엔드포인트 (`routers.py`)

이 도메인은 자체 테이블을 갖지 않으며, 로그인 시 'user' 도메인을 사용합니다.
"""

__all__ = []
