# backoffice/domains/user/__init__.py

"""
'user' 도메인 패키지입니다.

관리자 화면 사용자 계정(manager / stmanager / director)을 관리합니다.
이메일이 고유 키이며, 주문의 담당자(orders.manager)로 지정된 사용자는
수정/삭제할 수 없습니다. 로그인한 사용자는 자신의 계정을 삭제할 수 없습니다.
"""

__all__ = []
