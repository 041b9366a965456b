# backoffice/domains/order/__init__.py

"""
'order' 도메인 패키지입니다.

사이트 방문자가 남긴 주문 요청(заявки)을 관리합니다.
관리자 API(/api/admin/orders)와 공개 접수 API(/api/orders)를 함께 제공합니다.
"""

__all__ = []
