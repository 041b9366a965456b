# backoffice/domains/product/__init__.py

"""
'product' 도메인 패키지입니다.

카탈로그 제품을 관리합니다. 제품은 카테고리, 형태 유형, 포장을 참조하며
주문(orders.product)이 참조하는 제품은 수정/삭제할 수 없습니다.
"""

__all__ = []
