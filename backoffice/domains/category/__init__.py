# backoffice/domains/category/__init__.py

"""
'category' 도메인 패키지입니다.

제품 카테고리를 관리합니다. 제품(products.category)이 참조하는 카테고리는
수정/삭제할 수 없습니다.
"""

__all__ = []
