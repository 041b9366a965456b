# tests/domains/__init__.py

"""
도메인별 API 통합 테스트 패키지입니다.
(admin, category, form_type, packing, product, user, order, question)
"""

__all__ = []
