# backoffice/domains/question/__init__.py

"""
'question' 도메인 패키지입니다.

사이트 방문자의 문의와 관리자의 답변을 관리합니다.
"""

__all__ = []
