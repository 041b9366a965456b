# backoffice/domains/__init__.py

"""관리 대상 엔티티별 도메인 패키지 모음입니다."""
