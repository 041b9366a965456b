# backoffice/core/logging_config.py

"""
애플리케이션 전역 로깅 설정 모듈입니다.
각 모듈은 `logging.getLogger(__name__)` 로 로거를 얻고, 여기서는 루트 핸들러만 구성합니다.
"""

import logging

from backoffice.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_configured = False


def configure_logging() -> None:
    """루트 로거를 한 번만 구성합니다. (pytest 등에서 중복 호출되어도 안전)"""
    global _configured
    if _configured:
        return

    level = logging.DEBUG if settings.DEBUG_MODE else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # SQL echo 는 DEBUG_MODE 에서만 엔진이 직접 출력하므로 중복 로그를 막습니다.
    logging.getLogger("sqlalchemy.engine").propagate = settings.DEBUG_MODE
    _configured = True
