# backoffice/core/validation.py

"""
요청 값 검증과 저장소 결과 디코딩을 위한 공통 유틸리티 모듈입니다.

- 쿼리 문자열의 `id` 파싱 (`parse_id`)
- 필수 문자열 필드(이름 등) 정리 및 검증 (`clean_name`, `clean_optional_text`)
- COUNT 결과의 타입 검증 (`decode_count`)
- 저장소 예외를 일반 500 응답으로 변환하는 컨텍스트 관리자 (`store_errors`)
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from fastapi import HTTPException, status
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class StoreShapeError(Exception):
    """저장소가 예상과 다른 형태의 결과를 돌려준 경우 발생합니다."""


def parse_id(raw: Optional[str], error: str) -> int:
    """
    `?id=` 값을 양의 정수로 변환합니다.
    값이 없거나, 숫자가 아니거나, 0 이하이면 400 을 발생시킵니다.
    """
    if raw is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    text = str(raw).strip()
    if not (text.isascii() and text.isdigit()):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    value = int(text)
    if value <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    return value


def clean_name(value: Any, error: str, *, max_length: Optional[int] = None, too_long_error: Optional[str] = None) -> str:
    """
    필수 문자열 필드를 검증하고 앞뒤 공백을 제거한 값을 반환합니다.
    문자열이 아니거나 공백뿐이면 400 을 발생시킵니다.
    """
    if not isinstance(value, str) or not value.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)
    cleaned = value.strip()
    if max_length is not None and len(cleaned) > max_length:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=too_long_error or error)
    return cleaned


def clean_optional_text(value: Optional[str]) -> Optional[str]:
    """선택 문자열 필드: 공백뿐이면 None 으로 저장합니다."""
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def decode_count(result: Result) -> int:
    """
    `SELECT COUNT(*)` 결과를 정수로 디코딩합니다.
    정확히 한 행, 한 개의 0 이상 정수가 아니면 StoreShapeError 를 발생시킵니다.
    """
    rows = result.all()
    if len(rows) != 1 or len(rows[0]) != 1:
        raise StoreShapeError(f"COUNT query returned unexpected shape: {rows!r}")
    count = rows[0][0]
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise StoreShapeError(f"COUNT query returned non-integer value: {count!r}")
    return count


@asynccontextmanager
async def store_errors(message: str) -> AsyncGenerator[None, None]:
    """
    블록 안에서 발생한 저장소 예외를 로그로 남기고 일반 500 응답으로 바꿉니다.
    HTTPException (검증/업무 규칙 위반)은 그대로 통과시킵니다.
    """
    try:
        yield
    except (SQLAlchemyError, StoreShapeError) as e:
        logger.error(f"{message}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
        ) from e
