# backoffice/core/responses.py

"""
모든 엔드포인트가 공유하는 JSON 응답 봉투(envelope)와 예외 처리기를 정의하는 모듈입니다.

응답 형식: {"success": bool, "data"?: T | T[], "message"?: str, "error"?: str}
값이 없는 키는 응답에서 생략됩니다.
"""

import logging
from typing import Any, Generic, Optional, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DataT = TypeVar("DataT")

INVALID_REQUEST_BODY = "Некорректные данные запроса"


class APIResponse(BaseModel, Generic[DataT]):
    """공통 응답 봉투 스키마"""
    success: bool
    data: Optional[DataT] = None
    message: Optional[str] = None
    error: Optional[str] = None


def envelope(
    *,
    success: bool = True,
    data: Any = None,
    message: Optional[str] = None,
    error: Optional[str] = None,
) -> dict:
    """None 값을 제외한 봉투 딕셔너리를 만듭니다."""
    body: dict = {"success": success}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    if error is not None:
        body["error"] = error
    return body


def ok(data: Any = None, *, message: Optional[str] = None, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(envelope(data=data, message=message)),
    )


def created(message: str) -> JSONResponse:
    return ok(message=message, status_code=status.HTTP_201_CREATED)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTPException 을 실패 봉투로 변환합니다."""
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(success=False, error=detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    본문 파싱/스키마 오류는 FastAPI 기본값(422) 대신 400 실패 봉투로 반환합니다.
    """
    logger.info(f"Rejected request body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=envelope(success=False, error=INVALID_REQUEST_BODY),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
