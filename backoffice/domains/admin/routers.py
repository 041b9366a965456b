# backoffice/domains/admin/routers.py

"""
'admin' 도메인의 API 엔드포인트를 정의하는 모듈입니다.

- GET  /navigation     현재 세션 역할로 필터링된 헤더 메뉴
- POST /auth/signin    이메일/비밀번호 로그인 (폼 또는 JSON), 세션 쿠키 발급
- POST /auth/signout   세션 쿠키 삭제 후 로그인 화면 경로 반환
- GET  /auth/session   현재 세션 정보
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core import dependencies as deps
from backoffice.core.config import settings
from backoffice.core.responses import APIResponse, ok
from backoffice.core.validation import store_errors
from backoffice.domains.admin import schemas as admin_schemas
from backoffice.domains.admin.navigation import AdminHeader
from backoffice.domains.user import crud as user_crud

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Admin Shell (관리자 헤더 / 인증)"])

INVALID_CREDENTIALS = "Неверный email или пароль"
CREDENTIALS_REQUIRED = "Укажите email и пароль"
SIGNIN_FAILED = "Не удалось выполнить вход"
SIGNED_IN = "Вход выполнен"
SIGNED_OUT = "Вы вышли из системы"


async def _read_credentials(request: Request) -> admin_schemas.SignInRequest:
    """
    JSON 본문 또는 폼 데이터에서 로그인 정보를 읽습니다.
    폼에서는 OAuth2 규약의 `username` 필드도 이메일로 받습니다.
    """
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith("application/json"):
            payload = await request.json()
        else:
            form = await request.form()
            payload = {
                "email": form.get("email") or form.get("username"),
                "password": form.get("password"),
            }
        return admin_schemas.SignInRequest.model_validate(payload)
    except (ValueError, ValidationError):
        # json.JSONDecodeError 는 ValueError 의 하위 클래스입니다.
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=CREDENTIALS_REQUIRED)


@router.get("/navigation", response_model=APIResponse[admin_schemas.NavigationRead], summary="관리자 헤더 메뉴")
async def read_navigation(session: Optional[deps.AdminSession] = Depends(deps.get_admin_session)):
    """세션이 없거나 역할을 알 수 없으면 빈 메뉴를 반환합니다."""
    return ok(AdminHeader(session).to_dict())


@router.post("/auth/signin", response_model=APIResponse[admin_schemas.SignInResult], summary="로그인")
async def sign_in(request: Request, db: AsyncSession = Depends(deps.get_db_session)):
    credentials = await _read_credentials(request)
    async with store_errors(SIGNIN_FAILED):
        user = await user_crud.user.authenticate(db, email=credentials.email, password=credentials.password)
    if user is None:
        logger.info(f"Failed sign-in attempt for {credentials.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = deps.create_session_token(user.email, user.role)
    result = admin_schemas.SignInResult(
        access_token=token,
        user=admin_schemas.SessionRead(email=user.email, role=user.role),
    )
    response = ok(result, message=SIGNED_IN)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=settings.APP_ENV == "production",
        path="/",
    )
    logger.info(f"User {user.email} signed in (role={user.role})")
    return response


@router.post("/auth/signout", response_model=APIResponse[admin_schemas.SignOutResult], summary="로그아웃")
async def sign_out(session: Optional[deps.AdminSession] = Depends(deps.get_admin_session)):
    redirect = AdminHeader(session).sign_out()
    response = ok(admin_schemas.SignOutResult(redirect=redirect), message=SIGNED_OUT)
    response.delete_cookie(settings.SESSION_COOKIE_NAME, path="/")
    if session is not None:
        logger.info(f"User {session.user.email} signed out")
    return response


@router.get("/auth/session", response_model=APIResponse[admin_schemas.SessionRead], summary="현재 세션 조회")
async def read_session(session: deps.AdminSession = Depends(deps.get_required_session)):
    return ok(admin_schemas.SessionRead(email=session.user.email, role=session.role))
