# backoffice/core/security.py

"""
애플리케이션의 보안 관련 유틸리티 함수 및 의존성 주입을 정의하는 모듈입니다.

- 비밀번호 해싱 및 검증 (passlib / bcrypt).
- 관리자 세션 토큰(JWT) 생성 및 검증.
- 쿠키 또는 Bearer 헤더에서 현재 세션 `{user: {email, role}}` 획득.
- 역할(role) 기반 접근 제어 의존성.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from passlib.context import CryptContext
from pydantic import BaseModel

from backoffice.core.config import settings
from backoffice import API_PREFIX

logger = logging.getLogger(__name__)

NOT_AUTHENTICATED = "Требуется авторизация"
NOT_ENOUGH_PERMISSIONS = "Недостаточно прав для выполнения операции"


# --- 비밀번호 해싱 설정 ---
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


# --- 세션 표현 ---
class SessionUser(BaseModel):
    email: str
    role: str = ""


class AdminSession(BaseModel):
    """외부 세션 공급자가 넘겨주는 `{user: {email, role}}` 형태의 세션입니다."""
    user: SessionUser

    @property
    def role(self) -> str:
        return self.user.role or ""


# 토큰 엔드포인트 경로는 Swagger UI 의 Authorize 버튼에서 사용됩니다.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{API_PREFIX}/auth/signin", auto_error=False)


# --- 세션 토큰 생성 및 검증 ---
def create_session_token(email: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    """이메일과 역할을 담은 서명된 세션 토큰을 생성합니다."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.SESSION_EXPIRE_MINUTES))
    to_encode = {"sub": email, "role": role, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM)


def decode_session_token(token: str) -> Optional[AdminSession]:
    """토큰을 검증하여 세션을 돌려줍니다. 위조/만료된 토큰이면 None 입니다."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY.get_secret_value(), algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.info(f"Rejected session token: {e}")
        return None
    email = payload.get("sub")
    if not email:
        return None
    return AdminSession(user=SessionUser(email=email, role=payload.get("role") or ""))


async def get_admin_session(
    request: Request,
    bearer_token: Optional[str] = Depends(oauth2_scheme),
) -> Optional[AdminSession]:
    """
    Authorization 헤더(Bearer) 또는 세션 쿠키에서 현재 세션을 읽어옵니다.
    세션이 없으면 None 을 반환합니다.
    """
    token = bearer_token or request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    return decode_session_token(token)


async def get_required_session(
    session: Optional[AdminSession] = Depends(get_admin_session),
) -> AdminSession:
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=NOT_AUTHENTICATED,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


# --- 역할 기반 권한 부여 의존성 ---
def require_roles(roles: Iterable[str]) -> Callable[..., AdminSession]:
    """
    허용된 역할 목록을 받아, 현재 세션의 역할을 검사하는 의존성을 만듭니다.
    허용되지 않은 역할이면 403 Forbidden 을 발생시킵니다.
    """
    allowed = frozenset(roles)

    async def _check_role(session: AdminSession = Depends(get_required_session)) -> AdminSession:
        if session.role not in allowed:
            logger.info(f"Role '{session.role}' of {session.user.email} is not in {sorted(allowed)}")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=NOT_ENOUGH_PERMISSIONS)
        return session

    return _check_role
