# backoffice/domains/user/schemas.py

"""
'user' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Any, Optional

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field

from . import models as user_models


class UserBase(SQLModel):
    """사용자 정보의 기본 필드를 정의하는 스키마"""
    email: Any = Field(None, description="로그인 이메일 (필수, 고유)")
    name: Optional[str] = Field(None, max_length=255)
    role: str = Field(default=user_models.UserRole.MANAGER.value, description="manager / stmanager / director")
    is_active: bool = True


class UserCreate(UserBase):
    """사용자 생성을 위한 스키마. 비밀번호는 8자 이상이어야 합니다."""
    password: Optional[str] = None


class UserUpdate(UserBase):
    """사용자 정보 수정을 위한 스키마. 비밀번호는 지정된 경우에만 변경됩니다."""
    password: Optional[str] = None


class UserRead(SQLModel):
    """
    사용자 정보 조회를 위한 스키마.
    비밀번호 해시값은 제외됩니다.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: Optional[str] = None
    role: str
    is_active: bool
