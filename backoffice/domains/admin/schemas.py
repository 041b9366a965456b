# backoffice/domains/admin/schemas.py

"""
'admin' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class SignInRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SessionRead(BaseModel):
    email: str
    role: str


class SignInResult(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: SessionRead


class NavLinkRead(BaseModel):
    href: str
    label: str


class MobileMenuRead(BaseModel):
    open: bool
    links: List[NavLinkRead]


class NavigationRead(BaseModel):
    title: str
    banner: str
    user: Optional[str] = None
    links: List[NavLinkRead]
    desktop: List[NavLinkRead]
    mobile: MobileMenuRead


class SignOutResult(BaseModel):
    redirect: str
