# backoffice/domains/user/models.py

"""
'user' 도메인 (관리자 계정)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from enum import Enum
from typing import Optional
from sqlmodel import Field, SQLModel


# =============================================================================
# 관리자 역할(RBAC)을 Enum으로 정의합니다. DB와 세션에는 문자열 값이 저장됩니다.
# =============================================================================
class UserRole(str, Enum):
    MANAGER = "manager"          # 매니저: 주문/문의 처리
    STOCK_MANAGER = "stmanager"  # 재고 매니저: 카탈로그 관리
    DIRECTOR = "director"        # 이사: 전체 관리 + 사용자 관리


# =============================================================================
# users 테이블 모델
# =============================================================================
class UserBase(SQLModel):
    """
    users 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="사용자 고유 ID")
    email: str = Field(max_length=255, sa_column_kwargs={"unique": True, "nullable": False}, description="로그인 이메일 (고유 키)")
    name: Optional[str] = Field(default=None, max_length=255, description="표시 이름")
    role: str = Field(default=UserRole.MANAGER.value, max_length=20, description="역할 (manager / stmanager / director)")
    is_active: bool = Field(default=True, description="계정 활성 여부")


class User(UserBase, table=True):
    """
    users 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "users"

    password_hash: str = Field(max_length=255, description="bcrypt 해시")
