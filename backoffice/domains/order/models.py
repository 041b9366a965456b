# backoffice/domains/order/models.py

"""
'order' 도메인 (고객 주문 요청)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from datetime import datetime, UTC
from enum import Enum
from typing import Optional
from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Field, SQLModel


class OrderStatus(str, Enum):
    NEW = "new"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Order(SQLModel, table=True):
    """
    orders 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    product 는 제품의, manager 는 사용자의 참조 검사 기준 컬럼입니다.
    """
    __tablename__ = "orders"

    id: Optional[int] = Field(default=None, primary_key=True)
    customer_name: str = Field(max_length=255, description="고객 이름")
    phone: Optional[str] = Field(default=None, max_length=50, description="연락처")
    email: Optional[str] = Field(default=None, max_length=255, description="이메일")
    product: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("products.id", ondelete="RESTRICT"), nullable=True, index=True),
        description="주문 제품 ID (FK, 선택)",
    )
    quantity: int = Field(default=1, description="수량")
    comment: Optional[str] = Field(default=None, description="고객 메모")
    status: str = Field(default=OrderStatus.NEW.value, max_length=20, description="처리 상태")
    manager: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("users.id", ondelete="RESTRICT"), nullable=True, index=True),
        description="담당 매니저 사용자 ID (FK, 선택)",
    )
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False),
        description="접수 일시",
    )
