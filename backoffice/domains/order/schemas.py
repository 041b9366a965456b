# backoffice/domains/order/schemas.py

"""
'order' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict, EmailStr
from sqlmodel import SQLModel, Field

from . import models as order_models


class OrderIntake(SQLModel):
    """사이트 방문자가 제출하는 주문 요청입니다. 상태와 담당자는 지정할 수 없습니다."""
    customer_name: Any = Field(None, description="고객 이름 (필수)")
    phone: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None
    product: Optional[int] = Field(None, description="제품 ID (선택)")
    quantity: int = Field(1, description="수량 (1 이상)")
    comment: Optional[str] = None


class OrderCreate(OrderIntake):
    status: str = Field(default=order_models.OrderStatus.NEW.value, description="new / in_progress / completed / cancelled")
    manager: Optional[int] = Field(None, description="담당 매니저 사용자 ID (선택)")


class OrderUpdate(OrderCreate):
    pass


class OrderRead(SQLModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    product: Optional[int] = None
    quantity: int
    comment: Optional[str] = None
    status: str
    manager: Optional[int] = None
    created_at: Optional[datetime] = None
