# backoffice/domains/product/schemas.py

"""
'product' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.

category / form_type 은 필수이지만 스키마 수준에서는 선택으로 받고,
누락과 존재하지 않는 ID 모두 CRUD 계층에서 같은 메시지로 거부합니다.
"""

from decimal import Decimal
from typing import Any, Optional

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field


class ProductBase(SQLModel):
    description: Optional[str] = Field(None, description="설명")
    category: Optional[int] = Field(None, description="카테고리 ID (필수)")
    form_type: Optional[int] = Field(None, description="형태 유형 ID (필수)")
    packing: Optional[int] = Field(None, description="포장 ID (선택)")
    price: Optional[Decimal] = Field(None, description="가격 (0 이상)")
    is_active: bool = Field(True, description="사이트 노출 여부")


class ProductCreate(ProductBase):
    name: Any = Field(None, description="제품명 (필수)")


class ProductUpdate(ProductCreate):
    pass


class ProductRead(ProductBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
