# backoffice/domains/product/models.py

"""
'product' 도메인 (제품)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

products 테이블은 카테고리, 형태 유형, 포장을 외래 키로 참조하며,
이 컬럼들이 각 도메인의 참조 검사(수정/삭제 차단)의 기준이 됩니다.
"""

from decimal import Decimal
from typing import Optional
from sqlalchemy import Column, ForeignKey, Integer, Numeric
from sqlmodel import Field, SQLModel


class Product(SQLModel, table=True):
    """
    products 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, sa_column_kwargs={"unique": True, "nullable": False}, description="제품명")
    description: Optional[str] = Field(default=None, description="설명")
    category: int = Field(
        sa_column=Column(Integer, ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True),
        description="카테고리 ID (FK)",
    )
    form_type: int = Field(
        sa_column=Column(Integer, ForeignKey("form_types.id", ondelete="RESTRICT"), nullable=False, index=True),
        description="형태 유형 ID (FK)",
    )
    packing: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("packings.id", ondelete="RESTRICT"), nullable=True, index=True),
        description="포장 ID (FK, 선택)",
    )
    price: Optional[Decimal] = Field(default=None, sa_column=Column(Numeric(12, 2), nullable=True), description="가격")
    is_active: bool = Field(default=True, description="사이트 노출 여부")
