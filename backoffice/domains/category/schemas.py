# backoffice/domains/category/schemas.py

"""
'category' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import Any, Optional

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field


class CategoryCreate(SQLModel):
    name: Any = Field(None, description="카테고리 명칭 (필수)")
    description: Optional[str] = Field(None, description="설명")


class CategoryUpdate(CategoryCreate):
    pass


class CategoryRead(SQLModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
