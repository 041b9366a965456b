# backoffice/domains/packing/schemas.py

"""
'packing' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import Any, Optional

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field


class PackingCreate(SQLModel):
    name: Any = Field(None, description="포장 명칭 (필수)")
    form_type: Optional[int] = Field(None, description="형태 유형 ID (선택)")
    volume: Optional[str] = Field(None, max_length=50, description="용량 표기")
    description: Optional[str] = Field(None, description="설명")


class PackingUpdate(PackingCreate):
    pass


class PackingRead(SQLModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    form_type: Optional[int] = None
    volume: Optional[str] = None
    description: Optional[str] = None
