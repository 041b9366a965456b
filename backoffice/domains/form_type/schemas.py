# backoffice/domains/form_type/schemas.py

"""
'form_type' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.

`name` 은 타입을 강제하지 않고 받습니다. 누락/문자열 아님/공백뿐인 값은
CRUD 계층에서 엔티티별 메시지와 함께 400 으로 거부됩니다.
"""

from typing import Any

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field


class FormTypeCreate(SQLModel):
    name: Any = Field(None, description="형태 유형 명칭 (최대 255자)")


class FormTypeUpdate(FormTypeCreate):
    """수정 시에도 이름 전체를 교체합니다."""
    pass


class FormTypeRead(SQLModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
