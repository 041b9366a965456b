# backoffice/domains/question/schemas.py

"""
'question' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.
`is_answered` 는 요청으로 받지 않고 답변 내용에서 계산합니다.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict, EmailStr
from sqlmodel import SQLModel, Field


class QuestionIntake(SQLModel):
    """사이트 방문자가 제출하는 문의입니다."""
    name: Any = Field(None, description="문의자 이름 (필수)")
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    text: Any = Field(None, description="문의 내용 (필수)")


class QuestionCreate(QuestionIntake):
    answer: Optional[str] = Field(None, description="답변")


class QuestionUpdate(QuestionCreate):
    pass


class QuestionRead(SQLModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    text: str
    answer: Optional[str] = None
    is_answered: bool
    created_at: Optional[datetime] = None
