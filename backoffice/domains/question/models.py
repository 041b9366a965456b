# backoffice/domains/question/models.py

"""
'question' 도메인 (고객 문의)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from datetime import datetime, UTC
from typing import Optional
from sqlalchemy import Column
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Field, SQLModel


class Question(SQLModel, table=True):
    """
    questions 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "questions"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, description="문의자 이름")
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    text: str = Field(description="문의 내용")
    answer: Optional[str] = Field(default=None, description="답변")
    is_answered: bool = Field(default=False, description="답변 완료 여부")
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False),
        description="접수 일시",
    )
