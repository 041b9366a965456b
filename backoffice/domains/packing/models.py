# backoffice/domains/packing/models.py

"""
'packing' 도메인 (포장 유형)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from sqlalchemy import Column, ForeignKey, Integer
from sqlmodel import Field, SQLModel


class PackingBase(SQLModel):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, sa_column_kwargs={"unique": True, "nullable": False}, description="포장 명칭")
    form_type: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("form_types.id", ondelete="SET NULL"), nullable=True),
        description="형태 유형 ID (FK, 선택, 형태 유형 삭제 시 NULL)",
    )
    volume: Optional[str] = Field(default=None, max_length=50, description="용량 표기 (예: 0.5 л)")
    description: Optional[str] = Field(default=None, description="설명")


class Packing(PackingBase, table=True):
    """
    packings 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    products.packing 이 이 테이블을 참조합니다.
    """
    __tablename__ = "packings"
