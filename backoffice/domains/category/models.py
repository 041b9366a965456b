# backoffice/domains/category/models.py

"""
'category' 도메인 (제품 카테고리)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from sqlmodel import Field, SQLModel


class CategoryBase(SQLModel):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, sa_column_kwargs={"unique": True, "nullable": False}, description="카테고리 명칭")
    description: Optional[str] = Field(default=None, description="설명")


class Category(CategoryBase, table=True):
    """
    categories 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    products.category 가 이 테이블을 참조합니다.
    """
    __tablename__ = "categories"
