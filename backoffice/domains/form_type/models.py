# backoffice/domains/form_type/models.py

"""
'form_type' 도메인 (제품 형태 유형)의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from sqlmodel import Field, SQLModel

FORM_TYPE_NAME_MAX_LENGTH = 255


class FormType(SQLModel, table=True):
    """
    form_types 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    products.form_type 가 이 테이블을 참조합니다.
    """
    __tablename__ = "form_types"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(
        max_length=FORM_TYPE_NAME_MAX_LENGTH,
        sa_column_kwargs={"unique": True, "nullable": False},
        description="형태 유형 명칭",
    )
