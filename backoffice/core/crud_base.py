# backoffice/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.

모든 관리 엔티티는 같은 규칙을 따릅니다.
- 목록은 고유 키(보통 name) 오름차순으로 정렬합니다.
- 고유 키는 앞뒤 공백을 제거한 뒤 다른 행과 중복될 수 없습니다.
- 다른 테이블에서 참조 중인 행(참조 수 > 0)은 수정도 삭제도 할 수 없습니다.
- 수정은 존재 확인 → 중복 확인 → 참조 확인 → 조건부 UPDATE 순서로 진행합니다.
- 삭제는 존재 여부를 확인하지 않습니다. (없는 id 도 성공으로 응답)

사전 검사 후 쓰기 사이의 경쟁 상태는 저장소 수준에서 막습니다.
고유 제약 위반과 ON DELETE RESTRICT 위반은 사전 검사와 같은 400 으로 바뀌고,
UPDATE 문은 같은 문장 안에서 참조 여부를 다시 확인합니다.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from fastapi import HTTPException, status
from sqlalchemy import delete, exists, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

from backoffice.core.config import settings
from backoffice.core.validation import clean_name, decode_count

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntityMessages:
    """엔티티별 사용자 메시지 묶음입니다. 모든 응답 문구는 여기서 가져옵니다."""
    invalid_id: str
    invalid_name: str
    not_found: str
    not_updated: str
    created: str
    updated: str
    deleted: str
    list_failed: str
    create_failed: str
    update_failed: str
    delete_failed: str
    # 고유 키나 참조 검사가 없는 엔티티는 생략합니다.
    duplicate: Optional[str] = None
    in_use_edit: Optional[str] = None
    in_use_delete: Optional[str] = None
    name_too_long: Optional[str] = None


@dataclass(frozen=True)
class ReferenceGuard:
    """
    이 엔티티를 가리키는 종속 테이블의 외래 키 컬럼입니다.
    참조 수가 0 보다 크면 수정과 삭제를 거부합니다.
    """
    column: Any  # 예: Product.category


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    참조 검사를 포함한 모든 CRUD 작업의 기본 클래스를 정의합니다.
    """
    def __init__(
        self,
        model: Type[ModelType],
        *,
        messages: EntityMessages,
        unique_field: Optional[str] = "name",
        unique_max_length: Optional[int] = 255,
        order_by: Optional[Sequence[Any]] = None,
        guards: Sequence[ReferenceGuard] = (),
    ):
        self.model = model
        self.messages = messages
        self.unique_field = unique_field
        self.unique_max_length = unique_max_length
        self.guards = tuple(guards)
        if order_by is not None:
            self.order_by = tuple(order_by)
        elif unique_field is not None:
            self.order_by = (getattr(model, unique_field).asc(),)
        else:
            self.order_by = (model.id.asc(),)

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------
    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """ID를 기준으로 단일 레코드를 조회합니다."""
        statement = select(self.model).where(self.model.id == id).execution_options(populate_existing=True)
        result = await db.execute(statement)
        return result.scalars().one_or_none()

    async def get_multi(self, db: AsyncSession) -> List[ModelType]:
        """전체 레코드를 정렬 기준에 따라 조회합니다."""
        statement = select(self.model).order_by(*self.order_by).execution_options(populate_existing=True)
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def get_by_attribute(self, db: AsyncSession, *, attribute: str, value: Any) -> Optional[ModelType]:
        statement = select(self.model).where(getattr(self.model, attribute) == value)
        result = await db.execute(statement)
        return result.scalars().first()

    async def exists(self, db: AsyncSession, id: Any) -> bool:
        statement = select(self.model.id).where(self.model.id == id)
        result = await db.execute(statement)
        return result.first() is not None

    async def is_unique_value_taken(self, db: AsyncSession, value: Any, *, exclude_id: Optional[int] = None) -> bool:
        """고유 키 값이 다른 행에서 사용 중인지 확인합니다. (대소문자 구분, 정확히 일치)"""
        if self.unique_field is None:
            return False
        column = getattr(self.model, self.unique_field)
        statement = select(self.model.id).where(column == value)
        if exclude_id is not None:
            statement = statement.where(self.model.id != exclude_id)
        result = await db.execute(statement.limit(1))
        return result.first() is not None

    async def count_references(self, db: AsyncSession, id: int) -> int:
        """종속 테이블에서 이 행을 가리키는 레코드 수를 셉니다."""
        total = 0
        for guard in self.guards:
            statement = select(func.count()).select_from(guard.column.class_).where(guard.column == id)
            total += decode_count(await db.execute(statement))
        return total

    def _not_referenced(self, id: int) -> List[ColumnElement]:
        return [~exists().where(guard.column == id) for guard in self.guards]

    # -------------------------------------------------------------------------
    # 도메인별 확장 지점
    # -------------------------------------------------------------------------
    def to_values(self, obj_in: BaseModel) -> Dict[str, Any]:
        """
        요청 스키마를 저장할 컬럼 값으로 변환합니다.
        고유 키는 문자열인지, 공백뿐이 아닌지 검사한 뒤 앞뒤 공백을 제거합니다.
        """
        values = obj_in.model_dump()
        if self.unique_field is not None:
            values[self.unique_field] = clean_name(
                values.get(self.unique_field),
                self.messages.invalid_name,
                max_length=self.unique_max_length,
                too_long_error=self.messages.name_too_long,
            )
        return values

    async def validate_references(self, db: AsyncSession, values: Dict[str, Any]) -> None:
        """
        외래 키 값이 실제 행을 가리키는지 검사합니다.
        외래 키가 있는 도메인에서 재정의합니다.
        """
        return None

    def _unique_value(self, values: Dict[str, Any]) -> Any:
        return values.get(self.unique_field) if self.unique_field else None

    def _duplicate(self) -> HTTPException:
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=self.messages.duplicate)

    # -------------------------------------------------------------------------
    # 쓰기
    # -------------------------------------------------------------------------
    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """
        고유 키 중복을 확인하고 새 레코드를 생성합니다.
        """
        values = self.to_values(obj_in)
        unique_value = self._unique_value(values)
        if unique_value is not None and await self.is_unique_value_taken(db, unique_value):
            raise self._duplicate()
        await self.validate_references(db, values)

        db_obj = self.model(**values)
        db.add(db_obj)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            # 사전 검사 이후 같은 이름이 먼저 저장된 경우
            if unique_value is not None and await self.is_unique_value_taken(db, unique_value):
                raise self._duplicate()
            raise
        await db.refresh(db_obj)
        logger.info(f"{self.model.__name__} created (id={db_obj.id})")
        return db_obj

    async def update(self, db: AsyncSession, *, id: int, obj_in: UpdateSchemaType) -> None:
        """
        기존 레코드의 변경 가능한 필드를 모두 교체합니다.
        영향받은 행이 0개이면 (값이 그대로이거나, 그 사이 참조가 생긴 경우) 400 을 발생시킵니다.
        """
        values = self.to_values(obj_in)
        if not await self.exists(db, id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=self.messages.not_found)

        unique_value = self._unique_value(values)
        if unique_value is not None and await self.is_unique_value_taken(db, unique_value, exclude_id=id):
            raise self._duplicate()

        if await self.count_references(db, id) > 0:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=self.messages.in_use_edit)

        await self.validate_references(db, values)

        conditions: List[ColumnElement] = [self.model.id == id, *self._not_referenced(id)]
        if settings.UNCHANGED_UPDATE_IS_ERROR:
            # 값이 하나라도 달라야 행이 갱신된 것으로 봅니다.
            conditions.append(or_(*[getattr(self.model, key).is_distinct_from(value) for key, value in values.items()]))

        statement = (
            update(self.model)
            .where(*conditions)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await db.execute(statement)
            await db.commit()
        except IntegrityError:
            await db.rollback()
            if unique_value is not None and await self.is_unique_value_taken(db, unique_value, exclude_id=id):
                raise self._duplicate()
            raise

        if result.rowcount == 0:
            # 사전 검사 이후 참조가 생긴 경우
            if await self.count_references(db, id) > 0:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=self.messages.in_use_edit)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=self.messages.not_updated)
        logger.info(f"{self.model.__name__} updated (id={id})")

    async def remove(self, db: AsyncSession, *, id: int) -> None:
        """
        참조 중이 아니면 레코드를 삭제합니다.
        존재하지 않는 id 도 오류 없이 처리합니다.
        """
        if await self.count_references(db, id) > 0:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=self.messages.in_use_delete)

        statement = delete(self.model).where(self.model.id == id).execution_options(synchronize_session=False)
        try:
            result = await db.execute(statement)
            await db.commit()
        except IntegrityError:
            # 사전 검사 이후 참조가 생긴 경우 (ON DELETE RESTRICT)
            await db.rollback()
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=self.messages.in_use_delete)
        logger.info(f"{self.model.__name__} delete requested (id={id}, rows={result.rowcount})")
