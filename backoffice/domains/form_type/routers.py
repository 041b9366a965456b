# backoffice/domains/form_type/routers.py

"""
'form_type' 도메인의 API 엔드포인트를 정의하는 모듈입니다.

- GET    /formtypes          목록 (이름 오름차순)
- POST   /formtypes          생성
- PUT    /formtypes?id=<n>   수정
- DELETE /formtypes?id=<n>   삭제
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core import dependencies as deps
from backoffice.core.responses import APIResponse, created, ok
from backoffice.core.validation import parse_id, store_errors
from backoffice.domains.form_type import crud as form_type_crud
from backoffice.domains.form_type import schemas as form_type_schemas

router = APIRouter(
    prefix="/formtypes",
    tags=["Form Types (형태 유형 관리)"],
    dependencies=[Depends(deps.require_form_type_access)],
)

messages = form_type_crud.FORM_TYPE_MESSAGES


@router.get("", response_model=APIResponse[List[form_type_schemas.FormTypeRead]], summary="형태 유형 목록 조회")
async def read_form_types(db: AsyncSession = Depends(deps.get_db_session)):
    async with store_errors(messages.list_failed):
        rows = await form_type_crud.form_type.get_multi(db)
    return ok([form_type_schemas.FormTypeRead.model_validate(row) for row in rows])


@router.post("", response_model=APIResponse[None], status_code=status.HTTP_201_CREATED, summary="형태 유형 생성")
async def create_form_type(
    form_type_in: form_type_schemas.FormTypeCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    async with store_errors(messages.create_failed):
        await form_type_crud.form_type.create(db, obj_in=form_type_in)
    return created(messages.created)


@router.put("", response_model=APIResponse[None], summary="형태 유형 수정")
async def update_form_type(
    form_type_in: form_type_schemas.FormTypeUpdate,
    id: Optional[str] = Query(None, description="수정할 형태 유형 ID"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    제품에서 사용 중인 형태 유형은 수정할 수 없습니다.
    """
    form_type_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.update_failed):
        await form_type_crud.form_type.update(db, id=form_type_id, obj_in=form_type_in)
    return ok(message=messages.updated)


@router.delete("", response_model=APIResponse[None], summary="형태 유형 삭제")
async def delete_form_type(
    id: Optional[str] = Query(None, description="삭제할 형태 유형 ID"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    form_type_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.delete_failed):
        await form_type_crud.form_type.remove(db, id=form_type_id)
    return ok(message=messages.deleted)
