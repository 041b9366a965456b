# backoffice/domains/packing/routers.py

"""
'packing' 도메인의 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core import dependencies as deps
from backoffice.core.responses import APIResponse, created, ok
from backoffice.core.validation import parse_id, store_errors
from backoffice.domains.packing import crud as packing_crud
from backoffice.domains.packing import schemas as packing_schemas

router = APIRouter(
    prefix="/packings",
    tags=["Packings (포장 관리)"],
    dependencies=[Depends(deps.require_packing_access)],
)

messages = packing_crud.PACKING_MESSAGES


@router.get("", response_model=APIResponse[List[packing_schemas.PackingRead]], summary="포장 목록 조회")
async def read_packings(db: AsyncSession = Depends(deps.get_db_session)):
    async with store_errors(messages.list_failed):
        rows = await packing_crud.packing.get_multi(db)
    return ok([packing_schemas.PackingRead.model_validate(row) for row in rows])


@router.post("", response_model=APIResponse[None], status_code=status.HTTP_201_CREATED, summary="포장 생성")
async def create_packing(
    packing_in: packing_schemas.PackingCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    새 포장을 생성합니다.
    - `name`: 포장 명칭 (필수, 고유)
    - `form_type`: 형태 유형 ID (선택, 존재해야 함)
    """
    async with store_errors(messages.create_failed):
        await packing_crud.packing.create(db, obj_in=packing_in)
    return created(messages.created)


@router.put("", response_model=APIResponse[None], summary="포장 수정")
async def update_packing(
    packing_in: packing_schemas.PackingUpdate,
    id: Optional[str] = Query(None),
    db: AsyncSession = Depends(deps.get_db_session),
):
    packing_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.update_failed):
        await packing_crud.packing.update(db, id=packing_id, obj_in=packing_in)
    return ok(message=messages.updated)


@router.delete("", response_model=APIResponse[None], summary="포장 삭제")
async def delete_packing(
    id: Optional[str] = Query(None),
    db: AsyncSession = Depends(deps.get_db_session),
):
    packing_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.delete_failed):
        await packing_crud.packing.remove(db, id=packing_id)
    return ok(message=messages.deleted)
