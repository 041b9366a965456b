# backoffice/domains/category/routers.py

"""
'category' 도메인의 API 엔드포인트를 정의하는 모듈입니다.

- GET    /categories          목록 (이름 오름차순)
- POST   /categories          생성
- PUT    /categories?id=<n>   수정
- DELETE /categories?id=<n>   삭제
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core import dependencies as deps
from backoffice.core.responses import APIResponse, created, ok
from backoffice.core.validation import parse_id, store_errors
from backoffice.domains.category import crud as category_crud
from backoffice.domains.category import schemas as category_schemas

router = APIRouter(
    prefix="/categories",
    tags=["Categories (카테고리 관리)"],
    dependencies=[Depends(deps.require_category_access)],
)

messages = category_crud.CATEGORY_MESSAGES


@router.get("", response_model=APIResponse[List[category_schemas.CategoryRead]], summary="카테고리 목록 조회")
async def read_categories(db: AsyncSession = Depends(deps.get_db_session)):
    async with store_errors(messages.list_failed):
        rows = await category_crud.category.get_multi(db)
    return ok([category_schemas.CategoryRead.model_validate(row) for row in rows])


@router.post("", response_model=APIResponse[None], status_code=status.HTTP_201_CREATED, summary="카테고리 생성")
async def create_category(
    category_in: category_schemas.CategoryCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    async with store_errors(messages.create_failed):
        await category_crud.category.create(db, obj_in=category_in)
    return created(messages.created)


@router.put("", response_model=APIResponse[None], summary="카테고리 수정")
async def update_category(
    category_in: category_schemas.CategoryUpdate,
    id: Optional[str] = Query(None, description="수정할 카테고리 ID"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    제품에서 사용 중인 카테고리는 수정할 수 없습니다.
    """
    category_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.update_failed):
        await category_crud.category.update(db, id=category_id, obj_in=category_in)
    return ok(message=messages.updated)


@router.delete("", response_model=APIResponse[None], summary="카테고리 삭제")
async def delete_category(
    id: Optional[str] = Query(None, description="삭제할 카테고리 ID"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    category_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.delete_failed):
        await category_crud.category.remove(db, id=category_id)
    return ok(message=messages.deleted)
