# backoffice/domains/product/routers.py

"""
'product' 도메인의 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core import dependencies as deps
from backoffice.core.responses import APIResponse, created, ok
from backoffice.core.validation import parse_id, store_errors
from backoffice.domains.product import crud as product_crud
from backoffice.domains.product import schemas as product_schemas

router = APIRouter(
    prefix="/products",
    tags=["Products (제품 관리)"],
    dependencies=[Depends(deps.require_product_access)],
)

messages = product_crud.PRODUCT_MESSAGES


@router.get("", response_model=APIResponse[List[product_schemas.ProductRead]], summary="제품 목록 조회")
async def read_products(db: AsyncSession = Depends(deps.get_db_session)):
    async with store_errors(messages.list_failed):
        rows = await product_crud.product.get_multi(db)
    return ok([product_schemas.ProductRead.model_validate(row) for row in rows])


@router.post("", response_model=APIResponse[None], status_code=status.HTTP_201_CREATED, summary="제품 생성")
async def create_product(
    product_in: product_schemas.ProductCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    새 제품을 생성합니다.
    - `name`: 제품명 (필수, 고유)
    - `category`, `form_type`: 존재하는 ID (필수)
    - `packing`: 존재하는 ID (선택)
    - `price`: 0 이상 (선택)
    """
    async with store_errors(messages.create_failed):
        await product_crud.product.create(db, obj_in=product_in)
    return created(messages.created)


@router.put("", response_model=APIResponse[None], summary="제품 수정")
async def update_product(
    product_in: product_schemas.ProductUpdate,
    id: Optional[str] = Query(None),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """주문에 포함된 제품은 수정할 수 없습니다."""
    product_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.update_failed):
        await product_crud.product.update(db, id=product_id, obj_in=product_in)
    return ok(message=messages.updated)


@router.delete("", response_model=APIResponse[None], summary="제품 삭제")
async def delete_product(
    id: Optional[str] = Query(None),
    db: AsyncSession = Depends(deps.get_db_session),
):
    product_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.delete_failed):
        await product_crud.product.remove(db, id=product_id)
    return ok(message=messages.deleted)
