# backoffice/domains/order/routers.py

"""
'order' 도메인의 API 엔드포인트를 정의하는 모듈입니다.

- `router`: 관리자용 CRUD (/api/admin/orders), 모든 관리자 역할 허용
- `public_router`: 사이트 방문자의 주문 접수 (/api/orders), 세션 불필요
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core import dependencies as deps
from backoffice.core.responses import APIResponse, created, ok
from backoffice.core.validation import parse_id, store_errors
from backoffice.domains.order import crud as order_crud
from backoffice.domains.order import schemas as order_schemas

router = APIRouter(
    prefix="/orders",
    tags=["Orders (주문 관리)"],
    dependencies=[Depends(deps.require_order_access)],
)
public_router = APIRouter(prefix="/orders", tags=["Public Intake (공개 접수)"])

messages = order_crud.ORDER_MESSAGES


@router.get("", response_model=APIResponse[List[order_schemas.OrderRead]], summary="주문 목록 조회 (최신순)")
async def read_orders(db: AsyncSession = Depends(deps.get_db_session)):
    async with store_errors(messages.list_failed):
        rows = await order_crud.order.get_multi(db)
    return ok([order_schemas.OrderRead.model_validate(row) for row in rows])


@router.post("", response_model=APIResponse[None], status_code=status.HTTP_201_CREATED, summary="주문 등록 (관리자)")
async def create_order(
    order_in: order_schemas.OrderCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    async with store_errors(messages.create_failed):
        await order_crud.order.create(db, obj_in=order_in)
    return created(messages.created)


@router.put("", response_model=APIResponse[None], summary="주문 수정")
async def update_order(
    order_in: order_schemas.OrderUpdate,
    id: Optional[str] = Query(None),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    주문의 변경 가능한 필드(상태, 담당자 등)를 모두 교체합니다.
    """
    order_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.update_failed):
        await order_crud.order.update(db, id=order_id, obj_in=order_in)
    return ok(message=messages.updated)


@router.delete("", response_model=APIResponse[None], summary="주문 삭제")
async def delete_order(
    id: Optional[str] = Query(None),
    db: AsyncSession = Depends(deps.get_db_session),
):
    order_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.delete_failed):
        await order_crud.order.remove(db, id=order_id)
    return ok(message=messages.deleted)


@public_router.post("", response_model=APIResponse[None], status_code=status.HTTP_201_CREATED, summary="주문 접수 (공개)")
async def submit_order(
    order_in: order_schemas.OrderIntake,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """사이트 방문자의 주문 요청을 'new' 상태로 접수합니다."""
    async with store_errors(messages.create_failed):
        await order_crud.order.create(db, obj_in=order_schemas.OrderCreate(**order_in.model_dump()))
    return created(messages.created)
