# backoffice/domains/user/routers.py

"""
'user' 도메인의 API 엔드포인트를 정의하는 모듈입니다.
모든 엔드포인트는 director 역할만 사용할 수 있습니다.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core import dependencies as deps
from backoffice.core.responses import APIResponse, created, ok
from backoffice.core.validation import parse_id, store_errors
from backoffice.domains.user import crud as user_crud
from backoffice.domains.user import schemas as user_schemas

router = APIRouter(prefix="/users", tags=["Users (사용자 관리)"])

messages = user_crud.USER_MESSAGES


@router.get("", response_model=APIResponse[List[user_schemas.UserRead]], summary="사용자 목록 조회")
async def read_users(
    db: AsyncSession = Depends(deps.get_db_session),
    _: deps.AdminSession = Depends(deps.require_user_access),
):
    async with store_errors(messages.list_failed):
        rows = await user_crud.user.get_multi(db)
    return ok([user_schemas.UserRead.model_validate(row) for row in rows])


@router.post("", response_model=APIResponse[None], status_code=status.HTTP_201_CREATED, summary="사용자 생성")
async def create_user(
    user_in: user_schemas.UserCreate,
    db: AsyncSession = Depends(deps.get_db_session),
    _: deps.AdminSession = Depends(deps.require_user_access),
):
    """
    새 사용자를 생성합니다.
    - `email`: 로그인 이메일 (필수, 고유)
    - `password`: 8자 이상 (필수)
    - `role`: manager / stmanager / director
    """
    async with store_errors(messages.create_failed):
        await user_crud.user.create(db, obj_in=user_in)
    return created(messages.created)


@router.put("", response_model=APIResponse[None], summary="사용자 수정")
async def update_user(
    user_in: user_schemas.UserUpdate,
    id: Optional[str] = Query(None),
    db: AsyncSession = Depends(deps.get_db_session),
    _: deps.AdminSession = Depends(deps.require_user_access),
):
    user_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.update_failed):
        await user_crud.user.update(db, id=user_id, obj_in=user_in)
    return ok(message=messages.updated)


@router.delete("", response_model=APIResponse[None], summary="사용자 삭제")
async def delete_user(
    id: Optional[str] = Query(None),
    db: AsyncSession = Depends(deps.get_db_session),
    session: deps.AdminSession = Depends(deps.require_user_access),
):
    user_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.delete_failed):
        await user_crud.user.remove(db, id=user_id, current_email=session.user.email)
    return ok(message=messages.deleted)
