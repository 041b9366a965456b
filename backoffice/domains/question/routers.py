# backoffice/domains/question/routers.py

"""
'question' 도메인의 API 엔드포인트를 정의하는 모듈입니다.

- `router`: 관리자용 CRUD (/api/admin/questions)
- `public_router`: 사이트 방문자의 문의 접수 (/api/questions)
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.core import dependencies as deps
from backoffice.core.responses import APIResponse, created, ok
from backoffice.core.validation import parse_id, store_errors
from backoffice.domains.question import crud as question_crud
from backoffice.domains.question import schemas as question_schemas

router = APIRouter(
    prefix="/questions",
    tags=["Questions (문의 관리)"],
    dependencies=[Depends(deps.require_question_access)],
)
public_router = APIRouter(prefix="/questions", tags=["Public Intake (공개 접수)"])

messages = question_crud.QUESTION_MESSAGES


@router.get("", response_model=APIResponse[List[question_schemas.QuestionRead]], summary="문의 목록 조회 (최신순)")
async def read_questions(db: AsyncSession = Depends(deps.get_db_session)):
    async with store_errors(messages.list_failed):
        rows = await question_crud.question.get_multi(db)
    return ok([question_schemas.QuestionRead.model_validate(row) for row in rows])


@router.post("", response_model=APIResponse[None], status_code=status.HTTP_201_CREATED, summary="문의 등록 (관리자)")
async def create_question(
    question_in: question_schemas.QuestionCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    async with store_errors(messages.create_failed):
        await question_crud.question.create(db, obj_in=question_in)
    return created(messages.created)


@router.put("", response_model=APIResponse[None], summary="문의 수정 및 답변")
async def update_question(
    question_in: question_schemas.QuestionUpdate,
    id: Optional[str] = Query(None),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    답변(`answer`)이 비어 있지 않으면 답변 완료로 표시됩니다.
    """
    question_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.update_failed):
        await question_crud.question.update(db, id=question_id, obj_in=question_in)
    return ok(message=messages.updated)


@router.delete("", response_model=APIResponse[None], summary="문의 삭제")
async def delete_question(
    id: Optional[str] = Query(None),
    db: AsyncSession = Depends(deps.get_db_session),
):
    question_id = parse_id(id, messages.invalid_id)
    async with store_errors(messages.delete_failed):
        await question_crud.question.remove(db, id=question_id)
    return ok(message=messages.deleted)


@public_router.post("", response_model=APIResponse[None], status_code=status.HTTP_201_CREATED, summary="문의 접수 (공개)")
async def submit_question(
    question_in: question_schemas.QuestionIntake,
    db: AsyncSession = Depends(deps.get_db_session),
):
    async with store_errors(messages.create_failed):
        await question_crud.question.create(db, obj_in=question_schemas.QuestionCreate(**question_in.model_dump()))
    return created(messages.created)
