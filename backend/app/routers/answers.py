"""Answer API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user
from app.db import get_db
from app.models.answer import Answer, AnswerCreate, AnswerUpdate
from app.models.common import Message
from app.models.user import CurrentUser
from app.routers.params import Page
from app.services.answers import AnswerService
from app.services.questions import QuestionService
from app.services.users import UserService
from app.utils.permissions import authorize, scope_to_caller

router = APIRouter(prefix="/answers", tags=["answers"])

NOT_FOUND = "Resposta não encontrada."


async def _get_owned(service: AnswerService, answer_id: UUID, current_user: CurrentUser) -> Answer:
    answer = await service.get(answer_id)
    if not answer:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    authorize(current_user, owner_id=str(answer.user_id))
    return answer


@router.post("", response_model=Answer, status_code=status.HTTP_201_CREATED)
async def create_answer(
    answer: AnswerCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Record an answer for the caller (admins may record for anyone)."""
    authorize(current_user, owner_id=str(answer.user_id))
    if not await QuestionService(db).exists(answer.question_id):
        raise HTTPException(status_code=404, detail="Questão não encontrada.")
    if not await UserService(db).exists(answer.user_id):
        raise HTTPException(status_code=404, detail="Usuário não encontrado.")
    return await AnswerService(db).create(answer.model_dump())


@router.get("", response_model=list[Answer])
async def get_answers(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_id: UUID | None = Query(None, alias="userId"),
    question_id: UUID | None = Query(None, alias="questionId"),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List answers. Non-admins only see their own."""
    user_id = scope_to_caller(current_user, user_id)
    return await AnswerService(db).find_all(
        {"user_id": user_id, "question_id": question_id},
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{answer_id}", response_model=Answer)
async def get_answer(
    answer_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get an answer by ID."""
    return await _get_owned(AnswerService(db), answer_id, current_user)


@router.patch("/{answer_id}", response_model=Answer)
async def update_answer(
    answer_id: UUID,
    answer_update: AnswerUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Update an answer."""
    service = AnswerService(db)
    await _get_owned(service, answer_id, current_user)
    return await service.update(answer_id, answer_update.changes())


@router.delete("/{answer_id}", response_model=Message)
async def delete_answer(
    answer_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Delete an answer and its attempts."""
    service = AnswerService(db)
    await _get_owned(service, answer_id, current_user)
    await service.remove(answer_id)
    return Message(message="Resposta removida com sucesso.")
