"""Answer attempt API endpoints.

An attempt belongs to whoever owns its answer.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user
from app.db import get_db
from app.models.answer import AnswerAttempt, AnswerAttemptCreate, AnswerAttemptUpdate
from app.models.common import Message
from app.models.user import CurrentUser
from app.routers.params import Page
from app.services.answers import AnswerAttemptService, AnswerService
from app.utils.permissions import authorize, scope_to_caller

router = APIRouter(prefix="/answer-attempts", tags=["answer-attempts"])

NOT_FOUND = "Tentativa de resposta não encontrada."


async def _authorize_attempt(service: AnswerAttemptService, attempt_id: UUID, current_user: CurrentUser) -> None:
    owner_id = await service.owner_of(attempt_id)
    if owner_id is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    authorize(current_user, owner_id=owner_id)


@router.get("", response_model=list[AnswerAttempt])
async def get_attempts(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_id: UUID | None = Query(None, alias="userId"),
    question_id: UUID | None = Query(None, alias="questionId"),
    is_correct: bool | None = Query(None, alias="isCorrect"),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List attempts, newest first. Non-admins must filter by their own userId."""
    user_id = scope_to_caller(current_user, user_id, required=True)
    return await AnswerAttemptService(db).find_all(
        {"user_id": user_id, "question_id": question_id, "is_correct": is_correct},
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{attempt_id}", response_model=AnswerAttempt)
async def get_attempt(
    attempt_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get an attempt by ID."""
    service = AnswerAttemptService(db)
    await _authorize_attempt(service, attempt_id, current_user)
    return await service.get(attempt_id)


@router.post("", response_model=AnswerAttempt, status_code=status.HTTP_201_CREATED)
async def create_attempt(
    attempt: AnswerAttemptCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Record a new attempt on an existing answer."""
    owner_id = await AnswerService(db).owner_of(attempt.answer_id)
    if owner_id is None:
        raise HTTPException(status_code=404, detail="Resposta não encontrada.")
    authorize(current_user, owner_id=owner_id)
    return await AnswerAttemptService(db).create(attempt.model_dump())


@router.patch("/{attempt_id}", response_model=AnswerAttempt)
async def update_attempt(
    attempt_id: UUID,
    attempt_update: AnswerAttemptUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Update an attempt."""
    service = AnswerAttemptService(db)
    await _authorize_attempt(service, attempt_id, current_user)
    return await service.update(attempt_id, attempt_update.changes())


@router.delete("/{attempt_id}", response_model=Message)
async def delete_attempt(
    attempt_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Delete an attempt."""
    service = AnswerAttemptService(db)
    await _authorize_attempt(service, attempt_id, current_user)
    await service.remove(attempt_id)
    return Message(message="Tentativa de resposta removida com sucesso.")
