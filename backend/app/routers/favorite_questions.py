"""Favorite question API endpoints, addressed by (userId, questionId)."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user
from app.db import get_db
from app.models.common import Message
from app.models.favorite import FavoriteQuestion, FavoriteQuestionCreate, FavoriteQuestionUpdate
from app.models.user import CurrentUser
from app.routers.params import Page
from app.services.favorites import FavoriteQuestionService
from app.services.questions import QuestionService
from app.services.users import UserService
from app.utils.permissions import authorize, scope_to_caller

router = APIRouter(prefix="/favorite-questions", tags=["favorite-questions"])


@router.post("", response_model=FavoriteQuestion, status_code=status.HTTP_201_CREATED)
async def create_favorite(
    favorite: FavoriteQuestionCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Bookmark a question."""
    authorize(current_user, owner_id=str(favorite.user_id))
    if not await UserService(db).exists(favorite.user_id):
        raise HTTPException(status_code=404, detail="Usuário não encontrado.")
    if not await QuestionService(db).exists(favorite.question_id):
        raise HTTPException(status_code=404, detail="Questão não encontrada.")
    return await FavoriteQuestionService(db).create(favorite.model_dump())


@router.get("", response_model=list[FavoriteQuestion])
async def get_favorites(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_id: UUID | None = Query(None, alias="userId"),
    question_id: UUID | None = Query(None, alias="questionId"),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List bookmarks, most recent first. Non-admins only see their own."""
    user_id = scope_to_caller(current_user, user_id)
    return await FavoriteQuestionService(db).find_all(
        {"user_id": user_id, "question_id": question_id},
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{user_id}/{question_id}", response_model=FavoriteQuestion)
async def get_favorite(
    user_id: UUID,
    question_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get one bookmark."""
    authorize(current_user, owner_id=str(user_id))
    favorite = await FavoriteQuestionService(db).get((user_id, question_id))
    if not favorite:
        raise HTTPException(status_code=404, detail=FavoriteQuestionService.not_found_message)
    return favorite


@router.patch("/{user_id}/{question_id}", response_model=FavoriteQuestion)
async def update_favorite(
    user_id: UUID,
    question_id: UUID,
    favorite_update: FavoriteQuestionUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Update a bookmark's timestamp."""
    authorize(current_user, owner_id=str(user_id))
    return await FavoriteQuestionService(db).update((user_id, question_id), favorite_update.changes())


@router.delete("/{user_id}/{question_id}", response_model=Message)
async def delete_favorite(
    user_id: UUID,
    question_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Remove a bookmark."""
    authorize(current_user, owner_id=str(user_id))
    await FavoriteQuestionService(db).remove((user_id, question_id))
    return Message(message="Questão removida dos favoritos.")
