"""Course review API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user
from app.db import get_db
from app.models.common import Message
from app.models.review import Review, ReviewCreate, ReviewUpdate
from app.models.user import CurrentUser
from app.routers.params import Page
from app.services.courses import CourseService
from app.services.reviews import ReviewService
from app.services.users import UserService
from app.utils.permissions import authorize

router = APIRouter(prefix="/reviews", tags=["reviews"])

NOT_FOUND = "Avaliação não encontrada."


async def _get_or_404(service: ReviewService, review_id: UUID) -> Review:
    review = await service.get(review_id)
    if not review:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return review


@router.post("", response_model=Review, status_code=status.HTTP_201_CREATED)
async def create_review(
    review: ReviewCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Review a course."""
    authorize(current_user, owner_id=str(review.user_id))
    if not await UserService(db).exists(review.user_id):
        raise HTTPException(status_code=404, detail="Usuário não encontrado.")
    if not await CourseService(db).exists(review.course_id):
        raise HTTPException(status_code=404, detail="Curso não encontrado.")
    return await ReviewService(db).create(review.model_dump())


@router.get("", response_model=list[Review])
async def get_reviews(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    course_id: UUID | None = Query(None, alias="courseId"),
    user_id: UUID | None = Query(None, alias="userId"),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List reviews, newest first."""
    return await ReviewService(db).find_all(
        {"course_id": course_id, "user_id": user_id},
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{review_id}", response_model=Review)
async def get_review(
    review_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get a review by ID."""
    return await _get_or_404(ReviewService(db), review_id)


@router.patch("/{review_id}", response_model=Review)
async def update_review(
    review_id: UUID,
    review_update: ReviewUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Update a review."""
    service = ReviewService(db)
    review = await _get_or_404(service, review_id)
    authorize(current_user, owner_id=str(review.user_id))
    return await service.update(review_id, review_update.changes())


@router.delete("/{review_id}", response_model=Message)
async def delete_review(
    review_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Delete a review."""
    service = ReviewService(db)
    review = await _get_or_404(service, review_id)
    authorize(current_user, owner_id=str(review.user_id))
    await service.remove(review_id)
    return Message(message="Avaliação removida com sucesso.")
