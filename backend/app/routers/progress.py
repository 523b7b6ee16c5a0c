"""Progress tracking API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user, require_roles
from app.db import get_db
from app.models.common import Message
from app.models.progress import Progress, ProgressCreate, ProgressUpdate
from app.models.user import CurrentUser, UserRole
from app.routers.params import Page
from app.services.courses import LessonService
from app.services.progress import ProgressService
from app.services.users import UserService
from app.utils.permissions import authorize, scope_to_caller

router = APIRouter(prefix="/progress", tags=["progress"])

NOT_FOUND = "Progresso não encontrado."


async def _get_owned(service: ProgressService, progress_id: UUID, current_user: CurrentUser) -> Progress:
    progress = await service.get(progress_id)
    if not progress:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    authorize(current_user, owner_id=str(progress.user_id))
    return progress


@router.post("", response_model=Progress, status_code=status.HTTP_201_CREATED)
async def create_progress(
    progress: ProgressCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Record the caller's progress on a lesson."""
    authorize(current_user, owner_id=str(progress.user_id))
    if not await UserService(db).exists(progress.user_id):
        raise HTTPException(status_code=404, detail="Usuário não encontrado.")
    if not await LessonService(db).exists(progress.lesson_id):
        raise HTTPException(status_code=404, detail="Lição não encontrada.")
    return await ProgressService(db).create(progress.model_dump())


@router.get("", response_model=list[Progress])
async def get_progress_list(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_id: UUID | None = Query(None, alias="userId"),
    lesson_id: UUID | None = Query(None, alias="lessonId"),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List progress records. Non-admins only see their own."""
    user_id = scope_to_caller(current_user, user_id)
    return await ProgressService(db).find_all(
        {"user_id": user_id, "lesson_id": lesson_id},
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{progress_id}", response_model=Progress)
async def get_progress(
    progress_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get a progress record by ID."""
    return await _get_owned(ProgressService(db), progress_id, current_user)


@router.patch("/{progress_id}", response_model=Progress)
async def update_progress(
    progress_id: UUID,
    progress_update: ProgressUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Update a progress record, e.g. mark the lesson completed."""
    service = ProgressService(db)
    await _get_owned(service, progress_id, current_user)
    return await service.update(progress_id, progress_update.changes())


@router.delete("/{progress_id}", response_model=Message)
async def delete_progress(
    progress_id: UUID,
    current_user: Annotated[CurrentUser, Depends(require_roles(UserRole.ADMIN))],
    db: AsyncSession = Depends(get_db),
):
    """Delete a progress record."""
    await ProgressService(db).remove(progress_id)
    return Message(message="Progresso removido com sucesso.")
