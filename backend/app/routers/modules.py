"""Course module API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user, require_roles
from app.db import get_db
from app.models.common import Message
from app.models.course import Module, ModuleCreate, ModuleUpdate
from app.models.user import CurrentUser, UserRole
from app.routers.params import Page
from app.services.courses import CourseService, ModuleService
from app.utils.permissions import authorize

router = APIRouter(prefix="/modules", tags=["modules"])

NOT_FOUND = "Módulo não encontrado."


async def _authorize_module(service: ModuleService, module_id: UUID, current_user: CurrentUser) -> None:
    instructor_id = await service.instructor_of(module_id)
    if instructor_id is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    authorize(current_user, owner_id=instructor_id)


@router.get("", response_model=list[Module])
async def get_modules(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    course_id: UUID | None = Query(None, alias="courseId"),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List modules, ordered by position within their course."""
    return await ModuleService(db).find_all(
        {"course_id": course_id}, limit=page.limit, offset=page.offset
    )


@router.get("/{module_id}", response_model=Module)
async def get_module(
    module_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get a module by ID."""
    module = await ModuleService(db).get(module_id)
    if not module:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return module


@router.post("", response_model=Module, status_code=status.HTTP_201_CREATED)
async def create_module(
    module: ModuleCreate,
    current_user: Annotated[CurrentUser, Depends(require_roles(UserRole.TEACHER))],
    db: AsyncSession = Depends(get_db),
):
    """Add a module to a course the caller teaches."""
    instructor_id = await CourseService(db).instructor_of(module.course_id)
    if instructor_id is None:
        raise HTTPException(status_code=404, detail="Curso não encontrado.")
    authorize(current_user, owner_id=instructor_id)
    return await ModuleService(db).create(module.model_dump())


@router.patch("/{module_id}", response_model=Module)
async def update_module(
    module_id: UUID,
    module_update: ModuleUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Update a module."""
    service = ModuleService(db)
    await _authorize_module(service, module_id, current_user)
    return await service.update(module_id, module_update.changes())


@router.delete("/{module_id}", response_model=Message)
async def delete_module(
    module_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Delete a module and its lessons."""
    service = ModuleService(db)
    await _authorize_module(service, module_id, current_user)
    await service.remove(module_id)
    return Message(message="Módulo removido com sucesso.")
