"""Lesson API endpoints.

Students only see lessons of courses they are enrolled in; teachers manage
the lessons of their own courses.
"""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user, require_roles
from app.db import get_db
from app.models.common import Message
from app.models.course import Lesson, LessonCreate, LessonUpdate
from app.models.user import CurrentUser, UserRole
from app.routers.params import Page
from app.services.courses import LessonService, ModuleService
from app.services.enrollments import EnrollmentService
from app.utils.permissions import authorize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lessons", tags=["lessons"])

NOT_FOUND = "Lição não encontrada."
NO_ACCESS = "Você não tem acesso a esta lição."


@router.post("", response_model=Lesson, status_code=status.HTTP_201_CREATED)
async def create_lesson(
    lesson: LessonCreate,
    current_user: Annotated[CurrentUser, Depends(require_roles(UserRole.TEACHER))],
    db: AsyncSession = Depends(get_db),
):
    """Add a lesson to a module of one of the caller's courses."""
    instructor_id = await ModuleService(db).instructor_of(lesson.module_id)
    if instructor_id is None:
        raise HTTPException(status_code=404, detail="Módulo não encontrado.")
    authorize(
        current_user,
        owner_id=instructor_id,
        message="Você não tem permissão para criar lições neste módulo.",
    )
    return await LessonService(db).create(lesson.model_dump())


@router.get("", response_model=list[Lesson])
async def get_lessons(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    course_id: UUID | None = Query(None, alias="courseId"),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List the lessons visible to the caller."""
    service = LessonService(db)
    filters = {"course_id": course_id}

    if current_user.role is UserRole.STUDENT:
        if course_id is None:
            raise HTTPException(
                status_code=400, detail='Alunos devem informar o parâmetro "courseId".'
            )
        if not await EnrollmentService(db).is_enrolled(current_user.id, course_id):
            raise HTTPException(status_code=403, detail=NO_ACCESS)
    elif current_user.role is UserRole.TEACHER:
        filters["instructor_id"] = current_user.id

    return await service.find_all(filters, limit=page.limit, offset=page.offset)


@router.get("/{lesson_id}", response_model=Lesson)
async def get_lesson(
    lesson_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get a lesson by ID."""
    service = LessonService(db)
    course = await service.course_of(lesson_id)
    if course is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    course_id, _ = course
    if current_user.role is UserRole.STUDENT:
        if not await EnrollmentService(db).is_enrolled(current_user.id, course_id):
            logger.info(f"Student {current_user.id} denied lesson {lesson_id}")
            raise HTTPException(status_code=403, detail=NO_ACCESS)
    return await service.get(lesson_id)


@router.patch("/{lesson_id}", response_model=Lesson)
async def update_lesson(
    lesson_id: UUID,
    lesson_update: LessonUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Update a lesson of one of the caller's courses."""
    service = LessonService(db)
    course = await service.course_of(lesson_id)
    if course is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    _, instructor_id = course
    authorize(
        current_user,
        owner_id=instructor_id,
        roles=(UserRole.TEACHER,),
        message="Você não tem permissão para atualizar esta lição.",
    )
    return await service.update(lesson_id, lesson_update.changes())


@router.delete("/{lesson_id}", response_model=Message)
async def delete_lesson(
    lesson_id: UUID,
    current_user: Annotated[CurrentUser, Depends(require_roles(UserRole.ADMIN))],
    db: AsyncSession = Depends(get_db),
):
    """Delete a lesson."""
    await LessonService(db).remove(lesson_id)
    return Message(message="Lição removida com sucesso.")
