"""Course API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user, require_roles
from app.db import get_db
from app.models.common import Message
from app.models.course import Course, CourseCreate, CourseDetail, CourseUpdate
from app.models.user import CurrentUser, UserRole
from app.routers.params import Page
from app.services.courses import CourseService
from app.services.users import UserService
from app.utils.permissions import authorize

router = APIRouter(prefix="/courses", tags=["courses"])

NOT_FOUND = "Curso não encontrado."
OTHER_INSTRUCTOR = "Não autorizado a criar curso para outro instrutor."


async def _authorize_instructor(service: CourseService, course_id: UUID, current_user: CurrentUser) -> None:
    instructor_id = await service.instructor_of(course_id)
    if instructor_id is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    authorize(current_user, owner_id=instructor_id, roles=(UserRole.TEACHER,))


@router.get("", response_model=list[Course])
async def get_courses(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    title: str | None = Query(None, min_length=1, max_length=255),
    instructor_id: UUID | None = Query(None, alias="instructorId"),
    is_published: bool | None = Query(None, alias="isPublished"),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List courses. ``title`` matches case-insensitively anywhere in the title."""
    return await CourseService(db).find_all(
        {"title": title, "instructor_id": instructor_id, "is_published": is_published},
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{course_id}", response_model=CourseDetail)
async def get_course(
    course_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get a course with its modules and lessons."""
    course = await CourseService(db).get_detail(course_id)
    if not course:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return course


@router.post("", response_model=Course, status_code=status.HTTP_201_CREATED)
async def create_course(
    course: CourseCreate,
    current_user: Annotated[CurrentUser, Depends(require_roles(UserRole.TEACHER))],
    db: AsyncSession = Depends(get_db),
):
    """Create a course. Teachers can only create courses they teach."""
    authorize(current_user, owner_id=str(course.instructor_id), message=OTHER_INSTRUCTOR)
    if not await UserService(db).exists(course.instructor_id):
        raise HTTPException(status_code=404, detail="Instrutor não encontrado.")
    return await CourseService(db).create(course.model_dump())


@router.patch("/{course_id}", response_model=Course)
async def update_course(
    course_id: UUID,
    course_update: CourseUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Update a course."""
    service = CourseService(db)
    await _authorize_instructor(service, course_id, current_user)
    changes = course_update.changes()
    if "instructor_id" in changes:
        authorize(current_user, owner_id=str(changes["instructor_id"]), message=OTHER_INSTRUCTOR)
        if not await UserService(db).exists(changes["instructor_id"]):
            raise HTTPException(status_code=404, detail="Instrutor não encontrado.")
    return await service.update(course_id, changes)


@router.delete("/{course_id}", response_model=Message)
async def delete_course(
    course_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Delete a course with its modules and lessons."""
    service = CourseService(db)
    await _authorize_instructor(service, course_id, current_user)
    await service.remove(course_id)
    return Message(message="Curso removido com sucesso.")
