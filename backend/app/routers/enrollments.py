"""Enrollment API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user, require_roles
from app.db import get_db
from app.models.common import Message
from app.models.enrollment import Enrollment, EnrollmentCreate, EnrollmentStatus, EnrollmentUpdate
from app.models.user import CurrentUser, UserRole
from app.routers.params import Page
from app.services.courses import CourseService
from app.services.enrollments import EnrollmentService
from app.services.users import UserService
from app.utils.permissions import authorize, scope_to_caller

router = APIRouter(prefix="/enrollments", tags=["enrollments"])

NOT_FOUND = "Matrícula não encontrada."

admin_only = require_roles(UserRole.ADMIN)


async def _check_references(db: AsyncSession, user_id: UUID | None, course_id: UUID | None) -> None:
    if user_id is not None and not await UserService(db).exists(user_id):
        raise HTTPException(status_code=404, detail="Usuário não encontrado.")
    if course_id is not None and not await CourseService(db).exists(course_id):
        raise HTTPException(status_code=404, detail="Curso não encontrado.")


@router.post("", response_model=Enrollment, status_code=status.HTTP_201_CREATED)
async def create_enrollment(
    enrollment: EnrollmentCreate,
    current_user: Annotated[CurrentUser, Depends(admin_only)],
    db: AsyncSession = Depends(get_db),
):
    """Enroll a user in a course."""
    await _check_references(db, enrollment.user_id, enrollment.course_id)
    return await EnrollmentService(db).create(enrollment.model_dump())


@router.get("", response_model=list[Enrollment])
async def get_enrollments(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_id: UUID | None = Query(None, alias="userId"),
    course_id: UUID | None = Query(None, alias="courseId"),
    enrollment_status: EnrollmentStatus | None = Query(None, alias="status"),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List enrollments. Non-admins only see their own."""
    user_id = scope_to_caller(current_user, user_id)
    return await EnrollmentService(db).find_all(
        {"user_id": user_id, "course_id": course_id, "status": enrollment_status},
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{enrollment_id}", response_model=Enrollment)
async def get_enrollment(
    enrollment_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get an enrollment by ID."""
    enrollment = await EnrollmentService(db).get(enrollment_id)
    if not enrollment:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    authorize(current_user, owner_id=str(enrollment.user_id))
    return enrollment


@router.patch("/{enrollment_id}", response_model=Enrollment)
async def update_enrollment(
    enrollment_id: UUID,
    enrollment_update: EnrollmentUpdate,
    current_user: Annotated[CurrentUser, Depends(admin_only)],
    db: AsyncSession = Depends(get_db),
):
    """Update an enrollment. Any status may follow any other."""
    changes = enrollment_update.changes()
    await _check_references(db, changes.get("user_id"), changes.get("course_id"))
    return await EnrollmentService(db).update(enrollment_id, changes)


@router.delete("/{enrollment_id}", response_model=Message)
async def delete_enrollment(
    enrollment_id: UUID,
    current_user: Annotated[CurrentUser, Depends(admin_only)],
    db: AsyncSession = Depends(get_db),
):
    """Delete an enrollment."""
    await EnrollmentService(db).remove(enrollment_id)
    return Message(message="Matrícula removida com sucesso.")
