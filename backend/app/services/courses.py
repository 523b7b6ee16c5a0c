"""Courses, modules and lessons."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from app.db.models import CourseDB, LessonDB, ModuleDB
from app.models.course import Course, CourseDetail, Lesson, Module

from .base import ConflictError, ResourceService

logger = logging.getLogger(__name__)

DUPLICATE_MODULE_ORDER = "Já existe um módulo com essa ordem neste curso."


class CourseService(ResourceService):
    model = CourseDB
    schema = Course
    not_found_message = "Curso não encontrado."

    def _ordering(self) -> tuple:
        return (CourseDB.created_at.desc(), CourseDB.id)

    def _filter_clauses(self, filters: dict) -> list:
        filters = dict(filters)
        title = filters.pop("title", None)
        clauses = super()._filter_clauses(filters)
        if title:
            clauses.append(CourseDB.title.icontains(title, autoescape=True))
        return clauses

    async def get_detail(self, course_id) -> CourseDetail | None:
        """A course with its modules and their lessons, in order."""
        result = await self.db.execute(
            select(CourseDB)
            .options(selectinload(CourseDB.modules).selectinload(ModuleDB.lessons))
            .where(CourseDB.id == str(course_id))
            .execution_options(populate_existing=True)
        )
        course = result.scalar_one_or_none()
        if course is None:
            return None
        return CourseDetail.model_validate(course)

    async def instructor_of(self, course_id) -> str | None:
        result = await self.db.execute(
            select(CourseDB.instructor_id).where(CourseDB.id == str(course_id))
        )
        return result.scalar_one_or_none()


class ModuleService(ResourceService):
    """Modules keep a unique ``order`` within their course."""

    model = ModuleDB
    schema = Module
    not_found_message = "Módulo não encontrado."

    def _ordering(self) -> tuple:
        return (ModuleDB.course_id, ModuleDB.order)

    async def create(self, data: dict) -> Module:
        try:
            return await super().create(data)
        except IntegrityError as e:
            logger.warning(f"Module order conflict on course {data.get('course_id')}")
            raise ConflictError(DUPLICATE_MODULE_ORDER) from e

    async def update(self, record_id, data: dict) -> Module:
        try:
            return await super().update(record_id, data)
        except IntegrityError as e:
            logger.warning(f"Module order conflict on module {record_id}")
            raise ConflictError(DUPLICATE_MODULE_ORDER) from e

    async def instructor_of(self, module_id) -> str | None:
        result = await self.db.execute(
            select(CourseDB.instructor_id)
            .join(ModuleDB, ModuleDB.course_id == CourseDB.id)
            .where(ModuleDB.id == str(module_id))
        )
        return result.scalar_one_or_none()


class LessonService(ResourceService):
    model = LessonDB
    schema = Lesson
    not_found_message = "Lição não encontrada."

    def _select(self):
        return select(LessonDB).join(ModuleDB, LessonDB.module_id == ModuleDB.id)

    def _ordering(self) -> tuple:
        return (ModuleDB.course_id, ModuleDB.order, LessonDB.order, LessonDB.id)

    def _filter_clauses(self, filters: dict) -> list:
        filters = dict(filters)
        course_id = filters.pop("course_id", None)
        instructor_id = filters.pop("instructor_id", None)
        clauses = super()._filter_clauses(filters)
        if course_id is not None:
            clauses.append(ModuleDB.course_id == str(course_id))
        if instructor_id is not None:
            clauses.append(
                ModuleDB.course_id.in_(
                    select(CourseDB.id).where(CourseDB.instructor_id == str(instructor_id))
                )
            )
        return clauses

    async def course_of(self, lesson_id) -> tuple[str, str] | None:
        """``(course_id, instructor_id)`` of the lesson's course."""
        result = await self.db.execute(
            select(CourseDB.id, CourseDB.instructor_id)
            .join(ModuleDB, ModuleDB.course_id == CourseDB.id)
            .join(LessonDB, LessonDB.module_id == ModuleDB.id)
            .where(LessonDB.id == str(lesson_id))
        )
        row = result.first()
        return tuple(row) if row is not None else None
