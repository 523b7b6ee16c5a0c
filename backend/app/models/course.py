"""Course, module and lesson models."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import Field, HttpUrl

from .common import CamelModel, RequestModel, UpdateModel


class LessonType(str, Enum):
    TEXT = "TEXT"
    VIDEO = "VIDEO"
    QUIZ = "QUIZ"


class LessonCreate(RequestModel):
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    lesson_type: LessonType
    video_url: HttpUrl | None = None
    duration: int | None = Field(default=None, ge=0, description="Seconds")
    module_id: UUID
    order: int = Field(ge=0)


class LessonUpdate(UpdateModel):
    nullable_fields = frozenset({"video_url", "duration"})

    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = Field(default=None, min_length=1)
    lesson_type: LessonType | None = None
    video_url: HttpUrl | None = None
    duration: int | None = Field(default=None, ge=0)
    order: int | None = Field(default=None, ge=0)


class Lesson(CamelModel):
    id: UUID
    module_id: UUID
    title: str
    content: str
    lesson_type: LessonType
    video_url: str | None = None
    duration: int | None = None
    order: int


class ModuleCreate(RequestModel):
    title: str = Field(min_length=1, max_length=255)
    course_id: UUID
    order: int = Field(ge=0)
    description: str | None = None


class ModuleUpdate(UpdateModel):
    nullable_fields = frozenset({"description"})

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    order: int | None = Field(default=None, ge=0)


class Module(CamelModel):
    id: UUID
    course_id: UUID
    title: str
    description: str | None = None
    order: int


class ModuleDetail(Module):
    lessons: list[Lesson] = Field(default_factory=list)


class CourseCreate(RequestModel):
    """Model for creating a course. Teachers may only create their own."""

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    instructor_id: UUID
    thumbnail: HttpUrl | None = None
    price: float | None = Field(default=None, ge=0)
    is_published: bool = False


class CourseUpdate(UpdateModel):
    nullable_fields = frozenset({"thumbnail", "price"})

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    instructor_id: UUID | None = None
    thumbnail: HttpUrl | None = None
    price: float | None = Field(default=None, ge=0)
    is_published: bool | None = None


class Course(CamelModel):
    id: UUID
    title: str
    description: str
    instructor_id: UUID
    thumbnail: str | None = None
    price: float | None = None
    is_published: bool
    created_at: datetime
    updated_at: datetime


class CourseDetail(Course):
    modules: list[ModuleDetail] = Field(default_factory=list)
