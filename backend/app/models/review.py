"""Course review models."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from .common import CamelModel, RequestModel, UpdateModel


class ReviewCreate(RequestModel):
    user_id: UUID
    course_id: UUID
    rating: int = Field(ge=1, le=5)
    comment: str | None = Field(default=None, max_length=2000)


class ReviewUpdate(UpdateModel):
    nullable_fields = frozenset({"comment"})

    rating: int | None = Field(default=None, ge=1, le=5)
    comment: str | None = Field(default=None, max_length=2000)


class Review(CamelModel):
    id: UUID
    user_id: UUID
    course_id: UUID
    rating: int
    comment: str | None = None
    created_at: datetime
