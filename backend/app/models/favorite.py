"""Favorite question models."""

from datetime import datetime
from uuid import UUID

from .common import CamelModel, RequestModel, UpdateModel


class FavoriteQuestionCreate(RequestModel):
    user_id: UUID
    question_id: UUID


class FavoriteQuestionUpdate(UpdateModel):
    marked_at: datetime | None = None


class FavoriteQuestion(CamelModel):
    user_id: UUID
    question_id: UUID
    marked_at: datetime
