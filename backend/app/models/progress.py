"""Lesson progress and per-topic performance models."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, model_validator

from .common import CamelModel, RequestModel, UpdateModel

COUNTS_MESSAGE = "correctAnswers não pode ser maior que totalQuestions."


class ProgressCreate(RequestModel):
    """Progress of a user on a lesson."""

    user_id: UUID
    lesson_id: UUID
    is_completed: bool = False
    completed_at: datetime | None = None


class ProgressUpdate(UpdateModel):
    nullable_fields = frozenset({"completed_at"})

    is_completed: bool | None = None
    completed_at: datetime | None = None


class Progress(CamelModel):
    id: UUID
    user_id: UUID
    lesson_id: UUID
    is_completed: bool
    completed_at: datetime | None = None
    updated_at: datetime


class TopicPerformanceCreate(RequestModel):
    """Aggregated answer statistics of a user on a topic."""

    user_id: UUID
    topic_id: UUID
    correct_answers: int = Field(default=0, ge=0)
    total_questions: int = Field(default=0, ge=0)
    accuracy: float | None = Field(default=None, ge=0, le=100)
    last_attempt: datetime | None = None

    @model_validator(mode="after")
    def _check_counts(self):
        if self.correct_answers > self.total_questions:
            raise ValueError(COUNTS_MESSAGE)
        return self


class TopicPerformanceUpdate(UpdateModel):
    nullable_fields = frozenset({"last_attempt"})

    correct_answers: int | None = Field(default=None, ge=0)
    total_questions: int | None = Field(default=None, ge=0)
    accuracy: float | None = Field(default=None, ge=0, le=100)
    last_attempt: datetime | None = None


class TopicPerformance(CamelModel):
    id: UUID
    user_id: UUID
    topic_id: UUID
    correct_answers: int
    total_questions: int
    accuracy: float
    last_attempt: datetime | None = None
