"""Answer and answer-attempt models."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from .common import CamelModel, RequestModel, UpdateModel


class AnswerCreate(RequestModel):
    """A user's answer to a question."""

    user_id: UUID
    question_id: UUID
    selected_option: str | None = Field(default=None, min_length=1, max_length=255)
    text_answer: str | None = Field(default=None, min_length=1)
    is_correct: bool | None = None
    time_spent_seconds: int | None = Field(default=None, ge=0)


class AnswerUpdate(UpdateModel):
    nullable_fields = frozenset({"selected_option", "text_answer", "is_correct", "time_spent_seconds"})

    selected_option: str | None = Field(default=None, min_length=1, max_length=255)
    text_answer: str | None = Field(default=None, min_length=1)
    is_correct: bool | None = None
    time_spent_seconds: int | None = Field(default=None, ge=0)


class Answer(CamelModel):
    id: UUID
    user_id: UUID
    question_id: UUID
    selected_option: str | None = None
    text_answer: str | None = None
    is_correct: bool | None = None
    time_spent_seconds: int | None = None
    answered_at: datetime


class AnswerAttemptCreate(RequestModel):
    answer_id: UUID
    is_correct: bool
    time_spent: float | None = Field(default=None, ge=0)
    attempt_at: datetime | None = None


class AnswerAttemptUpdate(UpdateModel):
    nullable_fields = frozenset({"time_spent"})

    is_correct: bool | None = None
    time_spent: float | None = Field(default=None, ge=0)
    attempt_at: datetime | None = None


class AnswerAttempt(CamelModel):
    id: UUID
    answer_id: UUID
    is_correct: bool
    time_spent: float | None = None
    attempt_at: datetime
