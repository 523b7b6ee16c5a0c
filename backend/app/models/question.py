"""Question-related Pydantic models."""

from datetime import datetime
from enum import Enum
from typing import Annotated
from uuid import UUID

from pydantic import Field, HttpUrl

from .common import CamelModel, RequestModel, UpdateModel
from .taxonomy import Tag, Technology

TagName = Annotated[str, Field(min_length=1, max_length=100)]


class Difficulty(str, Enum):
    """Question difficulty."""

    FACIL = "FACIL"
    MEDIO = "MEDIO"
    DIFICIL = "DIFICIL"


class QuestionType(str, Enum):
    """Question formats found in public-exam papers."""

    MULTIPLA_ESCOLHA = "MULTIPLA_ESCOLHA"
    CERTO_ERRADO = "CERTO_ERRADO"
    DISCURSIVA = "DISCURSIVA"
    CODIGO = "CODIGO"


class OptionCreate(RequestModel):
    """Answer option submitted with a question."""

    text: str = Field(min_length=1)
    is_correct: bool
    order: int = Field(ge=0)


class Option(CamelModel):
    id: UUID
    text: str
    is_correct: bool
    order: int


class QuestionCreate(RequestModel):
    """Model for creating a new question.

    ``technologies`` are technology ids, ``tags`` are tag names (created when
    missing). The author is always the caller.
    """

    text: str = Field(min_length=1)
    difficulty: Difficulty
    question_type: QuestionType
    topic_id: UUID
    subtopic_id: UUID | None = None
    banca_id: UUID | None = None
    source_concurso: str | None = Field(default=None, max_length=255)
    source_cargo: str | None = Field(default=None, max_length=255)
    source_year: int | None = Field(default=None, ge=1900, le=2100)
    source_url: HttpUrl | None = None
    explanation: str | None = None
    technologies: list[UUID] | None = None
    tags: list[TagName] | None = None
    options: list[OptionCreate] = Field(min_length=1)


class QuestionUpdate(UpdateModel):
    """Partial question update. A supplied list replaces the stored set."""

    nullable_fields = frozenset(
        {
            "subtopic_id",
            "banca_id",
            "source_concurso",
            "source_cargo",
            "source_year",
            "source_url",
            "explanation",
        }
    )

    text: str | None = Field(default=None, min_length=1)
    difficulty: Difficulty | None = None
    question_type: QuestionType | None = None
    topic_id: UUID | None = None
    subtopic_id: UUID | None = None
    banca_id: UUID | None = None
    source_concurso: str | None = Field(default=None, max_length=255)
    source_cargo: str | None = Field(default=None, max_length=255)
    source_year: int | None = Field(default=None, ge=1900, le=2100)
    source_url: HttpUrl | None = None
    explanation: str | None = None
    technologies: list[UUID] | None = None
    tags: list[TagName] | None = None
    options: list[OptionCreate] | None = Field(default=None, min_length=1)


class Question(CamelModel):
    """Complete question model."""

    id: UUID
    text: str
    difficulty: Difficulty
    question_type: QuestionType
    topic_id: UUID
    subtopic_id: UUID | None = None
    banca_id: UUID | None = None
    author_id: UUID | None = None
    source_concurso: str | None = None
    source_cargo: str | None = None
    source_year: int | None = None
    source_url: str | None = None
    explanation: str | None = None
    created_at: datetime
    updated_at: datetime
    options: list[Option] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    technologies: list[Technology] = Field(default_factory=list)
