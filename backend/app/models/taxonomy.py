"""Topics, subtopics, tags, technologies and bancas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from .common import CamelModel, RequestModel, UpdateModel


class SubtopicCreate(RequestModel):
    name: str = Field(min_length=1, max_length=150)


class Subtopic(CamelModel):
    id: UUID
    name: str
    topic_id: UUID


class TopicCreate(RequestModel):
    name: str = Field(min_length=1, max_length=150)


class TopicUpdate(UpdateModel):
    name: str | None = Field(default=None, min_length=1, max_length=150)


class Topic(CamelModel):
    id: UUID
    name: str
    created_at: datetime
    subtopics: list[Subtopic] = Field(default_factory=list)


class TagCreate(RequestModel):
    name: str = Field(min_length=1, max_length=100)


class TagUpdate(UpdateModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)


class Tag(CamelModel):
    id: UUID
    name: str


class TechnologyCreate(RequestModel):
    name: str = Field(min_length=1, max_length=100)
    category: str | None = Field(default=None, max_length=100)


class TechnologyUpdate(UpdateModel):
    nullable_fields = frozenset({"category"})

    name: str | None = Field(default=None, min_length=1, max_length=100)
    category: str | None = Field(default=None, max_length=100)


class Technology(CamelModel):
    id: UUID
    name: str
    category: str | None = None


class BancaCreate(RequestModel):
    name: str = Field(min_length=1, max_length=100)
    full_name: str | None = Field(default=None, max_length=255)


class BancaUpdate(UpdateModel):
    nullable_fields = frozenset({"full_name"})

    name: str | None = Field(default=None, min_length=1, max_length=100)
    full_name: str | None = Field(default=None, max_length=255)


class Banca(CamelModel):
    id: UUID
    name: str
    full_name: str | None = None
