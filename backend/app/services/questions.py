"""Question bank service for managing and retrieving questions."""

import logging

from sqlalchemy.orm import selectinload

from app.db.models import BancaDB, OptionDB, QuestionDB, SubtopicDB, TagDB, TechnologyDB, TopicDB
from app.models.question import Question

from .base import RecordNotFoundError, ResourceService, column_values
from .taxonomy import TagService, TechnologyService

logger = logging.getLogger(__name__)


class QuestionService(ResourceService):
    """Service for managing the question bank.

    A question is written together with its options, tags and technologies.
    Tags are referenced by name and created on first use; technologies must
    already exist.
    """

    model = QuestionDB
    schema = Question
    not_found_message = "Questão não encontrada."
    load_options = (
        selectinload(QuestionDB.options),
        selectinload(QuestionDB.tags),
        selectinload(QuestionDB.technologies),
    )

    def _ordering(self) -> tuple:
        return (QuestionDB.created_at.desc(), QuestionDB.id)

    def _filter_clauses(self, filters: dict) -> list:
        filters = dict(filters)
        technology_id = filters.pop("technology_id", None)
        tag_id = filters.pop("tag_id", None)

        clauses = super()._filter_clauses(filters)
        if technology_id is not None:
            clauses.append(QuestionDB.technologies.any(TechnologyDB.id == str(technology_id)))
        if tag_id is not None:
            clauses.append(QuestionDB.tags.any(TagDB.id == str(tag_id)))
        return clauses

    async def _check_references(self, data: dict) -> None:
        """Referenced taxonomy rows must exist."""
        references = (
            ("topic_id", TopicDB, "Tópico não encontrado."),
            ("subtopic_id", SubtopicDB, "Subtópico não encontrado."),
            ("banca_id", BancaDB, "Banca não encontrada."),
        )
        for field, model, message in references:
            value = data.get(field)
            if value is not None and await self.db.get(model, str(value)) is None:
                raise RecordNotFoundError(message)

    async def _apply_relations(self, row: QuestionDB, relations: dict) -> None:
        if relations.get("options") is not None:
            row.options = [OptionDB(**column_values(option)) for option in relations["options"]]
        if relations.get("tags") is not None:
            row.tags = await TagService(self.db).connect_or_create(relations["tags"])
        if relations.get("technologies") is not None:
            technologies = await TechnologyService(self.db).rows(relations["technologies"])
            if technologies is None:
                raise RecordNotFoundError("Tecnologia não encontrada.")
            row.technologies = technologies

    @staticmethod
    def _split(data: dict) -> tuple[dict, dict]:
        data = dict(data)
        relations = {key: data.pop(key, None) for key in ("options", "tags", "technologies")}
        return data, relations

    async def create(self, data: dict) -> Question:
        """Create a question with its options, tags and technologies."""
        fields, relations = self._split(data)
        await self._check_references(fields)

        row = QuestionDB(**column_values({k: v for k, v in fields.items() if v is not None}))
        row.options = []
        row.tags = []
        row.technologies = []
        await self._apply_relations(row, relations)
        self.db.add(row)
        await self.db.flush()

        logger.info(f"Created question {row.id} with {len(row.options)} options")
        return self._to_schema(await self._get_row(row.id))

    async def update(self, record_id, data: dict) -> Question:
        """Update scalar fields; a supplied list replaces the stored set."""
        fields, relations = self._split(data)
        row = await self._get_row(record_id)
        if row is None:
            raise RecordNotFoundError(self.not_found_message)
        await self._check_references(fields)
        await self._apply_relations(row, relations)
        await self.db.flush()
        return await super().update(record_id, fields)
