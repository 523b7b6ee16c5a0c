"""Topics, subtopics, tags, technologies and bancas."""

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.db.models import BancaDB, SubtopicDB, TagDB, TechnologyDB, TopicDB
from app.models.taxonomy import Banca, Subtopic, Tag, Technology, Topic

from .base import ResourceService, column_values


class TopicService(ResourceService):
    model = TopicDB
    schema = Topic
    not_found_message = "Tópico não encontrado."
    load_options = (selectinload(TopicDB.subtopics),)

    def _ordering(self) -> tuple:
        return (TopicDB.name,)

    async def add_subtopic(self, topic_id, data: dict) -> Subtopic:
        """Create a subtopic under an existing topic."""
        subtopic = SubtopicDB(topic_id=str(topic_id), **column_values(data))
        self.db.add(subtopic)
        await self.db.flush()
        return Subtopic.model_validate(subtopic)

    async def subtopic_belongs_to(self, subtopic_id, topic_id) -> bool:
        result = await self.db.execute(
            select(SubtopicDB.id).where(
                SubtopicDB.id == str(subtopic_id), SubtopicDB.topic_id == str(topic_id)
            )
        )
        return result.first() is not None


class TagService(ResourceService):
    model = TagDB
    schema = Tag
    not_found_message = "Tag não encontrada."

    def _ordering(self) -> tuple:
        return (TagDB.name,)

    async def connect_or_create(self, names: list[str]) -> list[TagDB]:
        """Rows for the given names, creating the ones that do not exist yet."""
        wanted = list(dict.fromkeys(name.strip() for name in names if name.strip()))
        if not wanted:
            return []

        result = await self.db.execute(select(TagDB).where(TagDB.name.in_(wanted)))
        existing = {tag.name: tag for tag in result.scalars().all()}
        tags = []
        for name in wanted:
            tag = existing.get(name)
            if tag is None:
                tag = TagDB(name=name)
                self.db.add(tag)
            tags.append(tag)
        return tags


class TechnologyService(ResourceService):
    model = TechnologyDB
    schema = Technology
    not_found_message = "Tecnologia não encontrada."

    def _ordering(self) -> tuple:
        return (TechnologyDB.name,)

    async def rows(self, technology_ids: list) -> list[TechnologyDB] | None:
        """Rows for the given ids, or None when any of them is unknown."""
        wanted = list(dict.fromkeys(str(tech_id) for tech_id in technology_ids))
        if not wanted:
            return []
        result = await self.db.execute(select(TechnologyDB).where(TechnologyDB.id.in_(wanted)))
        found = {tech.id: tech for tech in result.scalars().all()}
        if len(found) != len(wanted):
            return None
        return [found[tech_id] for tech_id in wanted]


class BancaService(ResourceService):
    model = BancaDB
    schema = Banca
    not_found_message = "Banca não encontrada."

    def _ordering(self) -> tuple:
        return (BancaDB.name,)
