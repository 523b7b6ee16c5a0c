"""Topic API endpoints. Reading topics needs no login."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import require_roles
from app.db import get_db
from app.models.common import Message
from app.models.taxonomy import Subtopic, SubtopicCreate, Topic, TopicCreate, TopicUpdate
from app.models.user import CurrentUser, UserRole
from app.routers.params import Page
from app.services.taxonomy import TopicService

router = APIRouter(prefix="/topics", tags=["topics"])

NOT_FOUND = "Tópico não encontrado."

admin_only = require_roles(UserRole.ADMIN)


@router.get("", response_model=list[Topic] | Topic)
async def get_topics(
    id: UUID | None = Query(None),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List topics with their subtopics, or fetch one with ``?id=``."""
    service = TopicService(db)
    if id is not None:
        topic = await service.get(id)
        if not topic:
            raise HTTPException(status_code=404, detail=NOT_FOUND)
        return topic
    return await service.find_all(limit=page.limit, offset=page.offset)


@router.get("/{topic_id}", response_model=Topic)
async def get_topic(topic_id: UUID, db: AsyncSession = Depends(get_db)):
    """Get a topic by ID."""
    topic = await TopicService(db).get(topic_id)
    if not topic:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return topic


@router.post("", response_model=Topic, status_code=status.HTTP_201_CREATED)
async def create_topic(
    topic: TopicCreate,
    current_user: Annotated[CurrentUser, Depends(admin_only)],
    db: AsyncSession = Depends(get_db),
):
    """Create a topic."""
    return await TopicService(db).create(topic.model_dump())


@router.post("/{topic_id}/subtopics", response_model=Subtopic, status_code=status.HTTP_201_CREATED)
async def create_subtopic(
    topic_id: UUID,
    subtopic: SubtopicCreate,
    current_user: Annotated[CurrentUser, Depends(admin_only)],
    db: AsyncSession = Depends(get_db),
):
    """Add a subtopic to a topic."""
    service = TopicService(db)
    if not await service.exists(topic_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return await service.add_subtopic(topic_id, subtopic.model_dump())


@router.patch("/{topic_id}", response_model=Topic)
async def update_topic(
    topic_id: UUID,
    topic_update: TopicUpdate,
    current_user: Annotated[CurrentUser, Depends(admin_only)],
    db: AsyncSession = Depends(get_db),
):
    """Rename a topic."""
    return await TopicService(db).update(topic_id, topic_update.changes())


@router.delete("/{topic_id}", response_model=Message)
async def delete_topic(
    topic_id: UUID,
    current_user: Annotated[CurrentUser, Depends(admin_only)],
    db: AsyncSession = Depends(get_db),
):
    """Delete a topic with its subtopics and questions."""
    await TopicService(db).remove(topic_id)
    return Message(message="Tópico removido com sucesso.")
