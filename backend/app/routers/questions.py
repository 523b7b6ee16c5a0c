"""Question API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user, require_roles
from app.db import get_db
from app.models.common import Message
from app.models.question import Question, QuestionCreate, QuestionUpdate
from app.models.user import CurrentUser, UserRole
from app.routers.params import Page
from app.services.questions import QuestionService
from app.services.taxonomy import TopicService
from app.utils.permissions import authorize

router = APIRouter(prefix="/questions", tags=["questions"])

NOT_FOUND = "Questão não encontrada."


async def _get_or_404(service: QuestionService, question_id: UUID) -> Question:
    question = await service.get(question_id)
    if not question:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return question


async def _check_subtopic(db: AsyncSession, subtopic_id, topic_id) -> None:
    if subtopic_id is None:
        return
    if not await TopicService(db).exists(topic_id):
        raise HTTPException(status_code=404, detail="Tópico não encontrado.")
    if not await TopicService(db).subtopic_belongs_to(subtopic_id, topic_id):
        raise HTTPException(status_code=400, detail="O subtópico não pertence ao tópico informado.")


def _authorize_author(current_user: CurrentUser, question: Question) -> None:
    # Questions without an author can only be managed by admins
    author_id = str(question.author_id) if question.author_id else ""
    authorize(current_user, owner_id=author_id)


@router.get("", response_model=list[Question] | Question)
async def get_questions(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    id: UUID | None = Query(None),
    topic_id: UUID | None = Query(None, alias="topicId"),
    subtopic_id: UUID | None = Query(None, alias="subtopicId"),
    banca_id: UUID | None = Query(None, alias="bancaId"),
    technology_id: UUID | None = Query(None, alias="technologyId"),
    tag_id: UUID | None = Query(None, alias="tagId"),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """Get questions with optional filtering, or one with ``?id=``."""
    service = QuestionService(db)
    if id is not None:
        return await _get_or_404(service, id)

    return await service.find_all(
        {
            "topic_id": topic_id,
            "subtopic_id": subtopic_id,
            "banca_id": banca_id,
            "technology_id": technology_id,
            "tag_id": tag_id,
        },
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{question_id}", response_model=Question)
async def get_question(
    question_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get a single question with its options, tags and technologies."""
    return await _get_or_404(QuestionService(db), question_id)


@router.post("", response_model=Question, status_code=status.HTTP_201_CREATED)
async def create_question(
    question: QuestionCreate,
    current_user: Annotated[CurrentUser, Depends(require_roles(UserRole.TEACHER))],
    db: AsyncSession = Depends(get_db),
):
    """Create a new question authored by the caller."""
    await _check_subtopic(db, question.subtopic_id, question.topic_id)
    data = question.model_dump()
    data["author_id"] = current_user.id
    return await QuestionService(db).create(data)


@router.patch("/{question_id}", response_model=Question)
async def update_question(
    question_id: UUID,
    question_update: QuestionUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Update a question. Supplied options, tags or technologies replace the stored ones."""
    service = QuestionService(db)
    question = await _get_or_404(service, question_id)
    _authorize_author(current_user, question)

    changes = question_update.changes()
    if "subtopic_id" in changes or "topic_id" in changes:
        subtopic_id = changes["subtopic_id"] if "subtopic_id" in changes else question.subtopic_id
        await _check_subtopic(db, subtopic_id, changes.get("topic_id", question.topic_id))
    return await service.update(question_id, changes)


@router.delete("/{question_id}", response_model=Message)
async def delete_question(
    question_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Delete a question."""
    service = QuestionService(db)
    _authorize_author(current_user, await _get_or_404(service, question_id))
    await service.remove(question_id)
    return Message(message="Questão removida com sucesso.")
