"""Answers and answer attempts."""

from sqlalchemy import select

from app.db.models import AnswerAttemptDB, AnswerDB
from app.models.answer import Answer, AnswerAttempt

from .base import ResourceService


class AnswerService(ResourceService):
    model = AnswerDB
    schema = Answer
    not_found_message = "Resposta não encontrada."

    def _ordering(self) -> tuple:
        return (AnswerDB.answered_at.desc(), AnswerDB.id)

    async def owner_of(self, answer_id) -> str | None:
        result = await self.db.execute(select(AnswerDB.user_id).where(AnswerDB.id == str(answer_id)))
        return result.scalar_one_or_none()


class AnswerAttemptService(ResourceService):
    """Attempts are owned through their answer's user."""

    model = AnswerAttemptDB
    schema = AnswerAttempt
    not_found_message = "Tentativa de resposta não encontrada."

    def _select(self):
        return select(AnswerAttemptDB).join(AnswerDB, AnswerAttemptDB.answer_id == AnswerDB.id)

    def _ordering(self) -> tuple:
        return (AnswerAttemptDB.attempt_at.desc(), AnswerAttemptDB.id)

    def _filter_clauses(self, filters: dict) -> list:
        clauses = []
        if filters.get("user_id") is not None:
            clauses.append(AnswerDB.user_id == str(filters["user_id"]))
        if filters.get("question_id") is not None:
            clauses.append(AnswerDB.question_id == str(filters["question_id"]))
        if filters.get("is_correct") is not None:
            clauses.append(AnswerAttemptDB.is_correct == filters["is_correct"])
        return clauses

    async def owner_of(self, attempt_id) -> str | None:
        result = await self.db.execute(
            select(AnswerDB.user_id)
            .join(AnswerAttemptDB, AnswerAttemptDB.answer_id == AnswerDB.id)
            .where(AnswerAttemptDB.id == str(attempt_id))
        )
        return result.scalar_one_or_none()
