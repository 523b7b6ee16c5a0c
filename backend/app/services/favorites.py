"""Favorite questions, keyed by (user, question)."""

from sqlalchemy import and_

from app.db.models import FavoriteQuestionDB
from app.models.favorite import FavoriteQuestion

from .base import ResourceService


class FavoriteQuestionService(ResourceService):
    model = FavoriteQuestionDB
    schema = FavoriteQuestion
    not_found_message = "Questão favorita não encontrada."

    def _key_clause(self, record_id):
        user_id, question_id = record_id
        return and_(
            FavoriteQuestionDB.user_id == str(user_id),
            FavoriteQuestionDB.question_id == str(question_id),
        )

    def _row_key(self, row):
        return (row.user_id, row.question_id)

    def _ordering(self) -> tuple:
        return (FavoriteQuestionDB.marked_at.desc(), FavoriteQuestionDB.question_id)
