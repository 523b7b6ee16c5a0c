"""Course review service."""

from app.db.models import ReviewDB
from app.models.review import Review

from .base import ResourceService


class ReviewService(ResourceService):
    model = ReviewDB
    schema = Review
    not_found_message = "Avaliação não encontrada."

    def _ordering(self) -> tuple:
        return (ReviewDB.created_at.desc(), ReviewDB.id)
