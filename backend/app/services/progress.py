"""Lesson progress and per-topic performance."""

from app.db.models import ProgressDB, TopicPerformanceDB, utc_now
from app.models.progress import COUNTS_MESSAGE, Progress, TopicPerformance

from .base import InvalidDataError, RecordNotFoundError, ResourceService


class ProgressService(ResourceService):
    """Service for tracking lesson completion."""

    model = ProgressDB
    schema = Progress
    not_found_message = "Progresso não encontrado."

    def _ordering(self) -> tuple:
        return (ProgressDB.updated_at.desc(), ProgressDB.id)

    @staticmethod
    def _stamp_completion(data: dict) -> dict:
        # Completing a lesson without a date records "now"; reopening clears it
        data = dict(data)
        if data.get("is_completed") is True and data.get("completed_at") is None:
            data["completed_at"] = utc_now()
        elif data.get("is_completed") is False and "completed_at" not in data:
            data["completed_at"] = None
        return data

    async def create(self, data: dict) -> Progress:
        return await super().create(self._stamp_completion(data))

    async def update(self, record_id, data: dict) -> Progress:
        return await super().update(record_id, self._stamp_completion(data))


def accuracy_of(correct_answers: int, total_questions: int) -> float:
    """Percentage of correct answers, rounded to two places."""
    if not total_questions:
        return 0.0
    return round(correct_answers / total_questions * 100, 2)


class TopicPerformanceService(ResourceService):
    model = TopicPerformanceDB
    schema = TopicPerformance
    not_found_message = "Desempenho não encontrado."

    def _ordering(self) -> tuple:
        return (TopicPerformanceDB.user_id, TopicPerformanceDB.topic_id)

    async def create(self, data: dict) -> TopicPerformance:
        data = dict(data)
        if "accuracy" not in data or data["accuracy"] is None:
            data["accuracy"] = accuracy_of(
                data.get("correct_answers", 0), data.get("total_questions", 0)
            )
        return await super().create(data)

    async def update(self, record_id, data: dict) -> TopicPerformance:
        """Apply the changes, keeping the counts consistent with the stored ones."""
        current = await self.get(record_id)
        if current is None:
            raise RecordNotFoundError(self.not_found_message)

        data = dict(data)
        correct = data.get("correct_answers", current.correct_answers)
        total = data.get("total_questions", current.total_questions)
        if correct > total:
            raise InvalidDataError("correctAnswers", COUNTS_MESSAGE)
        counts_changed = "correct_answers" in data or "total_questions" in data
        if counts_changed and "accuracy" not in data:
            data["accuracy"] = accuracy_of(correct, total)
        return await super().update(record_id, data)
