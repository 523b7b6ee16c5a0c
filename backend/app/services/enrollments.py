"""Enrollment service."""

import logging

from sqlalchemy import select

from app.db.models import EnrollmentDB
from app.models.enrollment import Enrollment, EnrollmentStatus

from .base import ResourceService

logger = logging.getLogger(__name__)


class EnrollmentService(ResourceService):
    """Enrollments of users in courses. Status changes are not restricted."""

    model = EnrollmentDB
    schema = Enrollment
    not_found_message = "Matrícula não encontrada."

    def _ordering(self) -> tuple:
        return (EnrollmentDB.enrolled_at.desc(), EnrollmentDB.id)

    async def create(self, data: dict) -> Enrollment:
        enrollment = await super().create(data)
        logger.info(f"Enrolled user {enrollment.user_id} in course {enrollment.course_id}")
        return enrollment

    async def is_enrolled(self, user_id, course_id) -> bool:
        """Whether the user holds a non-cancelled enrollment in the course."""
        result = await self.db.execute(
            select(EnrollmentDB.id).where(
                EnrollmentDB.user_id == str(user_id),
                EnrollmentDB.course_id == str(course_id),
                EnrollmentDB.status != EnrollmentStatus.CANCELLED.value,
            )
        )
        return result.first() is not None
