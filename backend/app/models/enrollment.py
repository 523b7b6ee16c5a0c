"""Enrollment models."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from .common import CamelModel, RequestModel, UpdateModel


class EnrollmentStatus(str, Enum):
    """Enrollment label. Transitions between values are not restricted."""

    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class EnrollmentCreate(RequestModel):
    user_id: UUID
    course_id: UUID
    status: EnrollmentStatus = EnrollmentStatus.ACTIVE


class EnrollmentUpdate(UpdateModel):
    user_id: UUID | None = None
    course_id: UUID | None = None
    status: EnrollmentStatus | None = None


class Enrollment(CamelModel):
    id: UUID
    user_id: UUID
    course_id: UUID
    status: EnrollmentStatus
    enrolled_at: datetime
