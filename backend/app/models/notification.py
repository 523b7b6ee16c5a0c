"""Notification models."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from .common import CamelModel, RequestModel, UpdateModel


class NotificationCreate(RequestModel):
    user_id: UUID
    title: str = Field(min_length=1, max_length=255)
    message: str = Field(min_length=1)
    is_read: bool = False


class NotificationUpdate(UpdateModel):
    """Admins may change any field; the recipient only ``is_read``."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    message: str | None = Field(default=None, min_length=1)
    is_read: bool | None = None


class Notification(CamelModel):
    id: UUID
    user_id: UUID
    title: str
    message: str
    is_read: bool
    created_at: datetime
