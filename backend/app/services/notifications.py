"""Notification service."""

from app.db.models import NotificationDB
from app.models.notification import Notification

from .base import ResourceService


class NotificationService(ResourceService):
    model = NotificationDB
    schema = Notification
    not_found_message = "Notificação não encontrada."

    def _ordering(self) -> tuple:
        return (NotificationDB.created_at.desc(), NotificationDB.id)
