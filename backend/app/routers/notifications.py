"""Notification API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user, require_roles
from app.db import get_db
from app.models.common import Message
from app.models.notification import Notification, NotificationCreate, NotificationUpdate
from app.models.user import CurrentUser, UserRole
from app.routers.params import Page
from app.services.notifications import NotificationService
from app.services.users import UserService
from app.utils.permissions import authorize, scope_to_caller

router = APIRouter(prefix="/notifications", tags=["notifications"])

NOT_FOUND = "Notificação não encontrada."

admin_only = require_roles(UserRole.ADMIN)


@router.post("", response_model=Notification, status_code=status.HTTP_201_CREATED)
async def create_notification(
    notification: NotificationCreate,
    current_user: Annotated[CurrentUser, Depends(admin_only)],
    db: AsyncSession = Depends(get_db),
):
    """Send a notification to a user."""
    if not await UserService(db).exists(notification.user_id):
        raise HTTPException(status_code=404, detail="Usuário não encontrado.")
    return await NotificationService(db).create(notification.model_dump())


@router.get("", response_model=list[Notification])
async def get_notifications(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_id: UUID | None = Query(None, alias="userId"),
    is_read: bool | None = Query(None, alias="isRead"),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List notifications, newest first. Non-admins only see their own."""
    user_id = scope_to_caller(current_user, user_id)
    return await NotificationService(db).find_all(
        {"user_id": user_id, "is_read": is_read},
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{notification_id}", response_model=Notification)
async def get_notification(
    notification_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get a notification by ID."""
    notification = await NotificationService(db).get(notification_id)
    if not notification:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    authorize(current_user, owner_id=str(notification.user_id))
    return notification


@router.patch("/{notification_id}", response_model=Notification)
async def update_notification(
    notification_id: UUID,
    notification_update: NotificationUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Update a notification. Recipients may only mark it read or unread."""
    service = NotificationService(db)
    notification = await service.get(notification_id)
    if not notification:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    authorize(current_user, owner_id=str(notification.user_id))

    changes = notification_update.changes()
    if not current_user.is_admin and set(changes) - {"is_read"}:
        raise HTTPException(status_code=403, detail="Apenas o campo isRead pode ser alterado.")
    return await service.update(notification_id, changes)


@router.delete("/{notification_id}", response_model=Message)
async def delete_notification(
    notification_id: UUID,
    current_user: Annotated[CurrentUser, Depends(admin_only)],
    db: AsyncSession = Depends(get_db),
):
    """Delete a notification."""
    await NotificationService(db).remove(notification_id)
    return Message(message="Notificação removida com sucesso.")
