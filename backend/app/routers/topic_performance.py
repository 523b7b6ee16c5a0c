"""Per-topic performance API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user, require_roles
from app.db import get_db
from app.models.common import Message
from app.models.progress import TopicPerformance, TopicPerformanceCreate, TopicPerformanceUpdate
from app.models.user import CurrentUser, UserRole
from app.routers.params import Page
from app.services.progress import TopicPerformanceService
from app.services.taxonomy import TopicService
from app.services.users import UserService
from app.utils.permissions import authorize, scope_to_caller

router = APIRouter(prefix="/user-topic-performance", tags=["user-topic-performance"])

NOT_FOUND = "Desempenho não encontrado."

admin_only = require_roles(UserRole.ADMIN)


@router.get("", response_model=list[TopicPerformance])
async def get_performances(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_id: UUID | None = Query(None, alias="userId"),
    topic_id: UUID | None = Query(None, alias="topicId"),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List per-topic statistics. Non-admins only see their own."""
    user_id = scope_to_caller(current_user, user_id)
    return await TopicPerformanceService(db).find_all(
        {"user_id": user_id, "topic_id": topic_id},
        limit=page.limit,
        offset=page.offset,
    )


@router.get("/{performance_id}", response_model=TopicPerformance)
async def get_performance(
    performance_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get one statistics record."""
    performance = await TopicPerformanceService(db).get(performance_id)
    if not performance:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    authorize(current_user, owner_id=str(performance.user_id))
    return performance


@router.post("", response_model=TopicPerformance, status_code=status.HTTP_201_CREATED)
async def create_performance(
    performance: TopicPerformanceCreate,
    current_user: Annotated[CurrentUser, Depends(admin_only)],
    db: AsyncSession = Depends(get_db),
):
    """Create a statistics record. Accuracy is derived from the counts when omitted."""
    if not await UserService(db).exists(performance.user_id):
        raise HTTPException(status_code=404, detail="Usuário não encontrado.")
    if not await TopicService(db).exists(performance.topic_id):
        raise HTTPException(status_code=404, detail="Tópico não encontrado.")
    return await TopicPerformanceService(db).create(performance.model_dump())


@router.patch("/{performance_id}", response_model=TopicPerformance)
async def update_performance(
    performance_id: UUID,
    performance_update: TopicPerformanceUpdate,
    current_user: Annotated[CurrentUser, Depends(admin_only)],
    db: AsyncSession = Depends(get_db),
):
    """Update a statistics record."""
    return await TopicPerformanceService(db).update(performance_id, performance_update.changes())


@router.delete("/{performance_id}", response_model=Message)
async def delete_performance(
    performance_id: UUID,
    current_user: Annotated[CurrentUser, Depends(admin_only)],
    db: AsyncSession = Depends(get_db),
):
    """Delete a statistics record."""
    await TopicPerformanceService(db).remove(performance_id)
    return Message(message="Desempenho removido com sucesso.")
