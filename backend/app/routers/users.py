"""User API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user, require_roles
from app.db import get_db
from app.models.common import Message
from app.models.user import CurrentUser, User, UserCreate, UserRole, UserUpdate
from app.routers.params import Page
from app.services.users import UserService
from app.utils.permissions import authorize

router = APIRouter(prefix="/users", tags=["users"])

NOT_FOUND = "Usuário não encontrado."


@router.get("", response_model=list[User] | User)
async def get_users(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    id: UUID | None = Query(None),
    page: Page = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List users (admin), or fetch one with ``?id=``."""
    service = UserService(db)
    if id is not None:
        authorize(current_user, owner_id=str(id))
        user = await service.get(id)
        if not user:
            raise HTTPException(status_code=404, detail=NOT_FOUND)
        return user

    authorize(current_user, roles=(UserRole.ADMIN,))
    return await service.find_all(limit=page.limit, offset=page.offset)


@router.get("/{user_id}", response_model=User)
async def get_user(
    user_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Get a user by ID."""
    authorize(current_user, owner_id=str(user_id))
    user = await UserService(db).get(user_id)
    if not user:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return user


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_create: UserCreate,
    current_user: Annotated[CurrentUser, Depends(require_roles(UserRole.ADMIN))],
    db: AsyncSession = Depends(get_db),
):
    """Create a new user."""
    return await UserService(db).create(user_create.model_dump())


@router.patch("/{user_id}", response_model=User)
async def update_user(
    user_id: UUID,
    user_update: UserUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Update a user. Only admins may change roles."""
    authorize(current_user, owner_id=str(user_id))
    changes = user_update.changes()
    if "role" in changes and not current_user.is_admin:
        raise HTTPException(status_code=403, detail="Apenas administradores podem alterar o papel.")
    return await UserService(db).update(user_id, changes)


@router.delete("/{user_id}", response_model=Message)
async def delete_user(
    user_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: AsyncSession = Depends(get_db),
):
    """Delete a user and everything they own."""
    authorize(current_user, owner_id=str(user_id))
    await UserService(db).remove(user_id)
    return Message(message="Usuário removido com sucesso.")
