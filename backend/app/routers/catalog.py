"""Tag, technology and banca API endpoints.

The three catalogs share one shape: any logged-in user may read them,
only admins write, and names are unique (409 on duplicates).
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_current_user, require_roles
from app.db import get_db
from app.models.common import Message
from app.models.taxonomy import (
    Banca,
    BancaCreate,
    BancaUpdate,
    Tag,
    TagCreate,
    TagUpdate,
    Technology,
    TechnologyCreate,
    TechnologyUpdate,
)
from app.models.user import CurrentUser, UserRole
from app.routers.params import Page
from app.services.base import ResourceService
from app.services.taxonomy import BancaService, TagService, TechnologyService


def build_catalog_router(
    prefix: str,
    service_class: type[ResourceService],
    schema: type[BaseModel],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    removed_message: str,
) -> APIRouter:
    """CRUD router for a name-keyed catalog."""
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])
    admin_only = require_roles(UserRole.ADMIN)

    @router.get("", response_model=list[schema])
    async def list_items(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
        page: Page = Depends(),
        db: AsyncSession = Depends(get_db),
    ):
        return await service_class(db).find_all(limit=page.limit, offset=page.offset)

    @router.get("/{item_id}", response_model=schema)
    async def get_item(
        item_id: UUID,
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
        db: AsyncSession = Depends(get_db),
    ):
        item = await service_class(db).get(item_id)
        if not item:
            raise HTTPException(status_code=404, detail=service_class.not_found_message)
        return item

    @router.post("", response_model=schema, status_code=status.HTTP_201_CREATED)
    async def create_item(
        payload: create_schema,
        current_user: Annotated[CurrentUser, Depends(admin_only)],
        db: AsyncSession = Depends(get_db),
    ):
        return await service_class(db).create(payload.model_dump())

    @router.patch("/{item_id}", response_model=schema)
    async def update_item(
        item_id: UUID,
        payload: update_schema,
        current_user: Annotated[CurrentUser, Depends(admin_only)],
        db: AsyncSession = Depends(get_db),
    ):
        return await service_class(db).update(item_id, payload.changes())

    @router.delete("/{item_id}", response_model=Message)
    async def delete_item(
        item_id: UUID,
        current_user: Annotated[CurrentUser, Depends(admin_only)],
        db: AsyncSession = Depends(get_db),
    ):
        await service_class(db).remove(item_id)
        return Message(message=removed_message)

    return router


tags_router = build_catalog_router(
    "/tags", TagService, Tag, TagCreate, TagUpdate, "Tag removida com sucesso."
)
technologies_router = build_catalog_router(
    "/technologies",
    TechnologyService,
    Technology,
    TechnologyCreate,
    TechnologyUpdate,
    "Tecnologia removida com sucesso.",
)
bancas_router = build_catalog_router(
    "/bancas", BancaService, Banca, BancaCreate, BancaUpdate, "Banca removida com sucesso."
)
