"""Shared CRUD behaviour for resource services."""

import logging
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import Base, utc_now

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    """The record addressed by an update or delete does not exist."""

    def __init__(self, message: str = "Registro não encontrado."):
        super().__init__(message)
        self.message = message


class ConflictError(Exception):
    """A write would break a uniqueness rule of the store."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidDataError(ValueError):
    """Merged with the stored record, the payload breaks a rule on ``path``."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path
        self.message = message


def column_value(value: Any) -> Any:
    """Convert a validated payload value into something the driver can bind."""
    if isinstance(value, Enum):
        return value.value
    if value is None or isinstance(value, (str, bool, int, float, datetime)):
        return value
    # UUID, HttpUrl and friends
    return str(value)


def column_values(data: dict) -> dict:
    return {key: column_value(value) for key, value in data.items()}


class ResourceService:
    """CRUD over one table.

    Subclasses set ``model`` (the SQLAlchemy class) and ``schema`` (the
    response model). ``load_options`` eager-loads whatever relationships the
    schema needs, since nothing may be lazy-loaded on an async session.
    """

    model: type[Base]
    schema: type[BaseModel]
    not_found_message = "Registro não encontrado."
    load_options: tuple = ()

    def __init__(self, db: AsyncSession):
        self.db = db

    def _select(self):
        return select(self.model).options(*self.load_options)

    def _key_clause(self, record_id):
        return self.model.id == str(record_id)

    def _ordering(self) -> tuple:
        return (self.model.id,)

    def _filter_clauses(self, filters: dict) -> list:
        """Equality predicates for every filter that was supplied."""
        return [
            getattr(self.model, name) == column_value(value)
            for name, value in filters.items()
            if value is not None
        ]

    def _to_schema(self, row) -> BaseModel:
        return self.schema.model_validate(row)

    async def _get_row(self, record_id):
        result = await self.db.execute(
            self._select()
            .where(self._key_clause(record_id))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get(self, record_id):
        """Get a single record, or None."""
        row = await self._get_row(record_id)
        if row is None:
            return None
        return self._to_schema(row)

    async def exists(self, record_id) -> bool:
        result = await self.db.execute(select(self.model).where(self._key_clause(record_id)))
        return result.first() is not None

    async def find_all(
        self,
        filters: dict | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list:
        """List records matching every supplied filter."""
        query = self._select()
        for clause in self._filter_clauses(filters or {}):
            query = query.where(clause)
        query = query.order_by(*self._ordering()).offset(offset)
        if limit is not None:
            query = query.limit(limit)

        result = await self.db.execute(query)
        return [self._to_schema(row) for row in result.scalars().all()]

    async def create(self, data: dict):
        """Insert a record and return it as stored.

        ``None`` values are dropped so column defaults apply.
        """
        row = self.model(**column_values({k: v for k, v in data.items() if v is not None}))
        self.db.add(row)
        await self.db.flush()
        return self._to_schema(await self._get_row(self._row_key(row)))

    def _row_key(self, row):
        return row.id

    async def update(self, record_id, data: dict):
        """Apply only the supplied fields."""
        row = await self._get_row(record_id)
        if row is None:
            raise RecordNotFoundError(self.not_found_message)

        for name, value in column_values(data).items():
            setattr(row, name, value)
        if hasattr(self.model, "updated_at") and "updated_at" not in data:
            row.updated_at = utc_now()

        await self.db.flush()
        return self._to_schema(await self._get_row(record_id))

    async def remove(self, record_id) -> None:
        result = await self.db.execute(delete(self.model).where(self._key_clause(record_id)))
        if result.rowcount == 0:
            raise RecordNotFoundError(self.not_found_message)
        logger.info(f"Deleted {self.model.__tablename__} record {record_id}")
