"""User accounts."""

import logging

from sqlalchemy import select

from app.db.models import UserDB
from app.models.user import User, UserRole
from app.utils.auth import get_password_hash

from .base import ResourceService

logger = logging.getLogger(__name__)


class UserService(ResourceService):
    """Service for managing users. Passwords are stored hashed only."""

    model = UserDB
    schema = User
    not_found_message = "Usuário não encontrado."

    def _ordering(self) -> tuple:
        return (UserDB.created_at, UserDB.id)

    @staticmethod
    def _hash_password(data: dict) -> dict:
        data = dict(data)
        if "password" in data:
            data["hashed_password"] = get_password_hash(data.pop("password"))
        return data

    async def create(self, data: dict) -> User:
        user = await super().create(self._hash_password(data))
        logger.info(f"Created user {user.id} with role {user.role.value}")
        return user

    async def update(self, record_id, data: dict) -> User:
        return await super().update(record_id, self._hash_password(data))

    async def get_by_email(self, email: str) -> UserDB | None:
        """Stored row for an e-mail, including the password hash."""
        result = await self.db.execute(select(UserDB).where(UserDB.email == email))
        return result.scalar_one_or_none()

    async def ensure_admin(self, email: str, password: str) -> bool:
        """Create an ADMIN account unless the e-mail is already registered."""
        if await self.get_by_email(email) is not None:
            return False
        await self.create(
            {"name": "Administrador", "email": email, "password": password, "role": UserRole.ADMIN}
        )
        return True
