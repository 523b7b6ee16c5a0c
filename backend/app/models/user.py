"""User-related Pydantic models."""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import CamelModel, RequestModel, UpdateModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserRole(str, Enum):
    """Caller classification driving authorization."""

    ADMIN = "ADMIN"
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"


def normalize_role(value):
    # Older clients send PROFESSOR for teachers
    if isinstance(value, str) and value.upper() == "PROFESSOR":
        return UserRole.TEACHER.value
    return value


class CurrentUser(BaseModel):
    """Identity extracted from a verified bearer token."""

    id: str
    role: UserRole
    email: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN


class UserCreate(RequestModel):
    """Model for creating a new user."""

    name: str = Field(min_length=1, max_length=100)
    email: str = Field(pattern=EMAIL_PATTERN, max_length=255)
    password: str = Field(min_length=6, max_length=128)
    role: UserRole = UserRole.STUDENT

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Maria",
                "email": "maria@ticoncursos.com",
                "password": "password123",
                "role": "STUDENT",
            }
        }
    )

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value):
        return normalize_role(value)


class UserUpdate(UpdateModel):
    """Partial user update. Only admins may change ``role``."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, pattern=EMAIL_PATTERN, max_length=255)
    password: str | None = Field(default=None, min_length=6, max_length=128)
    role: UserRole | None = None

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value):
        return normalize_role(value)


class User(CamelModel):
    """User as returned by the API. Never carries the password."""

    id: UUID
    name: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime


class LoginRequest(RequestModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1)


class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
