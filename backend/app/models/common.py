"""Base classes shared by all request/response models."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Inbound payload. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid", use_enum_values=True)


class UpdateModel(RequestModel):
    """PATCH payload.

    Omitted fields are left untouched. An explicit ``null`` is only accepted
    for fields listed in ``nullable_fields``.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @field_validator("*")
    @classmethod
    def _reject_explicit_null(cls, value, info: ValidationInfo):
        if value is None and info.field_name not in cls.nullable_fields:
            raise ValueError("O campo não pode ser nulo.")
        return value

    def changes(self) -> dict:
        """Fields the client actually sent, by attribute name."""
        return self.model_dump(exclude_unset=True)


class Message(BaseModel):
    """Plain confirmation body, e.g. after a delete."""

    message: str


class FieldError(BaseModel):
    path: str
    message: str


class ErrorResponse(BaseModel):
    """Body returned for 4xx errors."""

    message: str
    errors: list[FieldError] | None = None
