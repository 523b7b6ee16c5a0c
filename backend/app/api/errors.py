"""JSON error bodies for every failure the API reports."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.models.common import ErrorResponse, FieldError
from app.services.base import ConflictError, InvalidDataError, RecordNotFoundError

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Dados inválidos."
CONFLICT_MESSAGE = "Registro conflita com um já existente."


def _field_errors(exc: RequestValidationError) -> list[FieldError]:
    errors = []
    for error in exc.errors():
        # Drop the "body"/"query"/"path" prefix
        path = ".".join(str(part) for part in error["loc"][1:])
        message = error["msg"].removeprefix("Value error, ")
        errors.append(FieldError(path=path, message=message))
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors, listing every failing field."""
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(message=VALIDATION_MESSAGE, errors=_field_errors(exc)).model_dump(),
        )

    @app.exception_handler(InvalidDataError)
    async def invalid_data_handler(request: Request, exc: InvalidDataError):
        errors = [FieldError(path=exc.path, message=exc.message)]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(message=VALIDATION_MESSAGE, errors=errors).model_dump(),
        )

    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message})

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"message": exc.message})

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        logger.warning(f"Integrity violation on {request.method} {request.url.path}: {exc.orig}")
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"message": CONFLICT_MESSAGE})
