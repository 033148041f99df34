# app/core/errors.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base class for persistence failures."""


class StorageNotInitializedError(StorageError):
    """Raised when a storage backend is used before it has an engine."""

    def __init__(self, message: str = "Database not initialized"):
        super().__init__(message)


class UsernameTakenError(StorageError):
    """Raised when creating a user whose username already exists."""

    def __init__(self, username: str):
        super().__init__(f"Username already exists: {username}")
        self.username = username


class MissingFieldsError(Exception):
    """
    Raised by form endpoints (contact / quote) when required
    fields are absent or blank.
    """

    def __init__(self, fields: list[str]):
        super().__init__("Missing required fields")
        self.fields = fields


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Validation failed",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


async def _missing_fields_handler(
    request: Request, exc: MissingFieldsError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Missing required fields", "fields": exc.fields},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Internal Server Error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to the API's error bodies.

      - request validation   -> 400 {message, errors}
      - missing form fields  -> 400 {message, fields}
      - anything else        -> 500 {message}, logged with traceback
    """
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(MissingFieldsError, _missing_fields_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
