"""Global exception handlers for the userapi HTTP layer.

Every failing response uses the same envelope:
    {"error": {"message": <str>, "status": <int>}}
"""

import logging
from typing import Dict, Optional, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from userapi.models.constants import INTERNAL_ERROR_MESSAGE
from userapi.storage.errors import (
    UserConflictError,
    UserNotFoundError,
    UserStoreError,
    UserValidationError,
)

logger = logging.getLogger(__name__)

STORE_ERROR_STATUS: Dict[Type[UserStoreError], int] = {
    UserNotFoundError: status.HTTP_404_NOT_FOUND,
    UserValidationError: status.HTTP_400_BAD_REQUEST,
    UserConflictError: status.HTTP_409_CONFLICT,
}


def error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    """Build a JSON error response in the shared envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
        headers=headers,
    )


def status_for_store_error(exc: UserStoreError) -> int:
    for error_type, status_code in STORE_ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def describe_validation_error(exc: RequestValidationError) -> str:
    """Summarize request validation failures as one readable message."""
    parts = []
    for error in exc.errors():
        # Drop the leading "body"/"path" segment of the location.
        loc = [str(part) for part in error.get("loc", ())[1:]]
        if loc:
            parts.append(f"{'.'.join(loc)}: {error.get('msg')}")
        else:
            parts.append(str(error.get("msg")))
    if not parts:
        return "Invalid request"
    return "Invalid request: " + "; ".join(parts)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(UserStoreError)
    async def store_error_handler(request: Request, exc: UserStoreError):
        status_code = status_for_store_error(exc)
        logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
        return error_response(status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = describe_validation_error(exc)
        logger.warning(f"Validation error on {request.url.path}: {message}")
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {type(exc).__name__}: {exc}",
            exc_info=True,
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
