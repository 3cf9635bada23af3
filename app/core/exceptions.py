# /app/core/exceptions.py

"""
The error taxonomy for the backend and the FastAPI handlers that turn it
into HTTP responses.

Every failure a client can see is an `AppError` subclass. Each one knows its
HTTP status and renders as the same `{"error": ..., "message": ...}` body,
so the UI can always show `message` and fall back to `error`.
"""

import logging
from enum import Enum
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for every error that is rendered to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "Internal server error"

    def __init__(self, message: str, error: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if error is not None:
            self.error = error
        if status_code is not None:
            self.status_code = status_code

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code,
            content={"error": self.error, "message": self.message},
        )


class InvalidInputError(AppError):
    """A request field is missing, malformed or out of range."""
    status_code = status.HTTP_400_BAD_REQUEST
    error = "Invalid input"


class NotFoundError(AppError):
    """A referenced entity does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    error = "Not found"


class UpstreamErrorKind(str, Enum):
    INVALID_CREDENTIALS = "invalid_credentials"
    QUOTA_EXCEEDED = "quota_exceeded"
    GENERIC = "generic"


class UpstreamError(AppError):
    """
    The Gemini API call failed or answered with an error payload.

    The HTTP status depends on the kind: 401 for a rejected key, 429 for an
    exhausted quota, otherwise the upstream status when one is known.
    """

    def __init__(
        self,
        kind: UpstreamErrorKind,
        message: str,
        upstream_status: Optional[int] = None,
    ):
        self.kind = kind
        self.upstream_status = upstream_status
        if kind == UpstreamErrorKind.INVALID_CREDENTIALS:
            super().__init__(message, error="Invalid Gemini API key", status_code=status.HTTP_401_UNAUTHORIZED)
        elif kind == UpstreamErrorKind.QUOTA_EXCEEDED:
            super().__init__(message, error="Gemini API quota exceeded", status_code=status.HTTP_429_TOO_MANY_REQUESTS)
        else:
            super().__init__(
                message,
                error="Gemini API error",
                status_code=upstream_status or status.HTTP_500_INTERNAL_SERVER_ERROR,
            )


class GenerationEmptyError(AppError):
    """The upstream call succeeded but produced no usable text."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "Failed to generate code"


class InternalError(AppError):
    """Unexpected failure, e.g. the store being unavailable."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "Internal server error"


# --- FastAPI Handlers ---

def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "The request could not be validated."
    first = errors[0]
    # Custom field validators raise messages that are already client-ready.
    if first.get("type") == "invalid_input":
        return first.get("msg", "Invalid input")
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return exc.to_response()


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return InvalidInputError(_first_validation_message(exc)).to_response()


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return InternalError("An unexpected error occurred.").to_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that render every failure as `{error, message}`."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
