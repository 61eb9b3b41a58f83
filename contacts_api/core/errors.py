"""
Application errors and the exception handlers that render them.

Every failure leaves the API as ``{"title", "message", "stackTrace"}`` with
the status code carried by the raised error.
"""

import logging
import traceback
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from contacts_api.config import Settings

logger = logging.getLogger(__name__)

TITLES = {
    status.HTTP_400_BAD_REQUEST: "Validation Failed",
    status.HTTP_401_UNAUTHORIZED: "Unauthorized",
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Server Error",
}
DEFAULT_TITLE = "Error"


class ApiError(Exception):
    """
    An error with the HTTP status it should be answered with.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT


def title_for(status_code: int) -> str:
    title = TITLES.get(status_code)
    if title is None:
        logger.warning("No error title mapped for status %s", status_code)
        return DEFAULT_TITLE
    return title


def error_body(status_code: int, message: str, exc: BaseException, expose_stack_trace: bool) -> dict:
    stack_trace = None
    if expose_stack_trace:
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
    return {
        "title": title_for(status_code),
        "message": message,
        "stackTrace": stack_trace,
    }


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """
    Install the handlers that turn raised errors into JSON error bodies.
    """
    expose = settings.expose_stack_trace

    def respond(status_code: int, message: str, exc: BaseException, headers=None) -> JSONResponse:
        if status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {**(headers or {}), "WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=status_code,
            content=error_body(status_code, message, exc, expose),
            headers=headers,
        )

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError):
        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        return respond(exc.status_code, exc.message, exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return respond(exc.status_code, str(exc.detail), exc, getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return respond(status.HTTP_400_BAD_REQUEST, _format_validation_errors(exc), exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return respond(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Internal server error", exc)
