"""
Application exceptions and their HTTP renderings.

Client-facing errors share the body shape `{"error": {"message": ...}}`.
Anything not raised as one of these falls through to `unhandled_exception_handler`,
which turns it into a 500.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from core.config import get_settings

logger = logging.getLogger(__name__)


class BookmarksAPIError(Exception):
    """Base class for errors rendered as `{"error": {"message": ...}}`."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(BookmarksAPIError):
    """The request body is unusable (malformed JSON, no usable fields, bad types)."""

    status_code = 400


class BookmarkNotFoundError(BookmarksAPIError):
    """No bookmark exists with the requested id."""

    status_code = 404


class UnauthorizedError(Exception):
    """Missing or wrong bearer token."""


def error_body(message: str) -> dict:
    """Build the standard error payload."""
    return {"error": {"message": message}}


async def api_error_handler(request: Request, exc: BookmarksAPIError) -> JSONResponse:
    """Render a known API error."""
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:  # noqa: ARG001
    """Render a rejected bearer token."""
    return JSONResponse(status_code=401, content={"error": "Unauthorized request"})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Terminal handler for anything the endpoints did not handle (mostly database errors).

    Production responses carry a generic message; other environments expose the
    exception text to ease debugging.
    """
    logger.exception("Unhandled error at %s %s", request.method, request.url.path)
    if get_settings().is_production:
        content: dict = error_body("server error")
    else:
        content = {"message": str(exc), "error": repr(exc)}
    return JSONResponse(status_code=500, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the API's exception handlers to `app`."""
    app.add_exception_handler(BookmarksAPIError, api_error_handler)
    app.add_exception_handler(UnauthorizedError, unauthorized_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
