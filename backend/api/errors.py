"""
Exception handlers.

Translate every failure into the `{message, error}` envelope. Upstream
errors that carry no status fall back to 500.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import CinelistError
from .responses import envelope, error_envelope

logger = logging.getLogger(__name__)

DEFAULT_ERROR_STATUS = 500


async def handle_cinelist_error(request: Request, exc: CinelistError):
    return envelope(exc.status_code or DEFAULT_ERROR_STATUS, exc.to_dict())


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    return error_envelope(400, "Invalid request body", "ValidationError")


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    try:
        kind = HTTPStatus(exc.status_code).phrase.replace(" ", "")
    except ValueError:
        kind = "HTTPError"
    return error_envelope(exc.status_code, str(exc.detail), kind)


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_envelope(500, "Internal server error", "InternalError")


def register_exception_handlers(app: FastAPI) -> None:
    """Install all handlers on `app`."""
    app.add_exception_handler(CinelistError, handle_cinelist_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
