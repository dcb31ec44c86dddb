"""
Response envelope.

Every response the API produces, success or failure, is built here so
that it carries the same JSON content type and CORS headers.
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

ENVELOPE_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Credentials": "true",
}


def envelope(status_code: int, body: Any) -> JSONResponse:
    """Wrap `body` in a JSON response with the standard headers."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        headers=ENVELOPE_HEADERS,
    )


def error_envelope(status_code: int, message: str, error: str) -> JSONResponse:
    """Standard `{message, error}` failure body."""
    return envelope(status_code, {"message": message, "error": error})
