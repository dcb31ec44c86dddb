"""
Base exception classes for the Cinelist backend.

The set is closed: every failure a flow can report is one of
ValidationError, UpstreamAuthError, UpstreamStoreError or NotFoundError
(or a subclass of them). Each module defines its own subclasses.
"""

from typing import Optional, Any


class CinelistError(Exception):
    """
    Base exception for all Cinelist errors.

    `code` is the machine-readable kind sent to clients as `error`.
    `status_code` is the HTTP status to respond with; None means the
    caller's default applies.
    """

    default_status_code: Optional[int] = None

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.status_code = status_code or self.default_status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the public error body."""
        return {
            "message": self.message,
            "error": self.code,
        }


class ValidationError(CinelistError):
    """Input validation failed. Raised before any external call."""

    default_status_code = 400


class UpstreamAuthError(CinelistError):
    """The identity provider rejected the request or was unavailable."""

    pass


class UpstreamStoreError(CinelistError):
    """The document store was unavailable or rejected the operation."""

    pass


class NotFoundError(CinelistError):
    """Resource not found."""

    default_status_code = 404
