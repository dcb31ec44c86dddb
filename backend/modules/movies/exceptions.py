"""
Movies module exceptions.
"""

from shared.exceptions import (
    NotFoundError,
    UpstreamStoreError,
)


class MovieNotFoundError(NotFoundError):
    """Raised when no movie is stored under the requested ID."""

    def __init__(self, movie_id: str):
        super().__init__(
            "Movie not found",
            code="MovieNotFound",
            details={"movie_id": movie_id},
        )


class CatalogStoreError(UpstreamStoreError):
    """Store failure during a catalog read, with a user-facing message."""

    def __init__(self, message: str, cause: UpstreamStoreError):
        super().__init__(
            message,
            code=cause.code,
            status_code=cause.status_code,
        )
