"""
Movies module data models.

Movie records are owned outside this service; only the attributes the
catalog sorts and filters on are typed, everything else passes through.
"""

import logging
import re
from enum import Enum
from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class SortBy(str, Enum):
    """Catalog orderings."""

    TITLE = "title"               # Ascending, accent/case-insensitive
    RATING = "rating"             # Highest first
    RELEASE_DATE = "releaseDate"  # Most recent first


class Movie(BaseModel):
    """
    A catalog record, returned as stored.

    Only `id` is required. The sort attributes accept whatever shapes the
    store holds (a numeric title, a rating kept as text, null genres);
    ordering treats values it cannot compare as missing.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Union[int, str]
    title: Optional[Union[str, int, float]] = None
    genres: Optional[list[Any]] = None
    rating: Optional[Union[int, float, str]] = None
    release_date: Optional[Union[str, int, float]] = Field(None, alias="releaseDate")

    def to_response(self) -> dict:
        """Serialize with only the attributes the stored record had."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class MovieQuery(BaseModel):
    """Parameters of one catalog listing request."""

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1)
    genre: Optional[str] = None
    sort_by: SortBy = SortBy.RELEASE_DATE

    @classmethod
    def from_params(
        cls,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        genre: Optional[str] = None,
        sort_by: Optional[str] = None,
    ) -> "MovieQuery":
        """
        Build a query from raw query-string values.

        page and limit are read from their leading digits ("10abc" is 10);
        values that are absent, non-numeric or below 1 fall back to their
        defaults. An unknown sort_by falls back to the default ordering.
        """
        order = SortBy.RELEASE_DATE
        if sort_by:
            try:
                order = SortBy(sort_by)
            except ValueError:
                logger.warning("Unknown sortBy %r, using %s", sort_by, order.value)

        return cls(
            page=_positive_int(page, DEFAULT_PAGE),
            limit=_positive_int(limit, DEFAULT_LIMIT),
            genre=genre or None,
            sort_by=order,
        )


class MovieListResponse(BaseModel):
    """One page of the catalog."""

    model_config = ConfigDict(populate_by_name=True)

    movies: list[Movie]
    page: int
    limit: int
    total_count: int = Field(..., alias="totalCount")
    total_pages: int = Field(..., alias="totalPages")

    def to_response(self) -> dict:
        return {
            "movies": [movie.to_response() for movie in self.movies],
            "page": self.page,
            "limit": self.limit,
            "totalCount": self.total_count,
            "totalPages": self.total_pages,
        }


def _positive_int(value: Optional[str], default: int) -> int:
    """Leading integer of `value`, or `default` if there is none or it is below 1."""
    match = _LEADING_INT.match(value) if value is not None else None
    if match is None:
        return default
    parsed = int(match.group())
    return parsed if parsed >= 1 else default
