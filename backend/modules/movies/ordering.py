"""
Total orderings for catalog listings.

Every ordering breaks ties on movie id (ascending) so a listing is fully
deterministic. Movies missing the sort attribute, or holding a value that
cannot be compared, go last.
"""

import math
import unicodedata
from datetime import datetime, timezone
from typing import Any, Optional

from dateutil.parser import isoparse

from .models import Movie, SortBy


def sort_movies(movies: list[Movie], sort_by: SortBy) -> list[Movie]:
    """Return `movies` in `sort_by` order."""
    # Python's sort is stable, including with reverse=True, so sorting by id
    # first leaves ties in id order.
    by_id = sorted(movies, key=_id_key)

    if sort_by is SortBy.TITLE:
        return sorted(by_id, key=_title_key)
    if sort_by is SortBy.RATING:
        return sorted(by_id, key=_rating_key, reverse=True)
    return sorted(by_id, key=_release_date_key, reverse=True)


def collation_key(title: str) -> str:
    """Accent- and case-insensitive key: "Élan" sorts with "elan"."""
    decomposed = unicodedata.normalize("NFKD", title)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def parse_release_date(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 date or datetime as UTC; None if unparseable."""
    if not value:
        return None
    try:
        parsed = isoparse(value)
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _id_key(movie: Movie) -> tuple[int, Any]:
    # Integer ids before string ids; each compared within its own type
    if isinstance(movie.id, str):
        return (1, movie.id)
    return (0, movie.id)


def _title_key(movie: Movie) -> tuple[int, str, str]:
    if movie.title is None:
        return (1, "", "")
    title = str(movie.title)
    return (0, collation_key(title), title)


def _rating_key(movie: Movie) -> tuple[bool, float]:
    rating = _as_number(movie.rating)
    if rating is None:
        return (False, 0.0)
    return (True, rating)


def _release_date_key(movie: Movie) -> tuple[bool, datetime]:
    released = None
    if isinstance(movie.release_date, str):
        released = parse_release_date(movie.release_date)
    if released is None:
        return (False, datetime.min.replace(tzinfo=timezone.utc))
    return (True, released)


def _as_number(value: Any) -> Optional[float]:
    """Numeric value of a rating, including numbers stored as text."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # NaN and infinities do not order
    return number if math.isfinite(number) else None
