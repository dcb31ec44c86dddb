"""
Catalog service implementation.

The movies store can only scan: unordered, with its limit applied to the
records it reads rather than to the matches it returns. Listings are
therefore built in memory from a full (bounded) scan of the matching set,
then sorted and sliced.
"""

import logging
import math
from typing import Any, Optional

from pydantic import ValidationError as RecordValidationError

from gateways.base import ContainsFilter, StoreGateway
from shared.exceptions import UpstreamStoreError

from .interfaces import ICatalogService
from .models import Movie, MovieListResponse, MovieQuery
from .ordering import sort_movies
from .exceptions import CatalogStoreError, MovieNotFoundError

logger = logging.getLogger(__name__)

GENRES_ATTRIBUTE = "genres"


class CatalogService(ICatalogService):
    """
    Catalog reads over a movies StoreGateway.

    Args:
        movies: Gateway over the movies table
        scan_batch_size: Records read per scan call
        max_scan_items: Records read before a listing scan stops early
        legacy_scan: Use single-scan listings, where the
            page limit doubles as the storage read cap. Pages past the
            first are then usually empty and totalCount only covers the
            records that one scan returned.
    """

    def __init__(
        self,
        movies: StoreGateway,
        scan_batch_size: int = 100,
        max_scan_items: int = 5000,
        legacy_scan: bool = False,
    ):
        self._movies = movies
        self._scan_batch_size = scan_batch_size
        self._max_scan_items = max_scan_items
        self._legacy_scan = legacy_scan

    async def get_movie(self, movie_id: str) -> Movie:
        try:
            record = self._movies.get(movie_id)
        except UpstreamStoreError as e:
            logger.warning("Movie lookup failed for %s: %s", movie_id, e.code)
            raise CatalogStoreError("Error retrieving movie details", e) from e

        if record is None:
            raise MovieNotFoundError(movie_id)

        try:
            return Movie.model_validate(record)
        except RecordValidationError as e:
            logger.error("Stored movie %s is malformed: %s", movie_id, e)
            raise UpstreamStoreError(
                "Error retrieving movie details",
                code="MalformedRecord",
            ) from e

    async def list_movies(self, query: MovieQuery) -> MovieListResponse:
        store_filter = None
        if query.genre:
            store_filter = ContainsFilter(attribute=GENRES_ATTRIBUTE, value=query.genre)

        try:
            if self._legacy_scan:
                page = self._movies.scan(store_filter, query.limit)
                records = page.items
            else:
                records = self._scan_all(store_filter)
        except UpstreamStoreError as e:
            logger.warning("Catalog scan failed: %s", e.code)
            raise CatalogStoreError("Error retrieving movies", e) from e

        movies = sort_movies(_to_movies(records), query.sort_by)

        # Legacy listings report the count the single scan returned
        total_count = len(records) if self._legacy_scan else len(movies)

        offset = (query.page - 1) * query.limit
        return MovieListResponse(
            movies=movies[offset:offset + query.limit],
            page=query.page,
            limit=query.limit,
            total_count=total_count,
            total_pages=math.ceil(total_count / query.limit),
        )

    def _scan_all(self, store_filter: Optional[ContainsFilter]) -> list[dict[str, Any]]:
        """Follow scan cursors until the store is exhausted or the ceiling is hit."""
        records: list[dict[str, Any]] = []
        scanned = 0
        cursor: Optional[str] = None

        while True:
            page = self._movies.scan(store_filter, self._scan_batch_size, cursor)
            records.extend(page.items)
            scanned += page.scanned_count

            if page.cursor is None or page.cursor == cursor:
                break
            if scanned >= self._max_scan_items:
                logger.warning(
                    "Catalog scan stopped after %d records (ceiling %d); "
                    "listing covers a partial catalog",
                    scanned,
                    self._max_scan_items,
                )
                break
            cursor = page.cursor

        return records


def _to_movies(records: list[dict[str, Any]]) -> list[Movie]:
    """Validate scanned records, skipping any without a usable id."""
    movies = []
    for record in records:
        try:
            movies.append(Movie.model_validate(record))
        except RecordValidationError as e:
            logger.warning("Skipping movie record without a usable id %r: %s", record.get("id"), e)
    return movies
