"""Document store gateway backed by a Supabase (PostgREST) table."""

from typing import Any, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from shared.exceptions import UpstreamStoreError

from .base import ContainsFilter, ScanPage, StoreGateway


class SupabaseStoreGateway(StoreGateway):
    """
    Store gateway over one Supabase table.

    `put` is an upsert, matching put-by-key semantics. The scan cursor is
    the row offset of the next read, ordered by the key column so that
    consecutive calls do not skip or repeat rows.
    """

    def __init__(self, db: Client, table: str, key_attribute: str = "id") -> None:
        self._db = db
        self._table = table
        self._key = key_attribute

    def get(self, key: str) -> Optional[dict[str, Any]]:
        try:
            result = (
                self._db.table(self._table)
                .select("*")
                .eq(self._key, key)
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as e:
            raise _store_error(e)

        if not result.data:
            return None
        return result.data[0]

    def put(self, item: dict[str, Any]) -> None:
        try:
            self._db.table(self._table).upsert(item).execute()
        except (APIError, httpx.HTTPError) as e:
            raise _store_error(e)

    def scan(
        self,
        filter: Optional[ContainsFilter] = None,
        limit: int = 100,
        cursor: Optional[str] = None,
    ) -> ScanPage:
        offset = int(cursor) if cursor else 0

        query = self._db.table(self._table).select("*")
        if filter is not None:
            query = query.contains(filter.attribute, [filter.value])

        try:
            result = (
                query.order(self._key)
                .range(offset, offset + limit - 1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as e:
            raise _store_error(e)

        items = result.data or []
        # A short page means the table is exhausted
        next_cursor = str(offset + len(items)) if len(items) == limit else None

        return ScanPage(items=items, scanned_count=len(items), cursor=next_cursor)


def _store_error(exc: Exception) -> UpstreamStoreError:
    """Translate a PostgREST or transport failure into UpstreamStoreError."""
    if isinstance(exc, APIError):
        return UpstreamStoreError(
            getattr(exc, "message", None) or "Document store rejected the operation",
            code=getattr(exc, "code", None) or "APIError",
            details={"hint": getattr(exc, "hint", None)},
        )

    status_code = None
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code

    return UpstreamStoreError(
        "Document store unavailable",
        code=type(exc).__name__,
        status_code=status_code,
    )
