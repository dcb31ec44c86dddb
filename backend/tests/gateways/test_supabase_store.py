"""Tests for the Supabase-backed store gateway."""

import httpx
import pytest
from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from gateways.base import ContainsFilter
from gateways.supabase_store import SupabaseStoreGateway
from shared.exceptions import UpstreamStoreError


def make_api_error(message: str = "permission denied", code: str = "42501") -> APIError:
    return APIError({"message": message, "code": code, "hint": None, "details": None})


class TestSupabaseStoreGet:
    def test_get_returns_first_row(self):
        mock_db = MagicMock()
        gateway = SupabaseStoreGateway(mock_db, "movies")
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = [{"id": "m1", "title": "Heat"}]

        assert gateway.get("m1") == {"id": "m1", "title": "Heat"}
        mock_db.table.assert_called_with("movies")
        mock_db.table.return_value.select.return_value.eq.assert_called_with("id", "m1")

    def test_get_missing_returns_none(self):
        mock_db = MagicMock()
        gateway = SupabaseStoreGateway(mock_db, "movies")
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = []

        assert gateway.get("nope") is None

    def test_get_translates_api_error(self):
        mock_db = MagicMock()
        gateway = SupabaseStoreGateway(mock_db, "movies")
        chain = mock_db.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.side_effect = make_api_error()

        with pytest.raises(UpstreamStoreError) as exc_info:
            gateway.get("m1")
        assert exc_info.value.code == "42501"
        assert exc_info.value.message == "permission denied"


class TestSupabaseStorePut:
    def test_put_upserts(self):
        mock_db = MagicMock()
        gateway = SupabaseStoreGateway(mock_db, "users")

        gateway.put({"id": "u1", "email": "ada@example.com"})

        mock_db.table.assert_called_with("users")
        mock_db.table.return_value.upsert.assert_called_once_with(
            {"id": "u1", "email": "ada@example.com"}
        )

    def test_put_translates_transport_error(self):
        mock_db = MagicMock()
        gateway = SupabaseStoreGateway(mock_db, "users")
        mock_db.table.return_value.upsert.return_value.execute.side_effect = (
            httpx.ConnectError("connection refused")
        )

        with pytest.raises(UpstreamStoreError) as exc_info:
            gateway.put({"id": "u1"})
        assert exc_info.value.code == "ConnectError"
        assert exc_info.value.status_code is None


class TestSupabaseStoreScan:
    def test_scan_full_page_returns_next_cursor(self):
        mock_db = MagicMock()
        gateway = SupabaseStoreGateway(mock_db, "movies")
        ranged = mock_db.table.return_value.select.return_value.order.return_value.range
        ranged.return_value.execute.return_value.data = [{"id": "m1"}, {"id": "m2"}]

        page = gateway.scan(limit=2)

        ranged.assert_called_once_with(0, 1)
        assert page.scanned_count == 2
        assert page.cursor == "2"

    def test_scan_short_page_is_last(self):
        mock_db = MagicMock()
        gateway = SupabaseStoreGateway(mock_db, "movies")
        ranged = mock_db.table.return_value.select.return_value.order.return_value.range
        ranged.return_value.execute.return_value.data = [{"id": "m5"}]

        page = gateway.scan(limit=2, cursor="4")

        ranged.assert_called_once_with(4, 5)
        assert [item["id"] for item in page.items] == ["m5"]
        assert page.cursor is None

    def test_scan_applies_contains_filter(self):
        mock_db = MagicMock()
        gateway = SupabaseStoreGateway(mock_db, "movies")
        select = mock_db.table.return_value.select.return_value
        ranged = select.contains.return_value.order.return_value.range
        ranged.return_value.execute.return_value.data = [{"id": "m1", "genres": ["action"]}]

        page = gateway.scan(ContainsFilter(attribute="genres", value="action"), limit=10)

        select.contains.assert_called_once_with("genres", ["action"])
        select.contains.return_value.order.assert_called_once_with("id")
        assert len(page.items) == 1

    def test_scan_translates_http_status_error(self):
        mock_db = MagicMock()
        gateway = SupabaseStoreGateway(mock_db, "movies")
        request = httpx.Request("GET", "https://test.supabase.co/rest/v1/movies")
        response = httpx.Response(503, request=request)
        ranged = mock_db.table.return_value.select.return_value.order.return_value.range
        ranged.return_value.execute.side_effect = httpx.HTTPStatusError(
            "unavailable", request=request, response=response
        )

        with pytest.raises(UpstreamStoreError) as exc_info:
            gateway.scan(limit=10)
        assert exc_info.value.status_code == 503
