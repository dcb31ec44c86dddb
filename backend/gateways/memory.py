"""
In-process gateways for tests and local development.

The store keeps the weak scan semantics of a real document store: records
come back in insertion order (no sort guarantee), `limit` caps the records
read before filtering, and a scan page can be short or empty while more
matches remain behind its cursor.
"""

import copy
import hashlib
import hmac
import secrets
from typing import Any, Iterable, Optional

from shared.exceptions import UpstreamAuthError

from .base import (
    ContainsFilter,
    Credentials,
    IdentityGateway,
    ScanPage,
    SessionTokens,
    StoreGateway,
)

MIN_PASSWORD_LENGTH = 6


class InMemoryStoreGateway(StoreGateway):
    """Dict-backed store keyed by `key_attribute`."""

    def __init__(
        self,
        items: Optional[Iterable[dict[str, Any]]] = None,
        key_attribute: str = "id",
    ) -> None:
        self._key = key_attribute
        self._items: dict[str, dict[str, Any]] = {}
        for item in items or []:
            self.put(item)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, key: str) -> Optional[dict[str, Any]]:
        item = self._items.get(str(key))
        return copy.deepcopy(item) if item is not None else None

    def put(self, item: dict[str, Any]) -> None:
        self._items[str(item[self._key])] = copy.deepcopy(item)

    def scan(
        self,
        filter: Optional[ContainsFilter] = None,
        limit: int = 100,
        cursor: Optional[str] = None,
    ) -> ScanPage:
        offset = int(cursor) if cursor else 0
        records = list(self._items.values())
        window = records[offset:offset + limit]

        items = [
            copy.deepcopy(record)
            for record in window
            if filter is None or _contains(record.get(filter.attribute), filter.value)
        ]
        next_offset = offset + len(window)
        next_cursor = str(next_offset) if next_offset < len(records) else None

        return ScanPage(items=items, scanned_count=len(window), cursor=next_cursor)


def _contains(value: Any, needle: str) -> bool:
    """Contains semantics: set/list membership or substring."""
    if value is None:
        return False
    try:
        return needle in value
    except TypeError:
        return False


class InMemoryIdentityGateway(IdentityGateway):
    """Account registry with provider-like failure kinds.

    Unknown email and wrong password fail identically, as a real provider
    does.
    """

    def __init__(self) -> None:
        self._accounts: dict[str, dict[str, Any]] = {}

    def sign_up(self, credentials: Credentials, attributes: dict[str, str]) -> None:
        email = credentials.email.casefold()
        if email in self._accounts:
            raise UpstreamAuthError(
                "User already registered",
                code="user_already_exists",
                status_code=422,
            )
        if len(credentials.password) < MIN_PASSWORD_LENGTH:
            raise UpstreamAuthError(
                f"Password should be at least {MIN_PASSWORD_LENGTH} characters",
                code="weak_password",
                status_code=422,
            )

        salt = secrets.token_bytes(16)
        self._accounts[email] = {
            "salt": salt,
            "password_hash": _hash_password(credentials.password, salt),
            "attributes": dict(attributes),
        }

    def authenticate(self, credentials: Credentials) -> SessionTokens:
        account = self._accounts.get(credentials.email.casefold())
        if account is None or not hmac.compare_digest(
            account["password_hash"],
            _hash_password(credentials.password, account["salt"]),
        ):
            raise UpstreamAuthError(
                "Invalid login credentials",
                code="invalid_credentials",
                status_code=400,
            )

        return SessionTokens(
            id_token=secrets.token_urlsafe(32),
            access_token=secrets.token_urlsafe(32),
            refresh_token=secrets.token_urlsafe(32),
        )


def _hash_password(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, 10_000)
