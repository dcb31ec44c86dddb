"""Base classes and models for the external collaborator gateways."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """Email/password pair. Transient: never persisted or logged."""

    model_config = ConfigDict(frozen=True)

    email: str
    password: str = Field(repr=False)


class SessionTokens(BaseModel):
    """Opaque tokens issued by the identity provider, returned verbatim."""

    model_config = ConfigDict(frozen=True)

    id_token: str = Field(repr=False)
    access_token: str = Field(repr=False)
    refresh_token: str = Field(repr=False)


class ContainsFilter(BaseModel):
    """The single filter predicate a scan supports: `attribute` contains `value`."""

    model_config = ConfigDict(frozen=True)

    attribute: str
    value: str


class ScanPage(BaseModel):
    """One call's worth of scan output.

    Attributes:
        items: Records that passed the filter
        scanned_count: Records read from storage to produce `items`
        cursor: Continuation token for the next call, None when exhausted
    """

    items: list[dict[str, Any]] = Field(default_factory=list)
    scanned_count: int = 0
    cursor: Optional[str] = None


class StoreGateway(ABC):
    """Contract over a document store table.

    The scan is deliberately weak: no ordering guarantee, `limit` caps the
    records read (not the records returned), and at most one contains
    predicate is applied.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[dict[str, Any]]:
        """Return the record stored under `key`, or None.

        Raises:
            UpstreamStoreError: If the store is unavailable or rejects the read
        """
        pass

    @abstractmethod
    def put(self, item: dict[str, Any]) -> None:
        """Create or replace the record keyed by the item's key attribute.

        Raises:
            UpstreamStoreError: If the store is unavailable or rejects the write
        """
        pass

    @abstractmethod
    def scan(
        self,
        filter: Optional[ContainsFilter] = None,
        limit: int = 100,
        cursor: Optional[str] = None,
    ) -> ScanPage:
        """Read up to `limit` records starting at `cursor`.

        Raises:
            UpstreamStoreError: If the store is unavailable or rejects the scan
        """
        pass


class IdentityGateway(ABC):
    """Contract over the identity provider."""

    @abstractmethod
    def sign_up(self, credentials: Credentials, attributes: dict[str, str]) -> None:
        """Create an account.

        Raises:
            UpstreamAuthError: Duplicate account, weak password, provider down
        """
        pass

    @abstractmethod
    def authenticate(self, credentials: Credentials) -> SessionTokens:
        """Verify credentials and issue session tokens.

        Raises:
            UpstreamAuthError: Bad credentials, unconfirmed account, provider down
        """
        pass
