"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Gateways to the identity provider and document store
are created once per process and passed into the services; routes only
see the service interfaces.

Tests swap implementations through app.dependency_overrides or by
building a ServiceContainer with fake gateways.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from gateways.base import IdentityGateway, StoreGateway
    from modules.auth.interfaces import IAuthService
    from modules.movies.interfaces import ICatalogService


class ServiceContainer:
    """
    Container for gateway and service instances.

    Everything is created lazily on first access and cached.
    Use reset() to clear all cached instances for testing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        identity: "IdentityGateway | None" = None,
        users: "StoreGateway | None" = None,
        movies: "StoreGateway | None" = None,
    ) -> None:
        self._settings = settings
        self._identity = identity
        self._users = users
        self._movies = movies
        self._auth_service: "IAuthService | None" = None
        self._catalog_service: "ICatalogService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def identity(self) -> "IdentityGateway":
        """Get the identity provider gateway."""
        if self._identity is None:
            from gateways.factory import get_identity_gateway
            self._identity = get_identity_gateway(self.settings)
        return self._identity

    @property
    def users(self) -> "StoreGateway":
        """Get the users table gateway."""
        if self._users is None:
            from gateways.factory import get_store_gateway
            self._users = get_store_gateway(self.settings, self.settings.users_table)
        return self._users

    @property
    def movies(self) -> "StoreGateway":
        """Get the movies table gateway."""
        if self._movies is None:
            from gateways.factory import get_store_gateway
            self._movies = get_store_gateway(self.settings, self.settings.movies_table)
        return self._movies

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                identity=self.identity,
                users=self.users,
            )
        return self._auth_service

    @property
    def catalog(self) -> "ICatalogService":
        """Get the catalog service instance."""
        if self._catalog_service is None:
            from modules.movies.service import CatalogService
            self._catalog_service = CatalogService(
                movies=self.movies,
                scan_batch_size=self.settings.catalog_scan_batch_size,
                max_scan_items=self.settings.catalog_max_scan_items,
                legacy_scan=self.settings.catalog_legacy_scan,
            )
        return self._catalog_service

    def reset(self) -> None:
        """
        Reset all cached services.

        Injected gateways are dropped as well; the next access builds
        them from settings.
        """
        self._identity = None
        self._users = None
        self._movies = None
        self._auth_service = None
        self._catalog_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a preconfigured container (e.g. with fake gateways)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_catalog_service() -> "ICatalogService":
    """FastAPI dependency for catalog service."""
    return get_container().catalog


def get_app_settings() -> Settings:
    """FastAPI dependency for the settings the container was built with."""
    return get_container().settings
