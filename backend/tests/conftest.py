"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Services are wired to in-memory gateways; no Supabase project is needed.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, reset_container, set_container
from gateways.memory import InMemoryIdentityGateway, InMemoryStoreGateway
from shared.config import Settings
from shared.database import reset_client_cache


SAMPLE_MOVIES = [
    {
        "id": "m1",
        "title": "The Matrix",
        "genres": ["action", "sci-fi"],
        "rating": 8.7,
        "releaseDate": "1999-03-31",
        "director": "Lana Wachowski",
    },
    {
        "id": "m2",
        "title": "Amélie",
        "genres": ["comedy", "romance"],
        "rating": 8.3,
        "releaseDate": "2001-04-25",
    },
    {
        "id": "m3",
        "title": "Inception",
        "genres": ["action", "sci-fi", "thriller"],
        "rating": 8.8,
        "releaseDate": "2010-07-16",
    },
    {
        "id": "m4",
        "title": "Alien",
        "genres": ["horror", "sci-fi"],
        "rating": 8.5,
        "releaseDate": "1979-05-25",
    },
    {
        "id": "m5",
        "title": "Heat",
        "genres": ["action", "crime"],
        "rating": 8.3,
        "releaseDate": "1995-12-15",
    },
]


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and client cache around each test."""
    reset_container()
    reset_client_cache()
    yield
    reset_container()
    reset_client_cache()


@pytest.fixture
def identity() -> InMemoryIdentityGateway:
    """Empty identity provider."""
    return InMemoryIdentityGateway()


@pytest.fixture
def users() -> InMemoryStoreGateway:
    """Empty users table."""
    return InMemoryStoreGateway()


@pytest.fixture
def movies() -> InMemoryStoreGateway:
    """Movies table holding SAMPLE_MOVIES."""
    return InMemoryStoreGateway(SAMPLE_MOVIES)


@pytest.fixture
def test_settings() -> Settings:
    """Memory backend with a scan batch smaller than the sample catalog."""
    return Settings(backend="memory", catalog_scan_batch_size=2)


@pytest.fixture
def container(test_settings, identity, users, movies) -> ServiceContainer:
    """Install a container wired to the in-memory gateways."""
    container = ServiceContainer(
        settings=test_settings,
        identity=identity,
        users=users,
        movies=movies,
    )
    set_container(container)
    return container


@pytest.fixture
def client(container) -> TestClient:
    """HTTP client for an app using the in-memory container."""
    return TestClient(create_app())
