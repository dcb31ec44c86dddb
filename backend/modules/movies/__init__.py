"""
Movies module.

Read-only access to the movie catalog.

Public API:
- ICatalogService: Interface for catalog reads
- Movie, MovieQuery, MovieListResponse, SortBy
- Movie exceptions: MovieNotFoundError, CatalogStoreError
"""

from .interfaces import ICatalogService
from .models import Movie, MovieListResponse, MovieQuery, SortBy
from .exceptions import CatalogStoreError, MovieNotFoundError

__all__ = [
    # Interface
    "ICatalogService",
    # Models
    "Movie",
    "MovieListResponse",
    "MovieQuery",
    "SortBy",
    # Exceptions
    "CatalogStoreError",
    "MovieNotFoundError",
]
