"""
Movies module interface.

Defines the contract for catalog reads.
"""

from typing import Protocol, runtime_checkable

from .models import Movie, MovieListResponse, MovieQuery


@runtime_checkable
class ICatalogService(Protocol):
    """Interface for catalog operations."""

    async def get_movie(self, movie_id: str) -> Movie:
        """
        Get a movie by ID.

        Raises:
            MovieNotFoundError: If no movie has this ID
            UpstreamStoreError: If the store read fails
        """
        ...

    async def list_movies(self, query: MovieQuery) -> MovieListResponse:
        """
        List one page of the catalog, filtered by genre and sorted.

        Raises:
            UpstreamStoreError: If the store scan fails
        """
        ...
