"""
Movie catalog API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog_service
from api.responses import envelope

from .interfaces import ICatalogService
from .models import MovieQuery

router = APIRouter()


@router.get("")
async def list_movies(
    page: Optional[str] = Query(default=None, description="Page number (1-indexed)"),
    limit: Optional[str] = Query(default=None, description="Items per page"),
    genre: Optional[str] = Query(default=None, description="Only movies in this genre"),
    sort_by: Optional[str] = Query(
        default=None,
        alias="sortBy",
        description="title, rating or releaseDate",
    ),
    service: ICatalogService = Depends(get_catalog_service),
):
    """
    List the catalog.

    Paginated over the full matching set; most recent releases first by
    default.
    """
    query = MovieQuery.from_params(page=page, limit=limit, genre=genre, sort_by=sort_by)
    result = await service.list_movies(query)
    return envelope(200, result.to_response())


@router.get("/{movie_id}")
async def get_movie(
    movie_id: str,
    service: ICatalogService = Depends(get_catalog_service),
):
    """
    Get a single movie by ID.
    """
    movie = await service.get_movie(movie_id)
    return envelope(200, movie.to_response())
