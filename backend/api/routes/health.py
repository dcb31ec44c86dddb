"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import Settings
from ..dependencies import get_app_settings
from ..responses import envelope

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    store: str
    identity: str


@router.get("/health")
async def health_check(settings: Settings = Depends(get_app_settings)):
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    body = HealthResponse(status="healthy", version=settings.app_version)
    return envelope(200, body.model_dump())


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_app_settings)):
    """
    Readiness check endpoint.

    Reports whether the configured backing services have the settings they
    need. Does not call them.
    """
    if settings.backend == "memory":
        store = identity = "memory"
    else:
        store = "configured" if settings.supabase_url and settings.supabase_service_role_key else "unconfigured"
        identity = "configured" if settings.supabase_url and settings.supabase_anon_key else "unconfigured"

    ready = store != "unconfigured" and identity != "unconfigured"
    body = ReadinessResponse(
        status="ready" if ready else "not_ready",
        store=store,
        identity=identity,
    )
    return envelope(200 if ready else 503, body.model_dump())
