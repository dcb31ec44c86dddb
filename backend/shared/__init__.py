"""
Shared infrastructure for the Cinelist backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- logging: Process-wide logging setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, get_supabase_auth_client, reset_client_cache
from .exceptions import (
    CinelistError,
    NotFoundError,
    ValidationError,
    UpstreamAuthError,
    UpstreamStoreError,
)
from .logging import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "get_supabase_auth_client",
    "reset_client_cache",
    "CinelistError",
    "NotFoundError",
    "ValidationError",
    "UpstreamAuthError",
    "UpstreamStoreError",
    "configure_logging",
]
