"""Factory functions for creating gateways from settings."""

import json
import logging
from pathlib import Path
from typing import Any

from shared.config import Settings
from shared.database import get_supabase_auth_client, get_supabase_client

from .base import IdentityGateway, StoreGateway
from .memory import InMemoryIdentityGateway, InMemoryStoreGateway
from .supabase_identity import SupabaseIdentityGateway
from .supabase_store import SupabaseStoreGateway

logger = logging.getLogger(__name__)


def get_identity_gateway(settings: Settings) -> IdentityGateway:
    """Create the identity gateway for the configured backend."""
    if settings.backend == "memory":
        return InMemoryIdentityGateway()
    return SupabaseIdentityGateway(get_supabase_auth_client())


def get_store_gateway(settings: Settings, table: str) -> StoreGateway:
    """Create a store gateway over `table` for the configured backend.

    The memory backend seeds the movies table from `memory_seed_file`
    when one is configured.
    """
    if settings.backend == "memory":
        items: list[dict[str, Any]] = []
        if table == settings.movies_table and settings.memory_seed_file:
            items = load_seed_items(Path(settings.memory_seed_file))
        return InMemoryStoreGateway(items)
    return SupabaseStoreGateway(get_supabase_client(), table)


def load_seed_items(path: Path) -> list[dict[str, Any]]:
    """Read a JSON array of records.

    Raises:
        ValueError: If the file does not hold a JSON array of objects
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError(f"Seed file must contain a JSON array of objects: {path}")

    logger.info("Loaded %d seed records from %s", len(data), path)
    return data
