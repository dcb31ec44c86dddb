"""
Gateways to the external collaborators.

- IdentityGateway: sign-up and authentication against the identity provider
- StoreGateway: get / put / scan against a document store table

Supabase-backed implementations are used in deployments; in-memory ones
serve tests and local runs.
"""

from .base import (
    ContainsFilter,
    Credentials,
    IdentityGateway,
    ScanPage,
    SessionTokens,
    StoreGateway,
)
from .factory import get_identity_gateway, get_store_gateway

__all__ = [
    "ContainsFilter",
    "Credentials",
    "IdentityGateway",
    "ScanPage",
    "SessionTokens",
    "StoreGateway",
    "get_identity_gateway",
    "get_store_gateway",
]
