"""
Client factory for Supabase.

Provides the service-role client used by the document store gateways and
a session-less anon client used by the identity gateway.
"""

from typing import Optional
from supabase import create_client, Client
from supabase.lib.client_options import ClientOptions

from .config import get_settings

# Module-level client cache
_service_client: Optional[Client] = None
_auth_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Used for table access: profile writes and catalog reads.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def get_supabase_auth_client() -> Client:
    """
    Get Supabase client for sign-up and sign-in calls.

    Sessions are neither persisted nor refreshed, so concurrent logins
    handled by one process never see each other's tokens.

    Returns:
        Supabase client configured with the anon key
    """
    global _auth_client

    if _auth_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_anon_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_ANON_KEY environment variables."
            )
        _auth_client = create_client(
            settings.supabase_url,
            settings.supabase_anon_key,
            options=ClientOptions(
                persist_session=False,
                auto_refresh_token=False,
            ),
        )

    return _auth_client


def reset_client_cache() -> None:
    """
    Reset the cached clients.

    Useful for testing or when configuration changes.
    """
    global _service_client, _auth_client
    _service_client = None
    _auth_client = None
