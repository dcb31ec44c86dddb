"""Identity gateway backed by Supabase Auth."""

import httpx
from supabase import AuthError, Client

from shared.exceptions import UpstreamAuthError

from .base import Credentials, IdentityGateway, SessionTokens


class SupabaseIdentityGateway(IdentityGateway):
    """
    Identity gateway over Supabase Auth (GoTrue).

    Supabase issues a single JWT access token; it doubles as the id token
    since it carries the user's identity claims.
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    def sign_up(self, credentials: Credentials, attributes: dict[str, str]) -> None:
        try:
            response = self._client.auth.sign_up(
                {
                    "email": credentials.email,
                    "password": credentials.password,
                    "options": {"data": attributes},
                }
            )
        except AuthError as e:
            raise _auth_error(e)
        except httpx.HTTPError as e:
            raise UpstreamAuthError(
                "Identity provider unavailable",
                code=type(e).__name__,
                status_code=503,
            )

        # With email confirmation on, Supabase answers a repeat sign-up with
        # an obfuscated user that has no identities instead of an error.
        user = response.user
        if user is not None and user.identities == []:
            raise UpstreamAuthError(
                "User already registered",
                code="user_already_exists",
                status_code=422,
            )

    def authenticate(self, credentials: Credentials) -> SessionTokens:
        try:
            response = self._client.auth.sign_in_with_password(
                {
                    "email": credentials.email,
                    "password": credentials.password,
                }
            )
        except AuthError as e:
            raise _auth_error(e)
        except httpx.HTTPError as e:
            raise UpstreamAuthError(
                "Identity provider unavailable",
                code=type(e).__name__,
                status_code=503,
            )

        session = response.session
        if session is None:
            raise UpstreamAuthError(
                "No session issued",
                code="session_missing",
                status_code=401,
            )

        return SessionTokens(
            id_token=session.access_token,
            access_token=session.access_token,
            refresh_token=session.refresh_token,
        )


def _auth_error(exc: AuthError) -> UpstreamAuthError:
    """Translate a Supabase Auth failure, keeping its kind and status."""
    return UpstreamAuthError(
        getattr(exc, "message", None) or str(exc),
        code=getattr(exc, "code", None) or type(exc).__name__,
        status_code=getattr(exc, "status", None),
    )
