"""
Authentication service implementation.

Registration signs the user up with the identity provider, then writes a
profile record to the users table. Login exchanges credentials for the
provider's session tokens.
"""

import logging
from typing import Optional

from gateways.base import Credentials, IdentityGateway, SessionTokens, StoreGateway
from shared.exceptions import UpstreamAuthError, UpstreamStoreError

from .interfaces import IAuthService
from .models import UserProfile
from .exceptions import (
    AuthenticationFailedError,
    MissingFieldsError,
    ProfileRecordMissingError,
)

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    The two external calls in `register` are sequential and not
    transactional: a profile write failure after a successful sign-up
    leaves an identity account without a profile. That case is raised as
    ProfileRecordMissingError and logged for reconciliation.
    """

    def __init__(self, identity: IdentityGateway, users: StoreGateway):
        self._identity = identity
        self._users = users

    async def register(
        self,
        email: Optional[str],
        password: Optional[str],
        name: Optional[str],
    ) -> str:
        _require_fields(email=email, password=password, name=name)
        credentials = Credentials(email=email, password=password)

        try:
            self._identity.sign_up(credentials, {"name": name, "email": email})
        except UpstreamAuthError as e:
            logger.warning("Sign-up rejected by identity provider: %s", e.code)
            raise

        profile = UserProfile.new(email=email, name=name)

        try:
            self._users.put(profile.to_item())
        except UpstreamStoreError as e:
            logger.error(
                "Identity account created without profile record, "
                "reconciliation required: user_id=%s email=%s store_error=%s",
                profile.id,
                email,
                e.code,
                extra={
                    "reconciliation_required": True,
                    "user_id": profile.id,
                    "email": email,
                },
            )
            raise ProfileRecordMissingError(profile.id, e.code) from e

        logger.info("Registered user %s", profile.id)
        return profile.id

    async def login(
        self,
        email: Optional[str],
        password: Optional[str],
    ) -> SessionTokens:
        _require_fields(email=email, password=password)

        try:
            tokens = self._identity.authenticate(
                Credentials(email=email, password=password)
            )
        except UpstreamAuthError as e:
            logger.warning("Login rejected by identity provider: %s", e.code)
            raise AuthenticationFailedError(e.code, e.status_code) from e

        return tokens


def _require_fields(**fields: Optional[str]) -> None:
    """Raise MissingFieldsError naming every absent or blank field."""
    missing = [name for name, value in fields.items() if not value or not value.strip()]
    if missing:
        raise MissingFieldsError(missing)
