"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and swapping the identity provider.
"""

from typing import Optional, Protocol, runtime_checkable

from gateways.base import SessionTokens


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(
        self,
        email: Optional[str],
        password: Optional[str],
        name: Optional[str],
    ) -> str:
        """
        Create an identity account and its profile record.

        Args:
            email: Account email
            password: Account password
            name: Display name

        Returns:
            The new profile's user ID

        Raises:
            ValidationError: If a field is missing (no external call made)
            UpstreamAuthError: If the identity provider rejects the sign-up
            ProfileRecordMissingError: If the account was created but the
                profile record could not be saved
        """
        ...

    async def login(
        self,
        email: Optional[str],
        password: Optional[str],
    ) -> SessionTokens:
        """
        Authenticate and return the provider's session tokens verbatim.

        Raises:
            ValidationError: If a field is missing (no external call made)
            AuthenticationFailedError: If the provider rejects the credentials
        """
        ...
