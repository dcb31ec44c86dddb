"""
Authentication module exceptions.

These exceptions are raised by the auth module and rendered by the API
error handler as `{message, error}` bodies.
"""

from typing import Optional

from shared.exceptions import ValidationError, UpstreamAuthError, UpstreamStoreError


class MissingFieldsError(ValidationError):
    """Raised when required request fields are absent or blank."""

    def __init__(self, fields: list[str]):
        super().__init__(
            f"Missing required fields: {', '.join(fields)}",
            code="ValidationError",
            details={"fields": fields},
        )


class AuthenticationFailedError(UpstreamAuthError):
    """
    Raised when login is rejected.

    Carries the provider's failure kind unchanged. The status is 401 unless
    the provider itself failed (5xx), which is passed through.
    """

    def __init__(self, kind: str, upstream_status: Optional[int] = None):
        status_code = upstream_status if upstream_status and upstream_status >= 500 else 401
        super().__init__(
            "Authentication failed",
            code=kind,
            status_code=status_code,
        )


class ProfileRecordMissingError(UpstreamStoreError):
    """
    Raised when sign-up succeeded but the profile record could not be saved.

    The identity account exists without a profile; it is not rolled back
    and needs reconciliation.
    """

    def __init__(self, user_id: str, store_error: str):
        super().__init__(
            "Account created but the user profile could not be saved",
            code="ProfileRecordMissing",
            status_code=500,
            details={"user_id": user_id, "store_error": store_error},
        )
