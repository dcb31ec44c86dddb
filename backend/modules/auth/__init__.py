"""
Authentication module.

Handles registration and login against the identity provider, and the
user profile record kept in the document store.

Public API:
- IAuthService: Interface for auth operations
- UserProfile: Profile record created at registration
- Auth exceptions: MissingFieldsError, AuthenticationFailedError,
  ProfileRecordMissingError
"""

from .interfaces import IAuthService
from .models import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    SubscriptionTier,
    UserProfile,
)
from .exceptions import (
    AuthenticationFailedError,
    MissingFieldsError,
    ProfileRecordMissingError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "SubscriptionTier",
    "UserProfile",
    # Exceptions
    "AuthenticationFailedError",
    "MissingFieldsError",
    "ProfileRecordMissingError",
]
