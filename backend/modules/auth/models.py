"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class SubscriptionTier(str, Enum):
    """Subscription tiers. New profiles always start on FREE."""

    FREE = "free"
    PREMIUM = "premium"


class UserProfile(BaseModel):
    """
    Profile record kept in the users table alongside the identity account.

    The id is generated locally and never derived from the email.
    Stored with camelCase attribute names.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Profile ID (UUID4)")
    email: str = Field(..., description="Email address")
    name: str = Field(..., description="Display name")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
    preferences: dict[str, Any] = Field(default_factory=dict)
    subscription_tier: SubscriptionTier = Field(
        default=SubscriptionTier.FREE,
        alias="subscriptionTier",
    )

    @classmethod
    def new(cls, email: str, name: str) -> "UserProfile":
        """Build a fresh profile with a new id and matching timestamps."""
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid.uuid4()),
            email=email,
            name=name,
            created_at=now,
            updated_at=now,
        )

    def to_item(self) -> dict[str, Any]:
        """Serialize for the document store."""
        return self.model_dump(mode="json", by_alias=True)


class RegisterRequest(BaseModel):
    """Body of POST /auth/register. Presence is checked by the flow."""

    email: Optional[str] = None
    password: Optional[str] = Field(None, repr=False)
    name: Optional[str] = None


class LoginRequest(BaseModel):
    """Body of POST /auth/login. Presence is checked by the flow."""

    email: Optional[str] = None
    password: Optional[str] = Field(None, repr=False)


class RegisterResponse(BaseModel):
    """Response from a successful registration."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = "User registered successfully"
    user_id: str = Field(..., alias="userId")


class LoginResponse(BaseModel):
    """Response from a successful login. `token` carries the id token."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = "Login successful"
    token: str
    access_token: str = Field(..., alias="accessToken")
    refresh_token: str = Field(..., alias="refreshToken")
