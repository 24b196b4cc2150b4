"""Authentication schemas (DTOs)."""

from pydantic import BaseModel, EmailStr, Field

from chirpy.features.user.schemas import UserResponse


# Request schemas
class UserLoginRequest(BaseModel):
    """Login request.

    ``expires_in_seconds`` may shorten the access token lifetime; values above
    the configured maximum are clamped to it.
    """

    email: EmailStr
    password: str
    expires_in_seconds: int | None = Field(None, gt=0, description="Requested access token lifetime in seconds")


# Response schemas
class LoginResponse(UserResponse):
    """Authenticated user profile with a fresh token pair."""

    token: str
    refresh_token: str


class AccessTokenResponse(BaseModel):
    """New access token minted from a refresh token."""

    token: str
