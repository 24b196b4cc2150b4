"""Authentication exceptions.

Every failure here maps to the same 401 response shape. Unknown, expired and
revoked refresh tokens share one detail message so callers cannot probe token
state, and bad email and bad password share another.
"""

from fastapi import HTTPException, status

UNAUTHORIZED_DETAIL = "Unauthorized"


class AuthenticationException(HTTPException):
    """Base authentication exception."""

    def __init__(self, detail: str = UNAUTHORIZED_DETAIL):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class InvalidCredentialsException(AuthenticationException):
    """Raised when the email is unknown or the password does not match."""

    def __init__(self):
        super().__init__(detail="Incorrect email or password")


class InvalidTokenException(AuthenticationException):
    """Raised when the bearer header is missing or the access token is invalid or expired."""

    def __init__(self):
        super().__init__(detail=UNAUTHORIZED_DETAIL)


class RefreshTokenNotUsableException(InvalidTokenException):
    """Raised when a refresh token is unknown, expired, or revoked."""


class InvalidApiKeyException(AuthenticationException):
    """Raised when a webhook call does not carry the configured API key."""

    def __init__(self):
        super().__init__(detail=UNAUTHORIZED_DETAIL)
