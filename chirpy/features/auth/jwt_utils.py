"""JWT utilities for authentication."""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import InvalidTokenError

TOKEN_ISSUER = "chirpy"
JWT_ALGORITHM = "HS256"


def issue_access_token(subject_id: str, lifetime_seconds: int, secret: str) -> str:
    """Create a signed JWT access token.

    Args:
        subject_id: User id placed in the ``sub`` claim
        lifetime_seconds: Seconds until expiry. Not clamped; a negative value
            yields a token that is already expired.
        secret: HMAC signing secret

    Returns:
        Encoded JWT token string

    """
    issued_at = datetime.now(UTC).replace(microsecond=0)
    payload = {
        "iss": TOKEN_ISSUER,
        "sub": subject_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=lifetime_seconds),
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def validate_access_token(token: str, secret: str) -> dict[str, Any] | None:
    """Decode and verify a JWT access token.

    Args:
        token: JWT token string
        secret: HMAC secret the token must be signed with

    Returns:
        Decoded payload (iss, sub, iat, exp), or None if the token is
        malformed, forged, signed with another secret, or expired

    """
    if not token:
        return None
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALGORITHM],
            issuer=TOKEN_ISSUER,
            options={"require": ["iss", "sub", "iat", "exp"]},
        )
    except InvalidTokenError:
        return None


def make_refresh_token() -> str:
    """Generate an opaque refresh token (256 random bits, hex encoded)."""
    return secrets.token_hex(32)
