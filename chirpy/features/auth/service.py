"""Authentication service layer."""

import logging
from datetime import UTC, datetime, timedelta
from functools import cache
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.config.settings import settings
from chirpy.features.user.schemas import UserResponse
from chirpy.features.user.service import UserService

from .bearer import extract_bearer_token
from .exceptions import InvalidCredentialsException, InvalidTokenException, RefreshTokenNotUsableException
from .jwt_utils import issue_access_token, make_refresh_token, validate_access_token
from .password import check_password_hash, hash_password
from .repository import RefreshTokenRepository
from .schemas import AccessTokenResponse, LoginResponse

logger = logging.getLogger(__name__)


@cache
def _dummy_password_hash() -> str:
    # Verified against when the email is unknown so both login failures cost the same.
    return hash_password("chirpy-unknown-account")


def resolve_access_token_lifetime(requested_seconds: int | None) -> int:
    """Access token lifetime for a login: the requested value, capped at the maximum."""
    maximum = settings.access_token_expire_seconds
    if requested_seconds is None:
        return maximum
    return min(requested_seconds, maximum)


class AuthService:
    """Service for login, token refresh, revocation, and request authentication."""

    @staticmethod
    async def login(
        session: AsyncSession, email: str, password: str, expires_in_seconds: int | None = None
    ) -> LoginResponse:
        """Authenticate a user by email and password and issue a token pair.

        Args:
            session: Database session
            email: Account email
            password: Plain text password
            expires_in_seconds: Optional requested access token lifetime

        Returns:
            LoginResponse with the user profile, access token and refresh token

        Raises:
            InvalidCredentialsException: If the email is unknown or the password is wrong

        """
        user = await UserService.get_user_by_email(session, email)
        if user is None:
            check_password_hash(password, _dummy_password_hash())
            raise InvalidCredentialsException()

        if not user.verify_password(password):
            raise InvalidCredentialsException()

        access_token = issue_access_token(
            str(user.id), resolve_access_token_lifetime(expires_in_seconds), settings.jwt_secret
        )

        repository = RefreshTokenRepository(session)
        refresh_token = await repository.insert(
            make_refresh_token(),
            user.id,
            datetime.now(UTC) + timedelta(days=settings.refresh_token_expire_days),
        )

        logger.info(f"User logged in: {user.id}")
        return LoginResponse(
            **UserResponse.model_validate(user).model_dump(),
            token=access_token,
            refresh_token=refresh_token.token,
        )

    @staticmethod
    async def refresh_access_token(session: AsyncSession, authorization: str | None) -> AccessTokenResponse:
        """Mint a new access token from an active refresh token.

        The refresh token itself is neither rotated nor extended.

        Raises:
            RefreshTokenNotUsableException: If the token is missing, unknown, expired, or revoked

        """
        token = extract_bearer_token(authorization)
        if not token:
            raise RefreshTokenNotUsableException()

        stored_token = await RefreshTokenRepository(session).find_by_token(token)
        if stored_token is None or not stored_token.is_usable:
            raise RefreshTokenNotUsableException()

        access_token = issue_access_token(
            str(stored_token.user_id), settings.access_token_expire_seconds, settings.jwt_secret
        )
        logger.info(f"Access token refreshed for user: {stored_token.user_id}")
        return AccessTokenResponse(token=access_token)

    @staticmethod
    async def revoke_refresh_token(session: AsyncSession, authorization: str | None) -> None:
        """Revoke an active refresh token (logout).

        Revoking an already revoked or expired token fails exactly like an
        unknown one.

        Raises:
            RefreshTokenNotUsableException: If the token is not ACTIVE

        """
        token = extract_bearer_token(authorization)
        if not token:
            raise RefreshTokenNotUsableException()

        repository = RefreshTokenRepository(session)
        stored_token = await repository.find_by_token(token)
        if stored_token is None or not stored_token.is_usable:
            raise RefreshTokenNotUsableException()

        if not await repository.revoke(token):
            raise RefreshTokenNotUsableException()
        logger.info(f"Refresh token revoked for user: {stored_token.user_id}")

    @staticmethod
    def authenticate(authorization: str | None) -> str:
        """Validate the bearer access token of a request.

        This is the only place a caller's identity comes from.

        Returns:
            The subject (user id) of the validated token

        Raises:
            InvalidTokenException: If the header is missing or malformed, or the
                token is forged or expired

        """
        token = extract_bearer_token(authorization)
        if not token:
            raise InvalidTokenException()

        payload = validate_access_token(token, settings.jwt_secret)
        if payload is None:
            raise InvalidTokenException()

        return payload["sub"]

    @staticmethod
    def authenticate_user_id(authorization: str | None) -> UUID:
        """Same as ``authenticate``, with the subject parsed as a user id."""
        subject = AuthService.authenticate(authorization)
        try:
            return UUID(subject)
        except ValueError as err:
            raise InvalidTokenException() from err
