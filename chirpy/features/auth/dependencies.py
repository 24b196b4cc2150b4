"""Authentication dependencies for FastAPI."""

from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.database.dependencies import get_db_session
from chirpy.features.user.models import User
from chirpy.features.user.service import UserService

from .exceptions import InvalidTokenException
from .service import AuthService


async def get_current_user_id(authorization: str | None = Header(default=None)) -> UUID:
    """Get the authenticated user id from the bearer access token.

    The Authorization header is read raw rather than through ``HTTPBearer`` so
    that the scheme is matched case-sensitively with a single space separator.
    """
    return AuthService.authenticate_user_id(authorization)


async def get_current_user(
    user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
) -> User:
    """Get the current authenticated user.

    Raises:
        InvalidTokenException: If the token is valid but its user no longer exists

    """
    user = await UserService.get_user(session, user_id)
    if user is None:
        raise InvalidTokenException()
    return user
