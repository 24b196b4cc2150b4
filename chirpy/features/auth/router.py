"""Authentication router (login and refresh token endpoints)."""

import logging

from fastapi import APIRouter, Depends, Header, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.config.settings import settings
from chirpy.database.dependencies import get_db_session
from chirpy.shared.rate_limit import limiter

from .schemas import AccessTokenResponse, LoginResponse, UserLoginRequest
from .service import AuthService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.login_rate_limit)
async def login(data: UserLoginRequest, request: Request, session: AsyncSession = Depends(get_db_session)):
    """Login and get tokens.

    - **email**: Account email
    - **password**: Password
    - **expires_in_seconds**: Optional access token lifetime (capped at one hour)

    Returns the user profile, an access `token` and a `refresh_token`.
    """
    response = await AuthService.login(session, data.email, data.password, data.expires_in_seconds)
    await session.commit()
    return response


@router.post("/refresh", response_model=AccessTokenResponse)
async def refresh_token(
    authorization: str | None = Header(default=None),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a new access token.

    Send the refresh token as `Authorization: Bearer <refresh_token>`.
    """
    return await AuthService.refresh_access_token(session, authorization)


@router.post("/revoke", status_code=status.HTTP_204_NO_CONTENT)
async def revoke_token(
    authorization: str | None = Header(default=None),
    session: AsyncSession = Depends(get_db_session),
):
    """Revoke a refresh token (logout).

    Send the refresh token as `Authorization: Bearer <refresh_token>`.
    """
    await AuthService.revoke_refresh_token(session, authorization)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
