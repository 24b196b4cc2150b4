"""Chirp router (API endpoints)."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.database.dependencies import get_db_session
from chirpy.features.auth.dependencies import get_current_user, get_current_user_id
from chirpy.features.user.models import User

from .exceptions import ChirpNotFound
from .schemas import ChirpCreateRequest, ChirpResponse, ChirpSortOrder
from .service import ChirpService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/chirps", tags=["Chirps"])


@router.post("", response_model=ChirpResponse, status_code=status.HTTP_201_CREATED)
async def create_chirp(
    data: ChirpCreateRequest,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Post a chirp as the authenticated user (max 140 characters, profanity masked)."""
    chirp = await ChirpService.create_chirp(session, current_user.id, data.body)
    await session.commit()
    return ChirpResponse.model_validate(chirp)


@router.get("", response_model=list[ChirpResponse])
async def list_chirps(
    author_id: UUID | None = None,
    sort: ChirpSortOrder = ChirpSortOrder.ASC,
    session: AsyncSession = Depends(get_db_session),
):
    """List chirps.

    - `author_id`: only chirps by this user
    - `sort`: `asc` (default) or `desc` by creation time
    """
    chirps = await ChirpService.get_chirps(session, author_id=author_id, sort=sort)
    return [ChirpResponse.model_validate(c) for c in chirps]


@router.get("/{chirp_id}", response_model=ChirpResponse)
async def get_chirp(chirp_id: UUID, session: AsyncSession = Depends(get_db_session)):
    """Get chirp by ID."""
    chirp = await ChirpService.get_chirp(session, chirp_id)

    if not chirp:
        raise ChirpNotFound()

    return ChirpResponse.model_validate(chirp)


@router.delete("/{chirp_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_chirp(
    chirp_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete one of the authenticated user's chirps."""
    await ChirpService.delete_chirp(session, chirp_id, user_id)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
