"""User account router (API endpoints)."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.database.dependencies import get_db_session
from chirpy.features.auth.dependencies import get_current_user_id

from .exceptions import UserNotFound
from .schemas import UserCreateRequest, UserResponse, UserUpdateRequest
from .service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(data: UserCreateRequest, session: AsyncSession = Depends(get_db_session)):
    """Create a new account."""
    user = await UserService.create_user(session, data.email, data.password)
    await session.commit()
    return UserResponse.model_validate(user)


@router.put("", response_model=UserResponse)
async def update_current_user(
    data: UserUpdateRequest,
    user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Change the authenticated user's email and password."""
    user = await UserService.change_credentials(session, user_id, data.email, data.password)
    if user is None:
        raise UserNotFound()
    await session.commit()
    return UserResponse.model_validate(user)
