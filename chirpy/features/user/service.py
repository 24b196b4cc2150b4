"""User service layer."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import EmailAlreadyExists
from .models import User

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"email", "hashed_password", "is_chirpy_red"})


class UserService:
    """Service for user operations."""

    @staticmethod
    async def create_user(session: AsyncSession, email: str, password: str) -> User:
        """Register a new user.

        Raises:
            EmailAlreadyExists: If email already exists

        """
        if await UserService.get_user_by_email(session, email):
            raise EmailAlreadyExists()

        user = User(email=email, hashed_password=User.hash_password(password), is_chirpy_red=False)
        session.add(user)
        await UserService._flush_unique_email(session)
        logger.info(f"New user registered: {user.id}")
        return user

    @staticmethod
    async def _flush_unique_email(session: AsyncSession) -> None:
        """Flush pending user changes, mapping a lost race on the unique email to EmailAlreadyExists."""
        try:
            await session.flush()
        except IntegrityError as e:
            raise EmailAlreadyExists() from e

    @staticmethod
    async def get_user(session: AsyncSession, user_id: UUID) -> User | None:
        """Get user by ID."""
        stmt = select(User).where(User.id == user_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
        """Get user by email."""
        stmt = select(User).where(User.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def update_user(session: AsyncSession, user_id: UUID, **fields: Any) -> User | None:
        """Apply a partial update to a user.

        Args:
            session: Database session
            user_id: User to update
            **fields: Any of email, hashed_password, is_chirpy_red

        Returns:
            Updated User object, or None if no such user

        Raises:
            EmailAlreadyExists: If email is being changed to an existing email

        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")

        user = await UserService.get_user(session, user_id)
        if user is None:
            return None

        new_email = fields.get("email")
        if new_email is not None and new_email != user.email:
            if await UserService.get_user_by_email(session, new_email):
                raise EmailAlreadyExists()

        for key, value in fields.items():
            setattr(user, key, value)

        await UserService._flush_unique_email(session)
        logger.info(f"User updated: {user.id} ({', '.join(sorted(fields))})")
        return user

    @staticmethod
    async def change_credentials(session: AsyncSession, user_id: UUID, email: str, password: str) -> User | None:
        """Replace a user's email and password."""
        return await UserService.update_user(
            session,
            user_id,
            email=email,
            hashed_password=User.hash_password(password),
        )

    @staticmethod
    async def upgrade_to_chirpy_red(session: AsyncSession, user_id: UUID) -> User | None:
        """Grant premium membership."""
        user = await UserService.update_user(session, user_id, is_chirpy_red=True)
        if user is not None:
            logger.info(f"User upgraded to Chirpy Red: {user.id}")
        return user
