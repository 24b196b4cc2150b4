"""Repository for refresh token persistence."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from .models import RefreshToken


class RefreshTokenRepository:
    """Repository for refresh token database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def insert(self, token: str, user_id: UUID, expires_at: datetime) -> RefreshToken:
        """Store a new active refresh token.

        Args:
            token: The opaque token string.
            user_id: Owning user's id.
            expires_at: Absolute expiry time.

        Returns:
            The stored model.
        """
        refresh_token = RefreshToken(token=token, user_id=user_id, expires_at=expires_at, revoked_at=None)
        self._session.add(refresh_token)
        await self._session.flush()
        return refresh_token

    async def find_by_token(self, token: str) -> RefreshToken | None:
        """Look up a refresh token row by its token string."""
        stmt = select(RefreshToken).where(RefreshToken.token == token)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def revoke(self, token: str) -> bool:
        """Mark a refresh token revoked.

        Already revoked rows are left untouched, so repeating the call is a no-op.

        Returns:
            True if a row changed, False otherwise.
        """
        now = datetime.now(UTC)
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.token == token, RefreshToken.revoked_at.is_(None))
            .values(revoked_at=now, updated_at=now)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0
