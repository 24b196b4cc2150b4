"""Chirp service layer."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import ChirpBodyMissing, ChirpNotFound, ChirpTooLong, NotChirpAuthor
from .models import MAX_CHIRP_LENGTH, Chirp
from .profanity import clean_body
from .schemas import ChirpSortOrder

logger = logging.getLogger(__name__)


class ChirpService:
    """Service for chirp operations."""

    @staticmethod
    async def create_chirp(session: AsyncSession, user_id: UUID, body: str) -> Chirp:
        """Validate, clean and store a chirp.

        Raises:
            ChirpBodyMissing: If the body is empty or only whitespace
            ChirpTooLong: If the body exceeds MAX_CHIRP_LENGTH characters

        """
        if not body.strip():
            raise ChirpBodyMissing()
        if len(body) > MAX_CHIRP_LENGTH:
            raise ChirpTooLong()

        chirp = Chirp(body=clean_body(body), user_id=user_id)
        session.add(chirp)
        await session.flush()
        logger.info(f"Chirp created: {chirp.id} by {user_id}")
        return chirp

    @staticmethod
    async def get_chirp(session: AsyncSession, chirp_id: UUID) -> Chirp | None:
        """Get chirp by ID."""
        stmt = select(Chirp).where(Chirp.id == chirp_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_chirps(
        session: AsyncSession, author_id: UUID | None = None, sort: ChirpSortOrder = ChirpSortOrder.ASC
    ) -> list[Chirp]:
        """List chirps ordered by creation time, optionally for one author."""
        stmt = select(Chirp)
        if author_id is not None:
            stmt = stmt.where(Chirp.user_id == author_id)
        if sort is ChirpSortOrder.DESC:
            stmt = stmt.order_by(Chirp.created_at.desc())
        else:
            stmt = stmt.order_by(Chirp.created_at.asc())

        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def delete_chirp(session: AsyncSession, chirp_id: UUID, user_id: UUID) -> None:
        """Delete a chirp owned by ``user_id``.

        Raises:
            ChirpNotFound: If the chirp does not exist
            NotChirpAuthor: If the chirp belongs to another user

        """
        chirp = await ChirpService.get_chirp(session, chirp_id)
        if chirp is None:
            raise ChirpNotFound()
        if chirp.user_id != user_id:
            raise NotChirpAuthor()

        await session.delete(chirp)
        await session.flush()
        logger.info(f"Chirp deleted: {chirp_id} by {user_id}")
