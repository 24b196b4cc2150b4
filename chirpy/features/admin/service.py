"""Admin service layer."""

import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.features.auth.models import RefreshToken
from chirpy.features.chirp.models import Chirp
from chirpy.features.user.models import User

from .metrics import ApiMetrics

logger = logging.getLogger(__name__)


class AdminService:
    """Service for admin operations."""

    @staticmethod
    async def reset(session: AsyncSession, metrics: ApiMetrics) -> None:
        """Zero the hit counter and delete every user with their chirps and tokens."""
        metrics.reset()
        # Dependents first; SQLite does not enforce ON DELETE CASCADE by default.
        await session.execute(delete(Chirp))
        await session.execute(delete(RefreshToken))
        await session.execute(delete(User))
        logger.warning("Application state reset: hit counter zeroed, all users deleted")
