"""Polka payment webhook router."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.database.dependencies import get_db_session
from chirpy.features.user.exceptions import UserNotFound
from chirpy.features.user.service import UserService

from .dependencies import require_polka_key
from .schemas import USER_UPGRADED_EVENT, PolkaWebhookRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/polka", tags=["Webhooks"])


@router.post("/webhooks", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_polka_key)])
async def polka_webhook(data: PolkaWebhookRequest, session: AsyncSession = Depends(get_db_session)):
    """Handle a Polka payment event.

    Only `user.upgraded` has an effect; other events are acknowledged and ignored.
    """
    if data.event != USER_UPGRADED_EVENT:
        logger.debug(f"Ignoring Polka event: {data.event}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    try:
        user_id = UUID(data.data.user_id)
    except ValueError:
        raise UserNotFound() from None

    user = await UserService.upgrade_to_chirpy_red(session, user_id)
    if user is None:
        raise UserNotFound()

    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
