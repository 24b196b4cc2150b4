"""Admin router (metrics and reset)."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.config.settings import settings
from chirpy.database.dependencies import get_db_session

from .exceptions import ResetForbidden
from .metrics import ApiMetrics, get_metrics
from .service import AdminService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/admin", tags=["Admin"])

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>
"""


@router.get("/metrics", response_class=HTMLResponse)
async def metrics_page(metrics: ApiMetrics = Depends(get_metrics)):
    """File server usage page."""
    return METRICS_TEMPLATE.format(hits=metrics.fileserver_hits)


@router.post("/reset", response_class=PlainTextResponse)
async def reset(metrics: ApiMetrics = Depends(get_metrics), session: AsyncSession = Depends(get_db_session)):
    """Reset the hit counter and delete all users (development only)."""
    if not settings.is_development:
        raise ResetForbidden()

    await AdminService.reset(session, metrics)
    await session.commit()
    return "Hits reset to 0"
