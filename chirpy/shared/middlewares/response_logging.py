"""Log every response that is not a plain 200."""

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

logger = logging.getLogger(__name__)


async def log_non_ok_responses_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    response = await call_next(request)
    if response.status_code != 200:
        logger.warning(f"[NON-OK] {request.method} {request.url.path} - Status: {response.status_code}")
    return response
