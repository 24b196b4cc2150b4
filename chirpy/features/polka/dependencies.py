"""Polka webhook authentication."""

import hmac

from fastapi import Header

from chirpy.config.settings import settings
from chirpy.features.auth.bearer import extract_api_key
from chirpy.features.auth.exceptions import InvalidApiKeyException


async def require_polka_key(authorization: str | None = Header(default=None)) -> None:
    """Reject webhook calls without ``Authorization: ApiKey <POLKA_KEY>``."""
    api_key = extract_api_key(authorization)
    if not api_key or not hmac.compare_digest(api_key.encode(), settings.polka_key.encode()):
        raise InvalidApiKeyException()
