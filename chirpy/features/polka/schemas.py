"""Polka webhook schemas."""

from pydantic import BaseModel

USER_UPGRADED_EVENT = "user.upgraded"


class PolkaWebhookData(BaseModel):
    # Parsed as a UUID only for events that act on it
    user_id: str


class PolkaWebhookRequest(BaseModel):
    """Payment event pushed by Polka."""

    event: str
    data: PolkaWebhookData
