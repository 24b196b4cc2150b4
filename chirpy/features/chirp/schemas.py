"""Chirp schemas (DTOs)."""

from datetime import datetime
from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel


class ChirpSortOrder(StrEnum):
    """Ordering of chirp listings by creation time."""

    ASC = "asc"
    DESC = "desc"


# Request schemas
class ChirpCreateRequest(BaseModel):
    """New chirp. The author is always the authenticated caller."""

    body: str


# Response schemas
class ChirpResponse(BaseModel):
    """Chirp response."""

    id: UUID
    body: str
    user_id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
