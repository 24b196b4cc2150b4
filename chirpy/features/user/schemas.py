"""User schemas (DTOs)."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field


# Request schemas
class UserCreateRequest(BaseModel):
    """User registration request."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class UserUpdateRequest(BaseModel):
    """Update of the caller's own email and password."""

    email: EmailStr
    password: str = Field(..., min_length=1)


# Response schemas
class UserResponse(BaseModel):
    """User response. Never carries the password hash."""

    id: UUID
    email: EmailStr
    created_at: datetime
    updated_at: datetime
    is_chirpy_red: bool

    model_config = {"from_attributes": True}
