"""Chirp domain models."""

from uuid import UUID, uuid4

from sqlalchemy import ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from chirpy.database.base import Base, TimestampMixin

MAX_CHIRP_LENGTH = 140


class Chirp(Base, TimestampMixin):
    """A short post authored by a user."""

    __tablename__ = "chirps"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
