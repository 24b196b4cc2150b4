"""Authentication models (refresh token storage)."""

from datetime import UTC, datetime
from enum import StrEnum
from uuid import UUID

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from chirpy.database.base import Base, TimestampMixin, UTCDateTime


class RefreshTokenState(StrEnum):
    """Lifecycle state of a refresh token.

    EXPIRED and REVOKED are terminal; nothing moves a token back to ACTIVE.
    """

    ACTIVE = "active"
    EXPIRED = "expired"
    REVOKED = "revoked"


class RefreshToken(Base, TimestampMixin):
    """Long-lived opaque token used to obtain new access tokens.

    Created at login and mutated only by revocation. Refreshing never touches
    ``expires_at``, so a session cannot be extended indefinitely.
    """

    __tablename__ = "refresh_tokens"

    token: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    expires_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)
    revoked_at: Mapped[datetime | None] = mapped_column(UTCDateTime(), nullable=True, default=None)

    def state_at(self, moment: datetime) -> RefreshTokenState:
        if self.revoked_at is not None:
            return RefreshTokenState.REVOKED
        if self.expires_at <= moment:
            return RefreshTokenState.EXPIRED
        return RefreshTokenState.ACTIVE

    @property
    def state(self) -> RefreshTokenState:
        return self.state_at(datetime.now(UTC))

    @property
    def is_usable(self) -> bool:
        """A token can mint access tokens only while ACTIVE."""
        return self.state is RefreshTokenState.ACTIVE
