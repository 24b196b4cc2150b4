"""User domain models."""

from uuid import UUID, uuid4

from sqlalchemy import Boolean, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from chirpy.database.base import Base, TimestampMixin
from chirpy.features.auth.password import check_password_hash, hash_password


class User(Base, TimestampMixin):
    """Chirpy account.

    The password hash is produced only by ``hash_password`` and never leaves
    the service layer.
    """

    __tablename__ = "users"

    # Primary key
    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)

    # Identity
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    # Authentication
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)

    # Premium membership (set by Polka payment webhooks)
    is_chirpy_red: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="false")

    def verify_password(self, plain_password: str) -> bool:
        """Verify a password against the stored Argon2 hash."""
        return check_password_hash(plain_password, self.hashed_password)

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password using Argon2."""
        return hash_password(password)
