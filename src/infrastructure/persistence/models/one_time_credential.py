"""One-time credential database model.

Holds OTP codes and magic-link tokens for email verification and password
reset.

Security:
    - code: 6 digits (OTP) or 32 alphanumerics (magic link)
    - expires_at: 10 minutes (OTP) or 24 hours (magic link)
    - used: flipped by a single conditional UPDATE, never read-then-write
"""

from datetime import datetime

from sqlalchemy import Boolean, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class OneTimeCredentialModel(BaseModel):
    """One-time credential model.

    Fields:
        id, created_at: From BaseModel (created_at is set from the clock)
        email: Subject email
        code: Credential value
        purpose: email_verification / password_reset
        expires_at: Expiry (UTC)
        used: Consumed or superseded

    Indexes:
        - idx_one_time_credentials_email_purpose: (email, purpose) for
          issue-time invalidation and consumption
        - expires_at: purge of expired rows
    """

    __tablename__ = "one_time_credentials"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Subject email address",
    )

    code: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="OTP digits or magic-link token",
    )

    purpose: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="email_verification or password_reset",
    )

    expires_at: Mapped[datetime] = mapped_column(
        nullable=False,
        index=True,
        comment="Timestamp after which the credential is invalid",
    )

    used: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="True once consumed or superseded by a newer credential",
    )

    __table_args__ = (
        Index("idx_one_time_credentials_email_purpose", "email", "purpose"),
    )

    def __repr__(self) -> str:
        """String representation for debugging (code omitted)."""
        return (
            f"<OneTimeCredentialModel(id={self.id}, email={self.email}, "
            f"purpose={self.purpose}, used={self.used})>"
        )
