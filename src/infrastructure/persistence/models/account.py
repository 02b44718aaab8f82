"""Account database model.

Stores identity, credential state and profile for students, lecturers and
admins. Password history is a JSON array of bcrypt hashes, most recent
first, never longer than the configured history size.

Security:
    - password_hash / password_history: bcrypt hashes only, never plaintext
    - email: unique constraint is the source of truth for duplicate checks
"""

from uuid import UUID

from sqlalchemy import JSON, Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class AccountModel(BaseMutableModel):
    """Account model.

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        email: Unique login email (case-sensitive)
        password_hash: Current bcrypt hash
        password_history: Prior hashes (JSON array, most recent first)
        role: student / lecturer / admin
        institution_id: Owning institution (FK)
        status: pending / active / suspended
        email_verified: Email verification flag
        is_first_login: Forced password change flag
        first_name .. title: Profile fields

    Indexes:
        - email (unique)
        - institution_id, role: roster queries and admin head count
        - student_id, lecturer_id: login by secondary identifier
    """

    __tablename__ = "accounts"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Login email (case-sensitive, unique)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hash of the current password",
    )

    password_history: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        comment="Previous bcrypt hashes, most recent first (max 5)",
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        index=True,
        comment="student, lecturer or admin",
    )

    institution_id: Mapped[UUID] = mapped_column(
        ForeignKey("institutions.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
        comment="Owning institution",
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
        comment="pending, active or suspended",
    )

    email_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Set once an email-verification credential is consumed",
    )

    is_first_login: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Cleared by an explicit password change",
    )

    # Profile
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    avatar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    department: Mapped[str | None] = mapped_column(String(255), nullable=True)
    student_id: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        index=True,
        comment="Generated student ID ({CODE}-{serial})",
    )
    year: Mapped[str | None] = mapped_column(String(20), nullable=True)
    lecturer_id: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        index=True,
        comment="Generated lecturer ID ({CODE}-LEC-{serial})",
    )
    academic_title: Mapped[str | None] = mapped_column(String(20), nullable=True)
    specialization: Mapped[str | None] = mapped_column(String(255), nullable=True)
    title: Mapped[str | None] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<AccountModel(id={self.id}, email={self.email}, "
            f"role={self.role}, status={self.status})>"
        )
