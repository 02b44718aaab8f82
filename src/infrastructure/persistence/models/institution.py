"""Institution database model.

Institutions are the tenant boundary. The code is unique and stored
uppercase; it prefixes every generated student and lecturer ID.
"""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class InstitutionModel(BaseMutableModel):
    """Institution model.

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        name: Display name
        code: Unique uppercase short code (indexed)
        domain: Optional email domain ("" when unset)
        status: active / inactive / suspended
        settings: Feature switches (JSON)
    """

    __tablename__ = "institutions"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Institution display name",
    )

    code: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique uppercase institution code (e.g. MIT)",
    )

    domain: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        comment="Email domain of the institution (optional)",
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="active",
        index=True,
        comment="active, inactive (soft-deleted) or suspended",
    )

    settings: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        comment="Feature switches (self-registration, email verification)",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<InstitutionModel(id={self.id}, code={self.code}, status={self.status})>"
