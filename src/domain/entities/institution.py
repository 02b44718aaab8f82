"""Institution domain entity.

An institution is the tenant boundary: every account belongs to exactly one.
Institutions are soft-deleted by moving them to INACTIVE.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.enums import InstitutionStatus


@dataclass
class InstitutionSettings:
    """Per-institution feature switches."""

    allow_student_self_registration: bool = False
    require_email_verification: bool = True


@dataclass
class Institution:
    """Institution domain entity.

    Attributes:
        id: Unique institution identifier.
        name: Display name.
        code: Unique uppercase short code (e.g. "MIT"); prefixes generated IDs.
        domain: Optional email domain.
        status: Active, inactive (soft-deleted) or suspended.
        settings: Feature switches.
        created_at: Creation timestamp (set by the store).
        updated_at: Last update timestamp (set by the store).
    """

    id: UUID
    name: str
    code: str
    status: InstitutionStatus
    domain: str = ""
    settings: InstitutionSettings = field(default_factory=InstitutionSettings)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Normalize the institution code to uppercase."""
        self.code = self.code.upper()

    @property
    def is_active(self) -> bool:
        """True if the institution accepts registrations and logins."""
        return self.status == InstitutionStatus.ACTIVE
