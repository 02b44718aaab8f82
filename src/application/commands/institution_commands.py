"""Institution commands (CQRS write operations).

Super-admin operations. Institutions are never hard-deleted;
DeactivateInstitution moves them to INACTIVE.
"""

from dataclasses import dataclass

from src.domain.enums import InstitutionStatus


@dataclass(frozen=True, kw_only=True)
class CreateInstitution:
    """Create an institution.

    Attributes:
        name: Display name (at least 2 characters).
        code: Unique code, normalized to uppercase.
        domain: Optional email domain.
        status: Initial status (default ACTIVE).
    """

    name: str
    code: str
    domain: str = ""
    status: InstitutionStatus = InstitutionStatus.ACTIVE


@dataclass(frozen=True, kw_only=True)
class UpdateInstitutionStatus:
    """Change an institution's status by code."""

    code: str
    status: InstitutionStatus


@dataclass(frozen=True, kw_only=True)
class DeactivateInstitution:
    """Soft-delete an institution (status INACTIVE)."""

    code: str
