"""Account administration commands (CQRS write operations).

Issued by institution admins for accounts inside their own institution.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import AccountRole, AccountStatus


@dataclass(frozen=True, kw_only=True)
class ProvisionAccount:
    """Create a student or lecturer account with a default password.

    The account starts pending and unverified; an activation email with a
    magic link is sent to ``email``.

    Attributes:
        admin_id: Acting admin (determines the institution).
        role: STUDENT or LECTURER.
        first_name: First name (also seeds the default password).
        last_name: Last name.
        email: Login email.
        department: Department name.
        year: Study year (students).
        academic_title: Prof/Dr/Mr/Mrs/Ms (lecturers).
        specialization: Optional specialization (lecturers).

    Example:
        >>> command = ProvisionAccount(
        ...     admin_id=admin.id,
        ...     role=AccountRole.STUDENT,
        ...     first_name="Ada",
        ...     last_name="Lovelace",
        ...     email="ada@mit.edu",
        ...     department="Mathematics",
        ...     year="1",
        ... )
    """

    admin_id: UUID
    role: AccountRole
    first_name: str
    last_name: str
    email: str
    department: str
    year: str | None = None
    academic_title: str | None = None
    specialization: str | None = None


@dataclass(frozen=True, kw_only=True)
class SetAccountStatus:
    """Suspend or re-activate an account.

    Attributes:
        admin_id: Acting admin.
        account_id: Target account (same institution as the admin).
        status: New status (ACTIVE or SUSPENDED).
    """

    admin_id: UUID
    account_id: UUID
    status: AccountStatus
