"""Account domain entity.

Identity and credential record for a student, lecturer, or admin.
Pure business logic, no framework dependencies.

Lifecycle:
    pending/unverified  --(email verification consumed)-->  active/verified
    is_first_login=True --(explicit password change)----->  is_first_login=False

Suspension is a manual override; there is no automatic way back to active.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.enums import AccountRole, AccountStatus


@dataclass
class AccountProfile:
    """Profile fields carried on an account.

    Only the fields relevant to the account's role are populated:
    student_id/year for students, lecturer_id/academic_title/specialization
    for lecturers, title for admins.
    """

    first_name: str
    last_name: str
    avatar: str | None = None
    department: str | None = None
    student_id: str | None = None
    year: str | None = None
    lecturer_id: str | None = None
    academic_title: str | None = None
    specialization: str | None = None
    title: str | None = None

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}"


@dataclass
class Account:
    """Account domain entity with credential lifecycle rules.

    Business Rules:
        - Email is unique across all accounts (enforced by the store)
        - password_history holds at most 5 prior hashes, most recent first
        - status ACTIVE implies email_verified
        - Accounts are never hard-deleted

    Attributes:
        id: Unique account identifier.
        email: Login email (case-sensitive key).
        password_hash: Bcrypt hash of the current password.
        role: Student, lecturer, or admin.
        institution_id: Owning institution.
        status: Lifecycle status.
        email_verified: Whether an email-verification credential was consumed.
        is_first_login: Forces a password change before full access.
        profile: Name, avatar and role-specific fields.
        password_history: Prior password hashes, most recent first.
        created_at: Creation timestamp (set by the store).
        updated_at: Last update timestamp (set by the store).

    Example:
        >>> account = Account(
        ...     id=uuid7(),
        ...     email="ada@mit.edu",
        ...     password_hash="$2b$12$...",
        ...     role=AccountRole.STUDENT,
        ...     institution_id=institution.id,
        ...     status=AccountStatus.PENDING,
        ...     email_verified=False,
        ...     is_first_login=True,
        ...     profile=AccountProfile(first_name="Ada", last_name="Lovelace"),
        ... )
        >>> account.verify_email()
        >>> account.status
        <AccountStatus.ACTIVE: 'active'>
    """

    id: UUID
    email: str
    password_hash: str
    role: AccountRole
    institution_id: UUID
    status: AccountStatus
    email_verified: bool
    is_first_login: bool
    profile: AccountProfile
    password_history: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        """True if the account may log in (status ACTIVE)."""
        return self.status == AccountStatus.ACTIVE

    @property
    def secondary_id(self) -> str | None:
        """Role-specific identifier usable at login (student or lecturer ID)."""
        if self.role == AccountRole.STUDENT:
            return self.profile.student_id
        if self.role == AccountRole.LECTURER:
            return self.profile.lecturer_id
        return None

    def verify_email(self) -> None:
        """Mark email as verified and activate a pending account.

        Side Effects:
            - Sets email_verified to True
            - Moves PENDING to ACTIVE; a SUSPENDED account stays suspended
        """
        self.email_verified = True
        if self.status == AccountStatus.PENDING:
            self.status = AccountStatus.ACTIVE

    def suspend(self) -> None:
        """Apply the manual suspension override."""
        self.status = AccountStatus.SUSPENDED

    def can_activate(self) -> bool:
        """An account may be (re)activated only after its email is verified."""
        return self.email_verified
