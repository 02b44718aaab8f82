"""Account and session DTOs (Data Transfer Objects).

Result dataclasses returned by handlers to the presentation layer. They
never carry password hashes or one-time codes.

DTOs:
    - AccountSummary: Account view with institution name
    - LoginResult: Session pair plus account summary
    - AdminRegistration: Outcome of admin self-registration
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.account import Account
from src.domain.enums import AccountRole, AccountStatus
from src.domain.protocols.session_token_protocol import SessionTokens


@dataclass(frozen=True, kw_only=True)
class AccountSummary:
    """Hash-free view of an account.

    Attributes:
        id: Account identifier.
        email: Login email.
        role: Account role.
        status: Lifecycle status.
        email_verified: Verification flag.
        is_first_login: Forced password change pending.
        first_name, last_name, avatar, department: Profile.
        student_id, year: Student fields.
        lecturer_id, academic_title, specialization: Lecturer fields.
        title: Admin title.
        institution_id: Owning institution.
        institution_name: Owning institution's name ("" if unknown).
        created_at: Creation timestamp.
    """

    id: UUID
    email: str
    role: AccountRole
    status: AccountStatus
    email_verified: bool
    is_first_login: bool
    first_name: str
    last_name: str
    avatar: str | None
    department: str | None
    student_id: str | None
    year: str | None
    lecturer_id: str | None
    academic_title: str | None
    specialization: str | None
    title: str | None
    institution_id: UUID
    institution_name: str
    created_at: datetime | None

    @property
    def name(self) -> str:
        """Full display name."""
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_account(cls, account: Account, institution_name: str = "") -> "AccountSummary":
        """Build a summary from a domain account."""
        profile = account.profile
        return cls(
            id=account.id,
            email=account.email,
            role=account.role,
            status=account.status,
            email_verified=account.email_verified,
            is_first_login=account.is_first_login,
            first_name=profile.first_name,
            last_name=profile.last_name,
            avatar=profile.avatar,
            department=profile.department,
            student_id=profile.student_id,
            year=profile.year,
            lecturer_id=profile.lecturer_id,
            academic_title=profile.academic_title,
            specialization=profile.specialization,
            title=profile.title,
            institution_id=account.institution_id,
            institution_name=institution_name,
            created_at=account.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Response from successful login or refresh.

    Attributes:
        tokens: Access/refresh pair.
        account: Summary of the logged-in account.
    """

    tokens: SessionTokens
    account: AccountSummary


@dataclass(frozen=True, kw_only=True)
class AdminRegistration:
    """Response from admin self-registration."""

    admin_id: UUID
    email: str
    institution_name: str
    institution_code: str
