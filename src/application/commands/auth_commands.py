"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
- Request schemas validate shape; handlers enforce the business rules
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import AccountRole


@dataclass(frozen=True, kw_only=True)
class RegisterAdmin:
    """Self-register an institution admin.

    Attributes:
        first_name: Admin's first name.
        last_name: Admin's last name.
        email: Login email (case-sensitive).
        password: Chosen password.
        confirm_password: Must equal password.
        institution_code: Code of an active institution (any case).

    Example:
        >>> command = RegisterAdmin(
        ...     first_name="Grace",
        ...     last_name="Hopper",
        ...     email="grace@mit.edu",
        ...     password="Cobol1959",
        ...     confirm_password="Cobol1959",
        ...     institution_code="mit",
        ... )
        >>> result = await handler.handle(command)
    """

    first_name: str
    last_name: str
    email: str
    password: str
    confirm_password: str
    institution_code: str


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Log in as ``role`` with an email or role-specific ID.

    Attributes:
        identifier: Email, student ID (students) or lecturer ID (lecturers).
        password: Plaintext password.
        role: Role the caller logs in as.
    """

    identifier: str
    password: str
    role: AccountRole


@dataclass(frozen=True, kw_only=True)
class RefreshSession:
    """Exchange a refresh token for a new session pair."""

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Consume an email-verification OTP or magic-link token.

    Attributes:
        email: Subject email.
        code: 6-digit OTP or 32-character token.
    """

    email: str
    code: str


@dataclass(frozen=True, kw_only=True)
class ResendVerification:
    """Issue a fresh email-verification OTP for an existing account."""

    email: str


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Request a password-reset OTP.

    Always succeeds with the same generic outcome, whether or not the
    account exists.
    """

    email: str
    role: AccountRole


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Reset a password with a password-reset OTP.

    Attributes:
        email: Account email.
        code: Password-reset OTP.
        new_password: New password.
        confirm_password: Must equal new_password.
    """

    email: str
    code: str
    new_password: str
    confirm_password: str


@dataclass(frozen=True, kw_only=True)
class ChangePassword:
    """Change the password of the authenticated account.

    Clears the first-login flag on success.
    """

    account_id: UUID
    current_password: str
    new_password: str
    confirm_password: str


@dataclass(frozen=True, kw_only=True)
class Logout:
    """Client-side logout. Tokens stay valid until they expire."""

    account_id: UUID
