"""Credential lifecycle domain errors.

Errors for login, session tokens, one-time credentials and password policy.
They are returned inside ``Failure``, never raised.

Anti-enumeration:
    Login must not reveal whether an account exists. Both "no such account"
    and "wrong password" return the same ``INVALID_CREDENTIALS`` instance,
    so callers cannot tell the two apart even by identity or field values.
    Session token failures collapse the same way into ``INVALID_TOKEN``.

Usage:
    from src.domain.errors import INVALID_CREDENTIALS
    from src.core.result import Failure

    if account is None:
        return Failure(error=INVALID_CREDENTIALS)
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidCredentialsError(AuthenticationError):
    """Login failed: unknown identifier or wrong password (indistinguishable)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidTokenError(AuthenticationError):
    """Session token failed verification (signature, expiry, or shape)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailNotVerifiedError(AuthenticationError):
    """Password was correct but the email has not been verified yet.

    ``details["email"]`` carries the account email so the caller can offer
    to resend a verification code.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AccountNotActiveError(AuthenticationError):
    """Password was correct and email verified, but status is not active."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ExpiredOrConsumedError(DomainError):
    """One-time credential is unknown, already used, superseded, or expired."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class PolicyViolationError(DomainError):
    """A business policy rejected the request (password reuse, admin cap)."""

    pass


INVALID_CREDENTIALS = InvalidCredentialsError(
    code=ErrorCode.INVALID_CREDENTIALS,
    message="Invalid credentials",
)

INVALID_TOKEN = InvalidTokenError(
    code=ErrorCode.TOKEN_INVALID,
    message="Invalid or expired token",
)

EXPIRED_OR_CONSUMED = ExpiredOrConsumedError(
    code=ErrorCode.CREDENTIAL_EXPIRED_OR_CONSUMED,
    message="Invalid or expired code",
)

PASSWORD_SAME_AS_CURRENT = PolicyViolationError(
    code=ErrorCode.PASSWORD_SAME_AS_CURRENT,
    message="New password cannot be the same as your current password",
)

PASSWORD_RECENTLY_REUSED = PolicyViolationError(
    code=ErrorCode.PASSWORD_RECENTLY_REUSED,
    message="You cannot reuse a recent password",
)
