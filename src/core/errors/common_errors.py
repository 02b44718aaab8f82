"""Generic error classes shared by every layer.

Error Types:
- ValidationError: malformed input, carries the offending field
- NotFoundError: referenced account or institution is absent
- ConflictError: write lost a race against a concurrent update
- DuplicateError: unique constraint would be violated
- AuthenticationError: base for credential and token failures
- AuthorizationError: caller lacks the required role

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.PASSWORDS_DO_NOT_MATCH,
        message="Passwords don't match",
        field="confirm_password",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Kind of resource (Account, Institution).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """State conflict, e.g. a compare-and-swap write that found newer data.

    Attributes:
        resource_type: Kind of resource in conflict.
        conflicting_field: Field whose value changed underneath the caller.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DuplicateError(ConflictError):
    """Unique-constraint violation (email already registered, code taken)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (bad credentials, bad token)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        required_permission: Role or permission that was required.
    """

    required_permission: str | None = None
