"""Factories for errors raised by failed lookups and uniqueness checks."""

from src.core.enums import ErrorCode
from src.core.errors import DuplicateError, NotFoundError


def account_not_found(account_ref: object) -> NotFoundError:
    """Account lookup by ID or email found nothing."""
    return NotFoundError(
        code=ErrorCode.ACCOUNT_NOT_FOUND,
        message="Account not found",
        resource_type="Account",
        resource_id=str(account_ref),
    )


def institution_not_found(institution_ref: object) -> NotFoundError:
    """Institution lookup by ID or code found nothing (or it is not active)."""
    return NotFoundError(
        code=ErrorCode.INSTITUTION_NOT_FOUND,
        message="Institution not found or inactive",
        resource_type="Institution",
        resource_id=str(institution_ref),
    )


def email_already_registered() -> DuplicateError:
    """Another account already uses the email."""
    return DuplicateError(
        code=ErrorCode.EMAIL_ALREADY_EXISTS,
        message="Email already registered",
        resource_type="Account",
        conflicting_field="email",
    )


def institution_code_taken() -> DuplicateError:
    """Another institution already uses the code."""
    return DuplicateError(
        code=ErrorCode.INSTITUTION_CODE_ALREADY_EXISTS,
        message="Institution code already exists",
        resource_type="Institution",
        conflicting_field="code",
    )
