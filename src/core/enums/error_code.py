"""Machine-readable error codes.

Codes follow the ENTITY_ACTION_REASON naming convention and travel inside
DomainError instances returned through Result types. The presentation layer
exposes them as the slug of the Problem Details ``type`` URL.

Categories:
- Validation errors (INVALID_*, VALIDATION_*, PASSWORDS_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_CONFLICT)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*, EMAIL_NOT_VERIFIED)
- One-time credential errors (CREDENTIAL_*)
- Policy violations (PASSWORD_*, *_LIMIT_REACHED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_LONG = "password_too_long"
    PASSWORDS_DO_NOT_MATCH = "passwords_do_not_match"
    CURRENT_PASSWORD_INCORRECT = "current_password_incorrect"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    ACCOUNT_NOT_FOUND = "account_not_found"
    INSTITUTION_NOT_FOUND = "institution_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    INSTITUTION_CODE_ALREADY_EXISTS = "institution_code_already_exists"
    CONCURRENT_UPDATE_CONFLICT = "concurrent_update_conflict"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"
    EMAIL_NOT_VERIFIED = "email_not_verified"
    ACCOUNT_NOT_ACTIVE = "account_not_active"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"

    # One-time credential errors
    CREDENTIAL_EXPIRED_OR_CONSUMED = "credential_expired_or_consumed"

    # Policy violations
    PASSWORD_SAME_AS_CURRENT = "password_same_as_current"
    PASSWORD_RECENTLY_REUSED = "password_recently_reused"
    ADMIN_LIMIT_REACHED = "admin_limit_reached"
    ACCOUNT_STATUS_TRANSITION_INVALID = "account_status_transition_invalid"

    # Notification errors
    NOTIFICATION_DELIVERY_FAILED = "notification_delivery_failed"
