"""Domain errors package.

Usage:
    from src.domain.errors import INVALID_CREDENTIALS, PolicyViolationError
"""

from src.domain.errors.credential_errors import (
    EXPIRED_OR_CONSUMED,
    INVALID_CREDENTIALS,
    INVALID_TOKEN,
    PASSWORD_RECENTLY_REUSED,
    PASSWORD_SAME_AS_CURRENT,
    AccountNotActiveError,
    EmailNotVerifiedError,
    ExpiredOrConsumedError,
    InvalidCredentialsError,
    InvalidTokenError,
    PolicyViolationError,
)
from src.domain.errors.lookup_errors import (
    account_not_found,
    email_already_registered,
    institution_code_taken,
    institution_not_found,
)
from src.domain.errors.notification_errors import NotificationError

__all__ = [
    "AccountNotActiveError",
    "EmailNotVerifiedError",
    "ExpiredOrConsumedError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "NotificationError",
    "PolicyViolationError",
    "EXPIRED_OR_CONSUMED",
    "INVALID_CREDENTIALS",
    "INVALID_TOKEN",
    "PASSWORD_RECENTLY_REUSED",
    "PASSWORD_SAME_AS_CURRENT",
    "account_not_found",
    "email_already_registered",
    "institution_code_taken",
    "institution_not_found",
]
