"""One-time credential purposes and kinds.

A one-time credential is scoped to an (email, purpose) pair. The kind only
decides the code format and lifetime; both kinds are consumed the same way.

Kinds:
    OTP: 6 decimal digits, 10 minute lifetime. Typed by the user.
    MAGIC_LINK: 32 alphanumeric characters, 24 hour lifetime. Embedded in
        an activation URL.
"""

from enum import Enum


class CredentialPurpose(str, Enum):
    """What a one-time credential authorizes."""

    EMAIL_VERIFICATION = "email_verification"
    PASSWORD_RESET = "password_reset"


class CredentialKind(str, Enum):
    """Format of a one-time credential."""

    OTP = "otp"
    MAGIC_LINK = "magic_link"
