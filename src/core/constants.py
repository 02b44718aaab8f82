"""Centralized constants for fixed formats and internal limits.

These values are part of the external contract (code formats, default
password shape) or fixed implementation details. Anything that may differ
per deployment belongs in `src/core/config.py` instead.

Example:
    >>> from src.core.constants import OTP_LENGTH, MAGIC_LINK_ALPHABET
    >>> code = "".join(secrets.choice("0123456789") for _ in range(OTP_LENGTH))
"""

import string

# =============================================================================
# One-Time Credential Formats
# =============================================================================

OTP_LENGTH: int = 6
"""Number of decimal digits in an OTP code."""

MAGIC_LINK_TOKEN_LENGTH: int = 32
"""Length of a magic-link verification token."""

MAGIC_LINK_ALPHABET: str = string.ascii_letters + string.digits
"""Characters a magic-link token is drawn from ([A-Za-z0-9])."""


# =============================================================================
# Password Policy
# =============================================================================

PASSWORD_MIN_LENGTH: int = 8
"""Minimum length for any password chosen by a user."""

PASSWORD_MAX_BYTES: int = 72
"""bcrypt input limit; longer UTF-8 encodings are rejected, not truncated."""

DEFAULT_PASSWORD_SUFFIX: str = "123"
"""Suffix appended to the lowercased first name for provisioned accounts."""

BCRYPT_ROUNDS_DEFAULT: int = 12
"""Default bcrypt work factor (cost parameter)."""


# =============================================================================
# Session Tokens
# =============================================================================

JWT_ALGORITHM: str = "HS256"
"""Signing algorithm for access and refresh tokens."""

JWT_SECRET_MIN_LENGTH: int = 32
"""Minimum secret length for HS256 signing keys."""

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""


# =============================================================================
# Account Provisioning
# =============================================================================

LECTURER_ID_MARKER: str = "LEC"
"""Segment inserted between institution code and serial in lecturer IDs."""

ID_TIMESTAMP_DIGITS: int = 6
"""Trailing digits of the epoch-millisecond timestamp used in generated IDs."""

ID_RANDOM_DIGITS: int = 3
"""Zero-padded random digits appended to generated IDs."""

ADMIN_TITLE: str = "Institution Administrator"
"""Profile title given to self-registered admins."""

ACADEMIC_TITLES: tuple[str, ...] = ("Prof", "Dr", "Mr", "Mrs", "Ms")
"""Academic titles a lecturer may carry."""

# =============================================================================
# HTTP Headers
# =============================================================================

SUPER_ADMIN_KEY_HEADER: str = "X-Super-Admin-Key"
"""Header carrying the super-admin API key for institution management."""
