"""Generated account identifiers and defaults.

Formats:
    default password: lowercase(first_name) + "123"
    avatar:           first letters of first and last name, uppercased
    student ID:       {CODE}-{last 6 digits of epoch ms}{3 random digits}
    lecturer ID:      {CODE}-LEC-{last 6 digits of epoch ms}{3 random digits}
"""

import secrets
from datetime import datetime

from src.core.constants import (
    DEFAULT_PASSWORD_SUFFIX,
    ID_RANDOM_DIGITS,
    ID_TIMESTAMP_DIGITS,
    LECTURER_ID_MARKER,
)


def default_password(first_name: str) -> str:
    """Initial password for a provisioned account."""
    return f"{first_name.strip().lower()}{DEFAULT_PASSWORD_SUFFIX}"


def avatar_initials(first_name: str, last_name: str) -> str:
    """Two-letter avatar, e.g. ("Ada", "Lovelace") -> "AL"."""
    first = first_name.strip()[:1]
    last = last_name.strip()[:1]
    return f"{first}{last}".upper()


def _serial(now: datetime) -> str:
    millis = int(now.timestamp() * 1000)
    timestamp = str(millis)[-ID_TIMESTAMP_DIGITS:].zfill(ID_TIMESTAMP_DIGITS)
    random_part = f"{secrets.randbelow(10**ID_RANDOM_DIGITS):0{ID_RANDOM_DIGITS}d}"
    return f"{timestamp}{random_part}"


def generate_student_id(institution_code: str, now: datetime) -> str:
    """Student ID for an institution, e.g. "MIT-512345042"."""
    return f"{institution_code.upper()}-{_serial(now)}"


def generate_lecturer_id(institution_code: str, now: datetime) -> str:
    """Lecturer ID for an institution, e.g. "MIT-LEC-512345042"."""
    return f"{institution_code.upper()}-{LECTURER_ID_MARKER}-{_serial(now)}"
