"""Account lifecycle status."""

from enum import Enum


class AccountStatus(str, Enum):
    """Account lifecycle status.

    PENDING accounts have not consumed an email-verification credential yet.
    ACTIVE accounts are verified and may log in. SUSPENDED is a manual
    override applied by an admin and blocks login regardless of verification.
    """

    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"
