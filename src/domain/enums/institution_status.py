"""Institution status."""

from enum import Enum


class InstitutionStatus(str, Enum):
    """Institution status.

    INACTIVE doubles as the soft-deleted state; institutions are never
    removed from storage.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
