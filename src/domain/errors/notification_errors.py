"""Notification delivery errors.

Returned by notification adapters inside ``Failure``. Callers log them as
``notification_failed`` and continue.
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotificationError(DomainError):
    """Outbound message could not be handed to the transport."""

    pass
