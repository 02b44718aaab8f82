"""System clock adapter."""

from datetime import UTC, datetime


class SystemClock:
    """Wall-clock implementation of ClockProtocol."""

    def now(self) -> datetime:
        """Return the current time as an aware UTC datetime."""
        return datetime.now(UTC)
