"""Clock protocol.

Expiry checks (one-time credentials, session tokens) read time through this
port so tests can pin the current instant.
"""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Source of the current time.

    Implementations:
        - SystemClock: wall clock (production)
        - FixedClock: settable instant (tests)
    """

    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...
