"""OneTimeCredentialRepository protocol.

Both writes that guard single use are atomic conditional updates executed
by the store, never read-then-write sequences in Python:

- ``invalidate_unused`` marks every unused credential for (email, purpose)
  as used in one statement.
- ``consume`` flips ``used`` on exactly the matching, unexpired, unused row
  in one statement; of two racing callers only one sees a changed row.
"""

from datetime import datetime
from typing import Protocol

from src.domain.entities.one_time_credential import OneTimeCredential
from src.domain.enums import CredentialPurpose


class OneTimeCredentialRepository(Protocol):
    """One-time credential repository protocol (port)."""

    async def invalidate_unused(self, email: str, purpose: CredentialPurpose) -> int:
        """Mark all unused credentials for (email, purpose) as used.

        Returns:
            Number of credentials invalidated.
        """
        ...

    async def save(self, credential: OneTimeCredential) -> None:
        """Persist a newly issued credential."""
        ...

    async def consume(
        self,
        email: str,
        code: str,
        purpose: CredentialPurpose,
        now: datetime,
    ) -> bool:
        """Atomically mark a matching, unused, unexpired credential as used.

        Args:
            email: Subject email.
            code: Presented code.
            purpose: Expected purpose.
            now: Current time; the credential must expire strictly after it.

        Returns:
            True if exactly one credential was consumed.
        """
        ...

    async def delete_expired(self, now: datetime) -> int:
        """Delete credentials that expired at or before ``now``.

        Returns:
            Number of rows deleted.
        """
        ...
