"""One-time credential entity.

Ephemeral verification artifact (OTP or magic-link token) scoped to an
(email, purpose) pair.

Business Rules:
    - At most one unused, unexpired credential per (email, purpose) is valid
    - Consumable exactly once
    - Never valid after expires_at, regardless of the used flag
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import CredentialPurpose


@dataclass
class OneTimeCredential:
    """One-time credential entity.

    Attributes:
        id: Unique identifier.
        email: Subject email address.
        code: OTP digits or magic-link token.
        purpose: What the credential authorizes.
        expires_at: Expiry (timezone-aware UTC).
        used: True once consumed or superseded.
        created_at: Creation timestamp.
    """

    id: UUID
    email: str
    code: str
    purpose: CredentialPurpose
    expires_at: datetime
    used: bool
    created_at: datetime

    def is_valid_at(self, now: datetime) -> bool:
        """Check whether the credential could still be consumed at ``now``.

        Args:
            now: Current time (timezone-aware UTC).

        Returns:
            bool: True if unused and strictly before expiry.
        """
        return not self.used and self.expires_at > now
