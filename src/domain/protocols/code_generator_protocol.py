"""One-time code generator protocol."""

from typing import Protocol

from src.domain.enums import CredentialKind


class OneTimeCodeGeneratorProtocol(Protocol):
    """Generates one-time credential values.

    Implementations:
        - SecureCodeGenerator: ``secrets``-backed (production)
    """

    def generate(self, kind: CredentialKind) -> str:
        """Generate a code in the format for ``kind``.

        Returns:
            6 decimal digits for OTP, 32 chars of [A-Za-z0-9] for MAGIC_LINK.
        """
        ...
