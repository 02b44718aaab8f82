"""Cryptographically secure one-time code generator (adapter).

Implements OneTimeCodeGeneratorProtocol with the ``secrets`` module.

Formats:
    - OTP: 6 decimal digits, leading zeros kept ("004213")
    - Magic link: 32 characters drawn uniformly from [A-Za-z0-9]
"""

import secrets

from src.core.constants import (
    MAGIC_LINK_ALPHABET,
    MAGIC_LINK_TOKEN_LENGTH,
    OTP_LENGTH,
)
from src.domain.enums import CredentialKind


class SecureCodeGenerator:
    """Secure OTP and magic-link token generator."""

    def generate(self, kind: CredentialKind) -> str:
        """Generate a code in the format for ``kind``.

        Args:
            kind: OTP or MAGIC_LINK.

        Returns:
            The generated code.
        """
        match kind:
            case CredentialKind.OTP:
                return f"{secrets.randbelow(10**OTP_LENGTH):0{OTP_LENGTH}d}"
            case CredentialKind.MAGIC_LINK:
                return "".join(
                    secrets.choice(MAGIC_LINK_ALPHABET)
                    for _ in range(MAGIC_LINK_TOKEN_LENGTH)
                )
