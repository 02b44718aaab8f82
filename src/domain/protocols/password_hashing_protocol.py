"""Password hashing protocol for domain layer.

Hashing is deliberately slow (bcrypt cost 12 is ~300ms). Both operations
are coroutines so implementations can run the work in a thread pool
instead of blocking the event loop.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = await password_service.hash_password("ada123")
        ok = await password_service.verify_password("ada123", password_hash)
    """

    async def hash_password(self, password: str) -> str:
        """Hash a plaintext password with a random salt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...).
        """
        ...

    async def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored hash.

        Returns:
            True if password matches hash. False on mismatch or a malformed hash.
        """
        ...
