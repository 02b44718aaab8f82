"""OneTimeCredentialRepository - SQLAlchemy implementation for OTP and magic-link persistence.

Consumption and invalidation are single conditional UPDATE statements, so
two concurrent attempts to use the same code cannot both succeed.
"""

from datetime import datetime

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.one_time_credential import OneTimeCredential
from src.domain.enums import CredentialPurpose
from src.infrastructure.persistence.models.one_time_credential import (
    OneTimeCredentialModel,
)


class OneTimeCredentialRepository:
    """SQLAlchemy implementation of OneTimeCredentialRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = OneTimeCredentialRepository(session)
        ...     ok = await repo.consume(
        ...         "ada@mit.edu", "042137", CredentialPurpose.EMAIL_VERIFICATION, now
        ...     )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def invalidate_unused(self, email: str, purpose: CredentialPurpose) -> int:
        """Mark every unused credential for (email, purpose) as used.

        Returns:
            Number of credentials invalidated.
        """
        stmt = (
            update(OneTimeCredentialModel)
            .where(OneTimeCredentialModel.email == email)
            .where(OneTimeCredentialModel.purpose == purpose.value)
            .where(OneTimeCredentialModel.used.is_(False))
            .values(used=True)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        # Bulk UPDATE bypasses the identity map
        self.session.expire_all()
        return int(result.rowcount or 0)

    async def save(self, credential: OneTimeCredential) -> None:
        """Persist a freshly issued credential."""
        model = OneTimeCredentialModel(
            id=credential.id,
            email=credential.email,
            code=credential.code,
            purpose=credential.purpose.value,
            expires_at=credential.expires_at,
            used=credential.used,
            created_at=credential.created_at,
        )
        self.session.add(model)
        await self.session.commit()

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
            code: Presented OTP or token.
            purpose: Purpose the credential must carry.
            now: Current time (UTC).

        Returns:
            True if exactly one credential was consumed.
        """
        stmt = (
            update(OneTimeCredentialModel)
            .where(OneTimeCredentialModel.email == email)
            .where(OneTimeCredentialModel.code == code)
            .where(OneTimeCredentialModel.purpose == purpose.value)
            .where(OneTimeCredentialModel.used.is_(False))
            .where(OneTimeCredentialModel.expires_at > now)
            .values(used=True)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        # Bulk UPDATE bypasses the identity map
        self.session.expire_all()
        return result.rowcount == 1

    async def delete_expired(self, now: datetime) -> int:
        """Delete credentials whose expiry has passed.

        Returns:
            Number of credentials deleted.
        """
        stmt = delete(OneTimeCredentialModel).where(
            OneTimeCredentialModel.expires_at <= now
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return int(result.rowcount or 0)
