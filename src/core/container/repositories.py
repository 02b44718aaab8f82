"""Repository dependency factories.

Request-scoped repository instances for domain entity persistence.
Each request gets fresh repository instances with shared session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        InstitutionRepository,
        OneTimeCredentialRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_account_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "AccountRepository":
    """Get account repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        AccountRepository instance.

    Usage:
        @router.get("/profile")
        async def profile(
            account_repo: AccountRepository = Depends(get_account_repository)
        ):
            account = await account_repo.find_by_id(account_id)
    """
    from src.infrastructure.persistence.repositories import AccountRepository

    return AccountRepository(session=session)


async def get_institution_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "InstitutionRepository":
    """Get institution repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import InstitutionRepository

    return InstitutionRepository(session=session)


async def get_one_time_credential_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "OneTimeCredentialRepository":
    """Get one-time credential repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import (
        OneTimeCredentialRepository,
    )

    return OneTimeCredentialRepository(session=session)
