"""Institution handler dependency factories (super-admin and public listing)."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session, get_logger

if TYPE_CHECKING:
    from src.application.commands.handlers.create_institution_handler import (
        CreateInstitutionHandler,
    )
    from src.application.commands.handlers.update_institution_status_handler import (
        UpdateInstitutionStatusHandler,
    )
    from src.application.queries.handlers.list_institutions_handler import (
        ListInstitutionsHandler,
    )


async def get_create_institution_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateInstitutionHandler":
    """Get CreateInstitution command handler (request-scoped)."""
    from src.application.commands.handlers.create_institution_handler import (
        CreateInstitutionHandler,
    )
    from src.infrastructure.persistence.repositories import InstitutionRepository

    return CreateInstitutionHandler(
        institution_repo=InstitutionRepository(session=session),
        logger=get_logger(),
    )


async def get_update_institution_status_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateInstitutionStatusHandler":
    """Get UpdateInstitutionStatus handler (request-scoped).

    Also handles DeactivateInstitution (soft delete).
    """
    from src.application.commands.handlers.update_institution_status_handler import (
        UpdateInstitutionStatusHandler,
    )
    from src.infrastructure.persistence.repositories import InstitutionRepository

    return UpdateInstitutionStatusHandler(
        institution_repo=InstitutionRepository(session=session),
        logger=get_logger(),
    )


async def get_list_institutions_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListInstitutionsHandler":
    """Get ListInstitutions query handler (request-scoped)."""
    from src.application.queries.handlers.list_institutions_handler import (
        ListInstitutionsHandler,
    )
    from src.infrastructure.persistence.repositories import InstitutionRepository

    return ListInstitutionsHandler(
        institution_repo=InstitutionRepository(session=session),
    )
