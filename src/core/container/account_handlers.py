"""Account administration handler dependency factories.

Request-scoped handlers used by the admin and user routers:
- Student/lecturer provisioning
- Account status overrides
- Profile and roster queries
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.auth_handlers import build_one_time_token_service
from src.core.container.infrastructure import (
    get_clock,
    get_db_session,
    get_logger,
    get_password_policy,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.provision_account_handler import (
        ProvisionAccountHandler,
    )
    from src.application.commands.handlers.set_account_status_handler import (
        SetAccountStatusHandler,
    )
    from src.application.queries.handlers.get_account_profile_handler import (
        GetAccountProfileHandler,
    )
    from src.application.queries.handlers.list_institution_accounts_handler import (
        ListInstitutionAccountsHandler,
    )


async def get_provision_account_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ProvisionAccountHandler":
    """Get ProvisionAccount command handler (request-scoped).

    The activation link points at the GET verify-email endpoint under
    settings.backend_url.
    """
    from src.application.commands.handlers.provision_account_handler import (
        ProvisionAccountHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        InstitutionRepository,
    )

    return ProvisionAccountHandler(
        account_repo=AccountRepository(session=session),
        institution_repo=InstitutionRepository(session=session),
        password_policy=get_password_policy(),
        token_service=build_one_time_token_service(session),
        clock=get_clock(),
        logger=get_logger(),
        activation_url=f"{settings.backend_url}{settings.api_v1_prefix}/auth/verify-email",
    )


async def get_set_account_status_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "SetAccountStatusHandler":
    """Get SetAccountStatus command handler (request-scoped)."""
    from src.application.commands.handlers.set_account_status_handler import (
        SetAccountStatusHandler,
    )
    from src.infrastructure.persistence.repositories import AccountRepository

    return SetAccountStatusHandler(
        account_repo=AccountRepository(session=session),
        logger=get_logger(),
    )


async def get_account_profile_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetAccountProfileHandler":
    """Get GetAccountProfile query handler (request-scoped)."""
    from src.application.queries.handlers.get_account_profile_handler import (
        GetAccountProfileHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        InstitutionRepository,
    )

    return GetAccountProfileHandler(
        account_repo=AccountRepository(session=session),
        institution_repo=InstitutionRepository(session=session),
    )


async def get_list_institution_accounts_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListInstitutionAccountsHandler":
    """Get ListInstitutionAccounts query handler (request-scoped)."""
    from src.application.queries.handlers.list_institution_accounts_handler import (
        ListInstitutionAccountsHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        InstitutionRepository,
    )

    return ListInstitutionAccountsHandler(
        account_repo=AccountRepository(session=session),
        institution_repo=InstitutionRepository(session=session),
    )
