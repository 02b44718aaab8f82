"""ListInstitutionAccounts query handler."""

from src.application.dtos import AccountSummary
from src.application.queries.account_queries import ListInstitutionAccounts
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import AccountRole
from src.domain.protocols import AccountRepository, InstitutionRepository


class ListInstitutionAccountsHandler:
    """List students or lecturers of the admin's institution (no hashes)."""

    def __init__(
        self,
        account_repo: AccountRepository,
        institution_repo: InstitutionRepository,
    ) -> None:
        self._account_repo = account_repo
        self._institution_repo = institution_repo

    async def handle(
        self, query: ListInstitutionAccounts
    ) -> Result[list[AccountSummary], DomainError]:
        """Handle roster query.

        Returns:
            Success(list[AccountSummary]) or Failure(AuthorizationError) when
            the requester is not an admin.
        """
        admin = await self._account_repo.find_by_id(query.admin_id)
        if admin is None or admin.role != AccountRole.ADMIN:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message="Access denied. Admin privileges required.",
                    required_permission="admin",
                )
            )

        institution = await self._institution_repo.find_by_id(admin.institution_id)
        institution_name = institution.name if institution else ""
        accounts = await self._account_repo.list_by_institution_and_role(
            admin.institution_id, query.role
        )
        return Success(
            value=[AccountSummary.from_account(a, institution_name) for a in accounts]
        )
