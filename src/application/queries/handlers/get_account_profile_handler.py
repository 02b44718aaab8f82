"""GetAccountProfile query handler."""

from src.application.dtos import AccountSummary
from src.application.queries.account_queries import GetAccountProfile
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import account_not_found
from src.domain.protocols import AccountRepository, InstitutionRepository


class GetAccountProfileHandler:
    """Return an account with its institution name."""

    def __init__(
        self,
        account_repo: AccountRepository,
        institution_repo: InstitutionRepository,
    ) -> None:
        self._account_repo = account_repo
        self._institution_repo = institution_repo

    async def handle(self, query: GetAccountProfile) -> Result[AccountSummary, DomainError]:
        """Handle profile query.

        Returns:
            Success(AccountSummary) or Failure(NotFoundError).
        """
        account = await self._account_repo.find_by_id(query.account_id)
        if account is None:
            return Failure(error=account_not_found(query.account_id))

        institution = await self._institution_repo.find_by_id(account.institution_id)
        return Success(
            value=AccountSummary.from_account(
                account, institution.name if institution else ""
            )
        )
