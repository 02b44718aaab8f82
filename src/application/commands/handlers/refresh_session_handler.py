"""Refresh Session handler.

Verifies a refresh token, re-reads the account, and issues a new pair from
the account's current role, institution and email.
"""

from src.application.commands.auth_commands import RefreshSession
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import account_not_found
from src.domain.protocols import AccountRepository, SessionTokenProtocol, SessionTokens


class RefreshSessionHandler:
    """Handler for session refresh."""

    def __init__(
        self,
        account_repo: AccountRepository,
        session_service: SessionTokenProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._session_service = session_service

    async def handle(self, cmd: RefreshSession) -> Result[SessionTokens, DomainError]:
        """Handle refresh.

        Returns:
            Success(SessionTokens), Failure(INVALID_TOKEN) for a bad refresh
            token, or Failure(NotFoundError) if the account no longer exists.
        """
        match self._session_service.verify_refresh(cmd.refresh_token):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=claims):
                account_id = claims.account_id

        account = await self._account_repo.find_by_id(account_id)
        if account is None:
            return Failure(error=account_not_found(account_id))

        return Success(
            value=self._session_service.issue_session_pair(
                account_id=account.id,
                role=account.role,
                institution_id=account.institution_id,
                email=account.email,
            )
        )
