"""Resend Verification handler.

Issues a fresh email-verification OTP. Any earlier unused code for the
same email is superseded.
"""

from src.application.commands.auth_commands import ResendVerification
from src.application.services.one_time_token_service import OneTimeTokenService
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import CredentialPurpose
from src.domain.errors import account_not_found
from src.domain.protocols import AccountRepository


class ResendVerificationHandler:
    """Handler for resending the verification OTP."""

    def __init__(
        self,
        account_repo: AccountRepository,
        token_service: OneTimeTokenService,
    ) -> None:
        self._account_repo = account_repo
        self._token_service = token_service

    async def handle(self, cmd: ResendVerification) -> Result[None, DomainError]:
        """Issue a new OTP for an existing account.

        Returns:
            Success(None), or Failure(NotFoundError) if no account uses the email.
        """
        email = cmd.email.strip()
        if not await self._account_repo.exists_by_email(email):
            return Failure(error=account_not_found(email))

        await self._token_service.issue(email, CredentialPurpose.EMAIL_VERIFICATION)
        return Success(value=None)
