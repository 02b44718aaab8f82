"""Verify Email handler.

Consumes an email-verification credential (OTP or magic-link token share
this path), then marks the account verified. A pending account becomes
active; a suspended one stays suspended.

Flow:
1. Consume credential (single use)
2. Load account by email
3. Set email_verified; PENDING becomes ACTIVE
4. Return Success(None)
"""

from src.application.commands.auth_commands import VerifyEmail
from src.application.services.one_time_token_service import OneTimeTokenService
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import CredentialPurpose
from src.domain.errors import account_not_found
from src.domain.protocols import AccountRepository, LoggerProtocol


class VerifyEmailHandler:
    """Handler for email verification."""

    def __init__(
        self,
        account_repo: AccountRepository,
        token_service: OneTimeTokenService,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: VerifyEmail) -> Result[None, DomainError]:
        """Handle email verification.

        Returns:
            Success(None) once the account is verified.
            Failure(ExpiredOrConsumedError) for a bad code,
            Failure(NotFoundError) if no account uses the email.
        """
        email = cmd.email.strip()

        # Step 1: Consume credential
        consumed = await self._token_service.consume(
            email, cmd.code.strip(), CredentialPurpose.EMAIL_VERIFICATION
        )
        match consumed:
            case Failure(error=error):
                return Failure(error=error)

        # Step 2: Load account
        account = await self._account_repo.find_by_email(email)
        if account is None:
            return Failure(error=account_not_found(email))

        # Step 3: Verify (suspension is left in place)
        account.verify_email()
        await self._account_repo.update(account)

        self._logger.info("email_verified", account_id=str(account.id))
        return Success(value=None)
