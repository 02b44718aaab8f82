"""Request Password Reset handler.

Issues a password-reset OTP when an account with the email and role exists.
The outcome is identical either way so callers cannot learn which emails have accounts.
"""

from src.application.commands.auth_commands import RequestPasswordReset
from src.application.services.one_time_token_service import OneTimeTokenService
from src.core.result import Result, Success
from src.domain.enums import CredentialPurpose
from src.domain.protocols import AccountRepository, LoggerProtocol

GENERIC_RESET_MESSAGE = (
    "If an account exists with this email, you will receive a password reset code."
)


class RequestPasswordResetHandler:
    """Handler for forgot-password requests."""

    def __init__(
        self,
        account_repo: AccountRepository,
        token_service: OneTimeTokenService,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: RequestPasswordReset) -> Result[str, None]:
        """Handle forgot-password.

        Returns:
            Success(generic message), always.
        """
        email = cmd.email.strip()
        account = await self._account_repo.find_by_login_identifier(email, cmd.role)

        if account is not None and account.email == email:
            await self._token_service.issue(email, CredentialPurpose.PASSWORD_RESET)
        else:
            self._logger.debug("password_reset_unknown_account", role=cmd.role.value)

        return Success(value=GENERIC_RESET_MESSAGE)
