"""Reset Password handler.

Flow:
1. Validate new password and confirmation
2. Consume password-reset OTP (single use)
3. Load account
4. Reuse check, hash, rotate history, compare-and-swap write
5. Return Success(None)

The first-login flag is left as it is.
"""

from src.application.commands.auth_commands import ResetPassword
from src.application.services.one_time_token_service import OneTimeTokenService
from src.application.services.password_policy_service import (
    PasswordPolicyService,
    check_new_password,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.enums import CredentialPurpose
from src.domain.errors import account_not_found
from src.domain.protocols import AccountRepository, LoggerProtocol


class ResetPasswordHandler:
    """Handler for OTP-based password reset."""

    def __init__(
        self,
        account_repo: AccountRepository,
        token_service: OneTimeTokenService,
        password_policy: PasswordPolicyService,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._token_service = token_service
        self._password_policy = password_policy
        self._logger = logger

    async def handle(self, cmd: ResetPassword) -> Result[None, DomainError]:
        """Handle password reset.

        Returns:
            Success(None) or Failure(ValidationError | ExpiredOrConsumedError |
            NotFoundError | PolicyViolationError | ConflictError).
        """
        # Step 1: Validate input
        invalid = check_new_password(
            cmd.new_password, cmd.confirm_password, field="new_password"
        )
        if invalid is not None:
            return Failure(error=invalid)

        email = cmd.email.strip()

        # Step 2: Consume OTP
        match await self._token_service.consume(
            email, cmd.code.strip(), CredentialPurpose.PASSWORD_RESET
        ):
            case Failure(error=error):
                return Failure(error=error)

        # Step 3: Load account
        account = await self._account_repo.find_by_email(email)
        if account is None:
            return Failure(error=account_not_found(email))

        # Step 4: Policy and atomic write
        result = await self._password_policy.replace_password(
            account, cmd.new_password, self._account_repo, clear_first_login=False
        )
        match result:
            case Failure(error=error):
                return Failure(error=error)

        self._logger.info("password_reset", account_id=str(account.id))
        return Success(value=None)
