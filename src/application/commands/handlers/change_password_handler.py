"""Change Password handler.

Flow:
1. Load account
2. Verify current password
3. Validate new password and confirmation
4. Reuse check, hash, rotate history, compare-and-swap write
   (also clears is_first_login)
5. Return Success(None)
"""

from src.application.commands.auth_commands import ChangePassword
from src.application.services.password_policy_service import (
    PasswordPolicyService,
    check_new_password,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import account_not_found
from src.domain.protocols import AccountRepository, LoggerProtocol


class ChangePasswordHandler:
    """Handler for authenticated password change."""

    def __init__(
        self,
        account_repo: AccountRepository,
        password_policy: PasswordPolicyService,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._password_policy = password_policy
        self._logger = logger

    async def handle(self, cmd: ChangePassword) -> Result[None, DomainError]:
        """Handle password change.

        Returns:
            Success(None) or Failure(NotFoundError | ValidationError |
            PolicyViolationError | ConflictError).
        """
        # Step 1: Load account
        account = await self._account_repo.find_by_id(cmd.account_id)
        if account is None:
            return Failure(error=account_not_found(cmd.account_id))

        # Step 2: Current password
        if not await self._password_policy.verify(
            cmd.current_password, account.password_hash
        ):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.CURRENT_PASSWORD_INCORRECT,
                    message="Current password is incorrect",
                    field="current_password",
                )
            )

        # Step 3: New password
        invalid = check_new_password(
            cmd.new_password, cmd.confirm_password, field="new_password"
        )
        if invalid is not None:
            return Failure(error=invalid)

        # Step 4: Policy and atomic write
        result = await self._password_policy.replace_password(
            account, cmd.new_password, self._account_repo, clear_first_login=True
        )
        match result:
            case Failure(error=error):
                return Failure(error=error)

        self._logger.info("password_changed", account_id=str(account.id))
        return Success(value=None)
