"""Set Account Status handler.

Admins suspend or re-activate accounts of their own institution. An
account can only be made ACTIVE once its email is verified.
"""

from src.application.commands.account_commands import SetAccountStatus
from src.application.dtos import AccountSummary
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums import AccountRole, AccountStatus
from src.domain.errors import PolicyViolationError, account_not_found
from src.domain.protocols import AccountRepository, LoggerProtocol


class SetAccountStatusHandler:
    """Handler for admin status overrides."""

    def __init__(self, account_repo: AccountRepository, logger: LoggerProtocol) -> None:
        self._account_repo = account_repo
        self._logger = logger

    async def handle(self, cmd: SetAccountStatus) -> Result[AccountSummary, DomainError]:
        """Handle status change.

        Returns:
            Success(AccountSummary) with the new status, or Failure with
            ValidationError (status not settable), AuthorizationError,
            NotFoundError (unknown or other institution) or
            PolicyViolationError (activating an unverified account, or an
            admin changing their own status).
        """
        if cmd.status not in (AccountStatus.ACTIVE, AccountStatus.SUSPENDED):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Status must be 'active' or 'suspended'",
                    field="status",
                )
            )

        admin = await self._account_repo.find_by_id(cmd.admin_id)
        if admin is None or admin.role != AccountRole.ADMIN:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message="Access denied. Admin privileges required.",
                    required_permission="admin",
                )
            )

        account = await self._account_repo.find_by_id(cmd.account_id)
        if account is None or account.institution_id != admin.institution_id:
            return Failure(error=account_not_found(cmd.account_id))

        if account.id == admin.id:
            return Failure(
                error=PolicyViolationError(
                    code=ErrorCode.ACCOUNT_STATUS_TRANSITION_INVALID,
                    message="Admins cannot change their own status",
                )
            )

        if cmd.status == AccountStatus.ACTIVE:
            if not account.can_activate():
                return Failure(
                    error=PolicyViolationError(
                        code=ErrorCode.ACCOUNT_STATUS_TRANSITION_INVALID,
                        message="Account cannot be activated before its email is verified",
                    )
                )
            account.status = AccountStatus.ACTIVE
        else:
            account.suspend()

        await self._account_repo.update(account)
        self._logger.info(
            "account_status_changed",
            account_id=str(account.id),
            status=account.status.value,
            admin_id=str(admin.id),
        )
        return Success(value=AccountSummary.from_account(account))
