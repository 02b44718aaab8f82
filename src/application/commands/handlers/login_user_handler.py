"""Login handler.

Flow (check order is fixed):
1. Resolve identifier for the role (email, or student/lecturer ID)
2. Verify password
   - Unknown identifier and wrong password return the SAME error instance
3. Require verified email (distinct "verification required" signal)
4. Require ACTIVE status
5. Issue session pair
6. Return Success(LoginResult)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from src.application.commands.auth_commands import LoginUser
from src.application.dtos import AccountSummary, LoginResult
from src.application.services.password_policy_service import PasswordPolicyService
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import (
    INVALID_CREDENTIALS,
    AccountNotActiveError,
    EmailNotVerifiedError,
)
from src.domain.protocols import (
    AccountRepository,
    InstitutionRepository,
    LoggerProtocol,
    SessionTokenProtocol,
)


class LoginUserHandler:
    """Handler for login command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (Account entity, protocols)
    - Infrastructure layer (repositories, services via dependency injection)
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        institution_repo: InstitutionRepository,
        password_policy: PasswordPolicyService,
        session_service: SessionTokenProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            account_repo: Account lookup.
            institution_repo: Institution name for the response.
            password_policy: Password verification.
            session_service: Session pair issuing.
            logger: Structured logger.
        """
        self._account_repo = account_repo
        self._institution_repo = institution_repo
        self._password_policy = password_policy
        self._session_service = session_service
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[LoginResult, DomainError]:
        """Handle login.

        Returns:
            Success(LoginResult) on successful login.
            Failure(INVALID_CREDENTIALS | EmailNotVerifiedError |
            AccountNotActiveError) otherwise.
        """
        identifier = cmd.identifier.strip()

        # Step 1: Resolve identifier
        account = await self._account_repo.find_by_login_identifier(identifier, cmd.role)
        if account is None:
            self._logger.info("login_failed", role=cmd.role.value, reason="invalid_credentials")
            return Failure(error=INVALID_CREDENTIALS)

        # Step 2: Verify password
        if not await self._password_policy.verify(cmd.password, account.password_hash):
            self._logger.info("login_failed", role=cmd.role.value, reason="invalid_credentials")
            return Failure(error=INVALID_CREDENTIALS)

        # Step 3: Email verified
        if not account.email_verified:
            self._logger.info(
                "login_failed", account_id=str(account.id), reason="email_not_verified"
            )
            return Failure(
                error=EmailNotVerifiedError(
                    code=ErrorCode.EMAIL_NOT_VERIFIED,
                    message="Please verify your email first",
                    details={"email": account.email},
                )
            )

        # Step 4: Active status
        if not account.is_active:
            self._logger.info(
                "login_failed", account_id=str(account.id), reason="account_not_active"
            )
            return Failure(
                error=AccountNotActiveError(
                    code=ErrorCode.ACCOUNT_NOT_ACTIVE,
                    message="Account is not active. Please contact administrator.",
                    details={"status": account.status.value},
                )
            )

        # Step 5: Session pair
        tokens = self._session_service.issue_session_pair(
            account_id=account.id,
            role=account.role,
            institution_id=account.institution_id,
            email=account.email,
        )

        institution = await self._institution_repo.find_by_id(account.institution_id)
        self._logger.info(
            "login_succeeded", account_id=str(account.id), role=account.role.value
        )
        return Success(
            value=LoginResult(
                tokens=tokens,
                account=AccountSummary.from_account(
                    account, institution.name if institution else ""
                ),
            )
        )
