"""Register Admin handler.

Flow:
1. Validate password and confirmation
2. Load institution by code (must be active)
3. Enforce the per-institution admin cap
4. Check email uniqueness
5. Hash password and create pending admin
6. Issue email-verification OTP
7. Return Success(AdminRegistration)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- Repositories and services are injected via protocols
"""

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterAdmin
from src.application.dtos import AdminRegistration
from src.application.services.account_identifiers import avatar_initials
from src.application.services.one_time_token_service import OneTimeTokenService
from src.application.services.password_policy_service import (
    PasswordPolicyService,
    check_new_password,
)
from src.core.constants import ADMIN_TITLE
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account, AccountProfile
from src.domain.enums import AccountRole, AccountStatus, CredentialPurpose
from src.domain.errors import (
    PolicyViolationError,
    email_already_registered,
    institution_not_found,
)
from src.domain.protocols import AccountRepository, InstitutionRepository, LoggerProtocol


class RegisterAdminHandler:
    """Handler for admin self-registration.

    Admins register against an existing institution code; the account stays
    pending until the emailed OTP is verified.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        institution_repo: InstitutionRepository,
        password_policy: PasswordPolicyService,
        token_service: OneTimeTokenService,
        logger: LoggerProtocol,
        max_admins_per_institution: int = 10,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            account_repo: Account persistence.
            institution_repo: Institution lookup.
            password_policy: Password hashing.
            token_service: One-time credential issuing.
            logger: Structured logger.
            max_admins_per_institution: Admin cap per institution.
        """
        self._account_repo = account_repo
        self._institution_repo = institution_repo
        self._password_policy = password_policy
        self._token_service = token_service
        self._logger = logger
        self._max_admins = max_admins_per_institution

    async def handle(self, cmd: RegisterAdmin) -> Result[AdminRegistration, DomainError]:
        """Handle admin registration.

        Returns:
            Success(AdminRegistration) on success.
            Failure(ValidationError | NotFoundError | PolicyViolationError |
            DuplicateError) otherwise.
        """
        # Step 1: Validate password
        invalid = check_new_password(cmd.password, cmd.confirm_password)
        if invalid is not None:
            return Failure(error=invalid)

        # Step 2: Institution must exist and be active
        code = cmd.institution_code.strip().upper()
        institution = await self._institution_repo.find_by_code(code)
        if institution is None or not institution.is_active:
            return Failure(error=institution_not_found(code))

        # Step 3: Admin cap
        admin_count = await self._account_repo.count_by_institution_and_role(
            institution.id, AccountRole.ADMIN
        )
        if admin_count >= self._max_admins:
            return Failure(
                error=PolicyViolationError(
                    code=ErrorCode.ADMIN_LIMIT_REACHED,
                    message=(
                        f"Maximum number of admins ({self._max_admins}) "
                        "reached for this institution"
                    ),
                )
            )

        # Step 4: Email uniqueness
        email = cmd.email.strip()
        if await self._account_repo.exists_by_email(email):
            return Failure(error=email_already_registered())

        # Step 5: Create pending admin
        first_name = cmd.first_name.strip()
        last_name = cmd.last_name.strip()
        account = Account(
            id=uuid7(),
            email=email,
            password_hash=await self._password_policy.hash(cmd.password),
            role=AccountRole.ADMIN,
            institution_id=institution.id,
            status=AccountStatus.PENDING,
            email_verified=False,
            is_first_login=True,
            profile=AccountProfile(
                first_name=first_name,
                last_name=last_name,
                avatar=avatar_initials(first_name, last_name),
                title=ADMIN_TITLE,
            ),
        )
        await self._account_repo.save(account)

        # Step 6: Verification OTP
        await self._token_service.issue(email, CredentialPurpose.EMAIL_VERIFICATION)

        self._logger.info(
            "admin_registered",
            account_id=str(account.id),
            institution_code=institution.code,
        )
        return Success(
            value=AdminRegistration(
                admin_id=account.id,
                email=account.email,
                institution_name=institution.name,
                institution_code=institution.code,
            )
        )
