"""Provision Account handler (students and lecturers).

Flow:
1. Validate role-specific input and first-name length
2. Load acting admin and their institution
3. Check email uniqueness
4. Generate student/lecturer ID and default password
5. Create pending, unverified account
6. Issue magic-link token; the activation email carries ID, default
   password and link
7. Return Success(AccountSummary)
"""

from uuid_extensions import uuid7

from src.application.commands.account_commands import ProvisionAccount
from src.application.dtos import AccountSummary
from src.application.services.account_identifiers import (
    avatar_initials,
    default_password,
    generate_lecturer_id,
    generate_student_id,
)
from src.application.services.one_time_token_service import OneTimeTokenService
from src.application.services.password_policy_service import PasswordPolicyService
from src.core.constants import ACADEMIC_TITLES, PASSWORD_MAX_BYTES
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account, AccountProfile
from src.domain.enums import (
    AccountRole,
    AccountStatus,
    CredentialKind,
    CredentialPurpose,
    NotificationTemplate,
)
from src.domain.errors import (
    account_not_found,
    email_already_registered,
    institution_not_found,
)
from src.domain.protocols import (
    AccountRepository,
    ClockProtocol,
    InstitutionRepository,
    LoggerProtocol,
)

ACTIVATION_SUBJECT = "Welcome to {institution_name} - Activate Your Account"


class ProvisionAccountHandler:
    """Handler for admin-driven student/lecturer creation."""

    def __init__(
        self,
        account_repo: AccountRepository,
        institution_repo: InstitutionRepository,
        password_policy: PasswordPolicyService,
        token_service: OneTimeTokenService,
        clock: ClockProtocol,
        logger: LoggerProtocol,
        activation_url: str,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            account_repo: Account persistence.
            institution_repo: Institution lookup.
            password_policy: Password hashing.
            token_service: One-time credential issuing.
            clock: Time source for generated IDs.
            logger: Structured logger.
            activation_url: Absolute URL of the GET verify-email endpoint.
        """
        self._account_repo = account_repo
        self._institution_repo = institution_repo
        self._password_policy = password_policy
        self._token_service = token_service
        self._clock = clock
        self._logger = logger
        self._activation_url = activation_url

    async def handle(self, cmd: ProvisionAccount) -> Result[AccountSummary, DomainError]:
        """Handle account provisioning.

        Returns:
            Success(AccountSummary) for the new pending account.
            Failure(ValidationError | AuthorizationError | NotFoundError |
            DuplicateError) otherwise.
        """
        # Step 1: Role-specific validation
        if cmd.role not in (AccountRole.STUDENT, AccountRole.LECTURER):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Only student and lecturer accounts can be provisioned",
                    field="role",
                )
            )
        if cmd.role == AccountRole.LECTURER and cmd.academic_title not in ACADEMIC_TITLES:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=f"Academic title must be one of: {', '.join(ACADEMIC_TITLES)}",
                    field="academic_title",
                )
            )
        if len(default_password(cmd.first_name).encode("utf-8")) > PASSWORD_MAX_BYTES:
            # Default password is derived from the first name
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="First name is too long",
                    field="first_name",
                )
            )

        # Step 2: Acting admin and institution
        admin = await self._account_repo.find_by_id(cmd.admin_id)
        if admin is None:
            return Failure(error=account_not_found(cmd.admin_id))
        if admin.role != AccountRole.ADMIN:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message="Access denied. Admin privileges required.",
                    required_permission="admin",
                )
            )
        institution = await self._institution_repo.find_by_id(admin.institution_id)
        if institution is None:
            return Failure(error=institution_not_found(admin.institution_id))

        # Step 3: Email uniqueness
        email = cmd.email.strip()
        if await self._account_repo.exists_by_email(email):
            return Failure(error=email_already_registered())

        # Step 4: Identifier and default password
        first_name = cmd.first_name.strip()
        last_name = cmd.last_name.strip()
        now = self._clock.now()
        initial_password = default_password(first_name)
        profile = AccountProfile(
            first_name=first_name,
            last_name=last_name,
            avatar=avatar_initials(first_name, last_name),
            department=cmd.department,
        )
        if cmd.role == AccountRole.STUDENT:
            profile.student_id = generate_student_id(institution.code, now)
            profile.year = cmd.year
            template = NotificationTemplate.STUDENT_ACTIVATION
        else:
            profile.lecturer_id = generate_lecturer_id(institution.code, now)
            profile.academic_title = cmd.academic_title
            profile.specialization = cmd.specialization
            template = NotificationTemplate.LECTURER_ACTIVATION

        # Step 5: Create account
        account = Account(
            id=uuid7(),
            email=email,
            password_hash=await self._password_policy.hash(initial_password),
            role=cmd.role,
            institution_id=institution.id,
            status=AccountStatus.PENDING,
            email_verified=False,
            is_first_login=True,
            profile=profile,
        )
        await self._account_repo.save(account)

        # Step 6: Activation magic link
        await self._token_service.issue(
            email,
            CredentialPurpose.EMAIL_VERIFICATION,
            kind=CredentialKind.MAGIC_LINK,
            template=template,
            subject=ACTIVATION_SUBJECT.format(institution_name=institution.name),
            context={
                "institution_name": institution.name,
                "first_name": first_name,
                "last_name": last_name,
                "student_id": profile.student_id or "",
                "lecturer_id": profile.lecturer_id or "",
                "academic_title": profile.academic_title or "",
                "department": profile.department or "",
                "default_password": initial_password,
            },
            link_base_url=self._activation_url,
        )

        self._logger.info(
            "account_provisioned",
            account_id=str(account.id),
            role=account.role.value,
            institution_code=institution.code,
            admin_id=str(admin.id),
        )
        return Success(value=AccountSummary.from_account(account, institution.name))
