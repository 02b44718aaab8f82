"""Authentication handler dependency factories.

Request-scoped handler instances for authentication operations:
- Admin registration, login, logout, session refresh
- Email verification (OTP and magic link) and resend
- Password reset (request and confirm) and password change

Each factory composes request-scoped repositories (sharing the request's
database session) with application-scoped services.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.infrastructure import (
    get_clock,
    get_code_generator,
    get_db_session,
    get_email_service,
    get_logger,
    get_password_policy,
    get_session_token_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.change_password_handler import (
        ChangePasswordHandler,
    )
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.application.commands.handlers.logout_handler import LogoutHandler
    from src.application.commands.handlers.refresh_session_handler import (
        RefreshSessionHandler,
    )
    from src.application.commands.handlers.register_admin_handler import (
        RegisterAdminHandler,
    )
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.application.commands.handlers.resend_verification_handler import (
        ResendVerificationHandler,
    )
    from src.application.commands.handlers.reset_password_handler import (
        ResetPasswordHandler,
    )
    from src.application.commands.handlers.verify_email_handler import (
        VerifyEmailHandler,
    )
    from src.application.services.one_time_token_service import OneTimeTokenService


def build_one_time_token_service(session: AsyncSession) -> "OneTimeTokenService":
    """Compose the one-time token engine for a request's session.

    Not a FastAPI dependency itself; handler factories call it with the
    session they received.
    """
    from src.application.services.one_time_token_service import OneTimeTokenService
    from src.infrastructure.persistence.repositories import (
        OneTimeCredentialRepository,
    )

    return OneTimeTokenService(
        credential_repo=OneTimeCredentialRepository(session=session),
        code_generator=get_code_generator(),
        notifier=get_email_service(),
        clock=get_clock(),
        logger=get_logger(),
        otp_expire_minutes=settings.otp_expire_minutes,
        magic_link_expire_hours=settings.magic_link_expire_hours,
    )


# ============================================================================
# Authentication Handler Factories
# ============================================================================


async def get_register_admin_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RegisterAdminHandler":
    """Get RegisterAdmin command handler (request-scoped).

    Dependencies:
    - AccountRepository, InstitutionRepository (request-scoped, use session)
    - PasswordPolicyService (app-scoped singleton)
    - OneTimeTokenService (request-scoped, uses session)

    Usage:
        @router.post("/admin/register")
        async def register_admin(
            handler: RegisterAdminHandler = Depends(get_register_admin_handler)
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers.register_admin_handler import (
        RegisterAdminHandler,
    )
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        InstitutionRepository,
    )

    return RegisterAdminHandler(
        account_repo=AccountRepository(session=session),
        institution_repo=InstitutionRepository(session=session),
        password_policy=get_password_policy(),
        token_service=build_one_time_token_service(session),
        logger=get_logger(),
        max_admins_per_institution=settings.max_admins_per_institution,
    )


async def get_login_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped)."""
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.infrastructure.persistence.repositories import (
        AccountRepository,
        InstitutionRepository,
    )

    return LoginUserHandler(
        account_repo=AccountRepository(session=session),
        institution_repo=InstitutionRepository(session=session),
        password_policy=get_password_policy(),
        session_service=get_session_token_service(),
        logger=get_logger(),
    )


async def get_refresh_session_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RefreshSessionHandler":
    """Get RefreshSession command handler (request-scoped)."""
    from src.application.commands.handlers.refresh_session_handler import (
        RefreshSessionHandler,
    )
    from src.infrastructure.persistence.repositories import AccountRepository

    return RefreshSessionHandler(
        account_repo=AccountRepository(session=session),
        session_service=get_session_token_service(),
    )


async def get_verify_email_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "VerifyEmailHandler":
    """Get VerifyEmail command handler (request-scoped).

    Serves both the OTP endpoint and the magic-link GET endpoint.
    """
    from src.application.commands.handlers.verify_email_handler import (
        VerifyEmailHandler,
    )
    from src.infrastructure.persistence.repositories import AccountRepository

    return VerifyEmailHandler(
        account_repo=AccountRepository(session=session),
        token_service=build_one_time_token_service(session),
        logger=get_logger(),
    )


async def get_resend_verification_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ResendVerificationHandler":
    """Get ResendVerification command handler (request-scoped)."""
    from src.application.commands.handlers.resend_verification_handler import (
        ResendVerificationHandler,
    )
    from src.infrastructure.persistence.repositories import AccountRepository

    return ResendVerificationHandler(
        account_repo=AccountRepository(session=session),
        token_service=build_one_time_token_service(session),
    )


async def get_request_password_reset_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RequestPasswordResetHandler":
    """Get RequestPasswordReset command handler (request-scoped)."""
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.infrastructure.persistence.repositories import AccountRepository

    return RequestPasswordResetHandler(
        account_repo=AccountRepository(session=session),
        token_service=build_one_time_token_service(session),
        logger=get_logger(),
    )


async def get_reset_password_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ResetPasswordHandler":
    """Get ResetPassword command handler (request-scoped)."""
    from src.application.commands.handlers.reset_password_handler import (
        ResetPasswordHandler,
    )
    from src.infrastructure.persistence.repositories import AccountRepository

    return ResetPasswordHandler(
        account_repo=AccountRepository(session=session),
        token_service=build_one_time_token_service(session),
        password_policy=get_password_policy(),
        logger=get_logger(),
    )


async def get_change_password_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ChangePasswordHandler":
    """Get ChangePassword command handler (request-scoped)."""
    from src.application.commands.handlers.change_password_handler import (
        ChangePasswordHandler,
    )
    from src.infrastructure.persistence.repositories import AccountRepository

    return ChangePasswordHandler(
        account_repo=AccountRepository(session=session),
        password_policy=get_password_policy(),
        logger=get_logger(),
    )


async def get_logout_handler() -> "LogoutHandler":
    """Get Logout command handler (no database access)."""
    from src.application.commands.handlers.logout_handler import LogoutHandler

    return LogoutHandler(logger=get_logger())
