"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL / SQLite)
- Logging (structlog console adapter)
- Clock
- Password hashing (bcrypt) and password policy
- Session tokens (JWT)
- One-time code generation
- Email (stub / AWS SES)

Plus the request-scoped database session.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.application.services.password_policy_service import (
        PasswordPolicyService,
    )
    from src.domain.protocols.clock_protocol import ClockProtocol
    from src.domain.protocols.code_generator_protocol import (
        OneTimeCodeGeneratorProtocol,
    )
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.notification_protocol import NotificationProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.session_token_protocol import SessionTokenProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Usage:
        # Application startup
        await get_database().create_all()

        # Presentation Layer - use get_db_session() instead
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_clock() -> "ClockProtocol":
    """Get system clock singleton (app-scoped)."""
    from src.infrastructure.clock import SystemClock

    return SystemClock()


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.

    Usage:
        @router.get("/profile")
        async def profile(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor
    (settings.bcrypt_rounds, 12 by default).
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_password_policy() -> "PasswordPolicyService":
    """Get password policy singleton (app-scoped).

    Wraps the hashing service with reuse checks over the last
    settings.password_history_size passwords.
    """
    from src.application.services.password_policy_service import (
        PasswordPolicyService,
    )

    return PasswordPolicyService(
        password_service=get_password_service(),
        history_size=settings.password_history_size,
    )


@lru_cache()
def get_session_token_service() -> "SessionTokenProtocol":
    """Get JWT session token service singleton (app-scoped).

    HS256 with separate access/refresh secrets; lifetimes from settings
    (24 hours / 7 days by default).
    """
    from src.infrastructure.security import JWTSessionService

    return JWTSessionService(
        access_secret=settings.access_token_secret,
        refresh_secret=settings.refresh_token_secret,
        clock=get_clock(),
        access_expire_hours=settings.access_token_expire_hours,
        refresh_expire_days=settings.refresh_token_expire_days,
    )


@lru_cache()
def get_code_generator() -> "OneTimeCodeGeneratorProtocol":
    """Get one-time code generator singleton (app-scoped)."""
    from src.infrastructure.security import SecureCodeGenerator

    return SecureCodeGenerator()


# ============================================================================
# Email Service (Application-Scoped)
# ============================================================================


@lru_cache()
def get_email_service() -> "NotificationProtocol":
    """Get email service singleton (app-scoped).

    Container owns adapter selection (composition root):
        - SES_ENABLED=true: SesEmailService
        - otherwise: StubEmailService (logs messages)
    """
    from src.infrastructure.email import SesEmailService, StubEmailService

    if settings.ses_enabled:
        return SesEmailService(
            region_name=settings.aws_region,
            from_email=settings.ses_from_email,
            from_name=settings.ses_from_name,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
            logger=get_logger(),
        )
    return StubEmailService(logger=get_logger())


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON lines)
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
        service=settings.app_name,
    )
