"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, AccountRepository
"""

# Service protocols
from src.domain.protocols.clock_protocol import ClockProtocol
from src.domain.protocols.code_generator_protocol import OneTimeCodeGeneratorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notification_protocol import NotificationProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.session_token_protocol import (
    AccessClaims,
    RefreshClaims,
    SessionTokenProtocol,
    SessionTokens,
)

# Repository protocols
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.institution_repository import InstitutionRepository
from src.domain.protocols.one_time_credential_repository import (
    OneTimeCredentialRepository,
)

__all__ = [
    # Service protocols
    "ClockProtocol",
    "LoggerProtocol",
    "NotificationProtocol",
    "OneTimeCodeGeneratorProtocol",
    "PasswordHashingProtocol",
    "SessionTokenProtocol",
    # Session token DTOs
    "AccessClaims",
    "RefreshClaims",
    "SessionTokens",
    # Repository protocols
    "AccountRepository",
    "InstitutionRepository",
    "OneTimeCredentialRepository",
]
