"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from src.infrastructure.persistence.repositories.institution_repository import (
    InstitutionRepository,
)
from src.infrastructure.persistence.repositories.one_time_credential_repository import (
    OneTimeCredentialRepository,
)

__all__ = [
    "AccountRepository",
    "InstitutionRepository",
    "OneTimeCredentialRepository",
]
