"""Database models for persistence layer.

SQLAlchemy models mapping to database tables. These are infrastructure
concerns and are never imported by the domain layer; repositories map them
to and from domain entities.

Models Organization:
    - institution.py: Tenants
    - account.py: Accounts with credential state and profile
    - one_time_credential.py: OTP codes and magic-link tokens
"""

from src.infrastructure.persistence.models.account import AccountModel
from src.infrastructure.persistence.models.institution import InstitutionModel
from src.infrastructure.persistence.models.one_time_credential import (
    OneTimeCredentialModel,
)

__all__ = [
    "AccountModel",
    "InstitutionModel",
    "OneTimeCredentialModel",
]
