"""Domain entities.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.account import Account, AccountProfile
from src.domain.entities.institution import Institution, InstitutionSettings
from src.domain.entities.one_time_credential import OneTimeCredential

__all__ = [
    "Account",
    "AccountProfile",
    "Institution",
    "InstitutionSettings",
    "OneTimeCredential",
]
