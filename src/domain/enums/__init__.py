"""Domain enums.

Closed sets of values used by entities and commands.

Usage:
    from src.domain.enums import AccountRole, CredentialPurpose
"""

from src.domain.enums.account_role import AccountRole
from src.domain.enums.account_status import AccountStatus
from src.domain.enums.credential_purpose import CredentialKind, CredentialPurpose
from src.domain.enums.institution_status import InstitutionStatus
from src.domain.enums.notification_template import NotificationTemplate

__all__ = [
    "AccountRole",
    "AccountStatus",
    "CredentialKind",
    "CredentialPurpose",
    "InstitutionStatus",
    "NotificationTemplate",
]
