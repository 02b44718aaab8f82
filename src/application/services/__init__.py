"""Application services shared by several handlers.

- OneTimeTokenService: issue and single-use consume of OTP / magic-link codes
- PasswordPolicyService: hashing, reuse checks and history rotation
- account_identifiers: default passwords, avatars, student/lecturer IDs
"""

from src.application.services.one_time_token_service import OneTimeTokenService
from src.application.services.password_policy_service import PasswordPolicyService

__all__ = [
    "OneTimeTokenService",
    "PasswordPolicyService",
]
