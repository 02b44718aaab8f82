"""Account roles.

Every account belongs to exactly one institution and carries exactly one
role. The role decides which secondary identifier the account can log in
with and which endpoints it may reach.

Usage:
    from src.domain.enums import AccountRole

    if account.role == AccountRole.ADMIN:
        ...
"""

from enum import Enum


class AccountRole(str, Enum):
    """Account roles.

    String Enum:
        Inherits from str so values serialize directly into JWT claims
        (``userType``) and database columns.
    """

    STUDENT = "student"
    LECTURER = "lecturer"
    ADMIN = "admin"
