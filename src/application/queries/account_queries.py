"""Account queries (CQRS read operations).

Queries never change state.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import AccountRole


@dataclass(frozen=True, kw_only=True)
class GetAccountProfile:
    """Profile of an account together with its institution name."""

    account_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListInstitutionAccounts:
    """Students or lecturers of the requesting admin's institution.

    Attributes:
        admin_id: Requesting admin.
        role: STUDENT or LECTURER.
    """

    admin_id: UUID
    role: AccountRole
