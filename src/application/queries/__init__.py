"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetAccountProfile, ListInstitutions).

Queries NEVER change state.
"""

from src.application.queries.account_queries import (
    GetAccountProfile,
    ListInstitutionAccounts,
)
from src.application.queries.institution_queries import ListInstitutions

__all__ = [
    "GetAccountProfile",
    "ListInstitutionAccounts",
    "ListInstitutions",
]
