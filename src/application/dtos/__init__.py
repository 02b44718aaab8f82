"""Application DTOs returned by handlers."""

from src.application.dtos.auth_dtos import (
    AccountSummary,
    AdminRegistration,
    LoginResult,
)

__all__ = [
    "AccountSummary",
    "AdminRegistration",
    "LoginResult",
]
