"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RegisterAdmin, ResetPassword).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.account_commands import (
    ProvisionAccount,
    SetAccountStatus,
)
from src.application.commands.auth_commands import (
    ChangePassword,
    LoginUser,
    Logout,
    RefreshSession,
    RegisterAdmin,
    RequestPasswordReset,
    ResendVerification,
    ResetPassword,
    VerifyEmail,
)
from src.application.commands.institution_commands import (
    CreateInstitution,
    DeactivateInstitution,
    UpdateInstitutionStatus,
)

__all__ = [
    # Auth
    "ChangePassword",
    "LoginUser",
    "Logout",
    "RefreshSession",
    "RegisterAdmin",
    "RequestPasswordReset",
    "ResendVerification",
    "ResetPassword",
    "VerifyEmail",
    # Accounts
    "ProvisionAccount",
    "SetAccountStatus",
    # Institutions
    "CreateInstitution",
    "DeactivateInstitution",
    "UpdateInstitutionStatus",
]
