"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import LoginRequest, TokenPairResponse
"""

from src.schemas.account_schemas import (
    AccountListResponse,
    AccountResponse,
    AccountStatusUpdateRequest,
    ChangePasswordRequest,
    ProvisionAccountResponse,
    ProvisionLecturerRequest,
    ProvisionStudentRequest,
)
from src.schemas.auth_schemas import (
    # Registration
    AdminRegisterRequest,
    AdminRegisterResponse,
    # Login / tokens
    LoginAccount,
    LoginRequest,
    LoginResponse,
    RefreshTokenRequest,
    TokenPairResponse,
    # Verification
    ResendOtpRequest,
    VerifyOtpRequest,
    # Password reset
    ForgotPasswordRequest,
    ResetPasswordRequest,
    MessageResponse,
)
from src.schemas.institution_schemas import (
    InstitutionCreateRequest,
    InstitutionListResponse,
    InstitutionMutationResponse,
    InstitutionResponse,
    InstitutionStatusUpdateRequest,
    PublicInstitution,
    PublicInstitutionListResponse,
)

__all__ = [
    # Accounts
    "AccountListResponse",
    "AccountResponse",
    "AccountStatusUpdateRequest",
    "ChangePasswordRequest",
    "ProvisionAccountResponse",
    "ProvisionLecturerRequest",
    "ProvisionStudentRequest",
    # Auth
    "AdminRegisterRequest",
    "AdminRegisterResponse",
    "ForgotPasswordRequest",
    "LoginAccount",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RefreshTokenRequest",
    "ResendOtpRequest",
    "ResetPasswordRequest",
    "TokenPairResponse",
    "VerifyOtpRequest",
    # Institutions
    "InstitutionCreateRequest",
    "InstitutionListResponse",
    "InstitutionMutationResponse",
    "InstitutionResponse",
    "InstitutionStatusUpdateRequest",
    "PublicInstitution",
    "PublicInstitutionListResponse",
]
