"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Password length and confirmation are checked by the handlers, so a
mismatch comes back as a 400 with a field-level error rather than a 422.

Endpoints:
    POST /api/v1/auth/admin/register  - Admin self-registration
    POST /api/v1/auth/login           - Login (email or role-specific ID)
    GET  /api/v1/auth/verify-email    - Magic-link verification
    POST /api/v1/auth/verify-otp      - OTP verification
    POST /api/v1/auth/resend-otp      - Resend verification OTP
    POST /api/v1/auth/refresh-token   - Refresh session pair
    POST /api/v1/auth/forgot-password - Request password reset OTP
    POST /api/v1/auth/reset-password  - Reset password with OTP
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.domain.enums import AccountRole


# =============================================================================
# Registration
# =============================================================================


class AdminRegisterRequest(BaseModel):
    """Request schema for admin self-registration.

    POST /api/v1/auth/admin/register
    Returns: 201 Created
    """

    institution_code: str = Field(
        ...,
        min_length=3,
        max_length=20,
        description="Code of an active institution (any case)",
        examples=["MIT"],
    )
    first_name: str = Field(..., min_length=2, max_length=100, examples=["Grace"])
    last_name: str = Field(..., min_length=2, max_length=100, examples=["Hopper"])
    email: EmailStr = Field(..., description="Admin login email")
    password: str = Field(..., max_length=128, description="At least 8 characters")
    confirm_password: str = Field(..., max_length=128)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "institution_code": "mit",
                "first_name": "Grace",
                "last_name": "Hopper",
                "email": "grace@mit.edu",
                "password": "Cobol1959",
                "confirm_password": "Cobol1959",
            }
        }
    )


class AdminRegisterResponse(BaseModel):
    """Response schema for admin registration (201 Created)."""

    admin_id: UUID
    email: str
    institution_name: str
    institution_code: str
    message: str = Field(
        default="Admin account created successfully. Please check your email for verification code.",
    )


# =============================================================================
# Login / Refresh
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    ``identifier`` is an email for every role, or a student ID / lecturer ID
    for students and lecturers.
    """

    identifier: str = Field(
        ...,
        min_length=1,
        description="Email, student ID or lecturer ID",
        examples=["ada@mit.edu", "MIT-123456789"],
    )
    password: str = Field(..., min_length=1)
    role: AccountRole = Field(..., description="Role to log in as")


class LoginAccount(BaseModel):
    """Account summary returned with a successful login."""

    id: UUID
    email: str
    role: AccountRole
    name: str
    avatar: str | None = None
    student_id: str | None = None
    lecturer_id: str | None = None
    academic_title: str | None = None
    institution_id: UUID
    institution_name: str
    is_first_login: bool


class LoginResponse(BaseModel):
    """Response schema for login (200 OK)."""

    message: str = "Login successful"
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    account: LoginAccount


class RefreshTokenRequest(BaseModel):
    """Request schema for session refresh."""

    refresh_token: str = Field(..., min_length=1)


class TokenPairResponse(BaseModel):
    """Response schema for session refresh."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"


# =============================================================================
# Email verification
# =============================================================================


class VerifyOtpRequest(BaseModel):
    """Request schema for OTP email verification."""

    email: EmailStr
    code: str = Field(..., min_length=6, max_length=6, pattern=r"^\d{6}$")


class ResendOtpRequest(BaseModel):
    """Request schema for resending a verification OTP."""

    email: EmailStr


# =============================================================================
# Password reset
# =============================================================================


class ForgotPasswordRequest(BaseModel):
    """Request schema for a password reset OTP."""

    email: EmailStr
    role: AccountRole


class ResetPasswordRequest(BaseModel):
    """Request schema for resetting a password with an OTP."""

    email: EmailStr
    code: str = Field(..., min_length=6, max_length=6, pattern=r"^\d{6}$")
    new_password: str = Field(..., max_length=128)
    confirm_password: str = Field(..., max_length=128)


# =============================================================================
# Common
# =============================================================================


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str
