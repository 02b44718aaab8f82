"""Account request/response schemas.

Endpoints:
    GET   /api/v1/users/profile                  - Current account profile
    PUT   /api/v1/users/change-password          - Change own password
    POST  /api/v1/admin/students                 - Provision a student
    POST  /api/v1/admin/lecturers                - Provision a lecturer
    GET   /api/v1/admin/students                 - List students
    GET   /api/v1/admin/lecturers                - List lecturers
    PATCH /api/v1/admin/accounts/{id}/status     - Suspend / re-activate
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from src.application.dtos import AccountSummary
from src.domain.enums import AccountRole, AccountStatus


class AccountResponse(BaseModel):
    """Account view. Never carries password hashes or history."""

    id: UUID
    email: str
    role: AccountRole
    status: AccountStatus
    email_verified: bool
    is_first_login: bool
    name: str
    first_name: str
    last_name: str
    avatar: str | None = None
    department: str | None = None
    student_id: str | None = None
    year: str | None = None
    lecturer_id: str | None = None
    academic_title: str | None = None
    specialization: str | None = None
    title: str | None = None
    institution_id: UUID
    institution_name: str
    created_at: datetime | None = None

    @classmethod
    def from_summary(cls, summary: AccountSummary) -> "AccountResponse":
        """Build from the handler DTO."""
        return cls(
            id=summary.id,
            email=summary.email,
            role=summary.role,
            status=summary.status,
            email_verified=summary.email_verified,
            is_first_login=summary.is_first_login,
            name=summary.name,
            first_name=summary.first_name,
            last_name=summary.last_name,
            avatar=summary.avatar,
            department=summary.department,
            student_id=summary.student_id,
            year=summary.year,
            lecturer_id=summary.lecturer_id,
            academic_title=summary.academic_title,
            specialization=summary.specialization,
            title=summary.title,
            institution_id=summary.institution_id,
            institution_name=summary.institution_name,
            created_at=summary.created_at,
        )


class AccountListResponse(BaseModel):
    """List of accounts with a count."""

    accounts: list[AccountResponse]
    total: int


class ChangePasswordRequest(BaseModel):
    """Request schema for changing the caller's password."""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., max_length=128)
    confirm_password: str = Field(..., max_length=128)


class ProvisionStudentRequest(BaseModel):
    """Request schema for provisioning a student."""

    first_name: str = Field(..., min_length=2, max_length=100, examples=["Ada"])
    last_name: str = Field(..., min_length=2, max_length=100, examples=["Lovelace"])
    email: EmailStr
    department: str = Field(..., min_length=2, max_length=100)
    year: str = Field(..., min_length=1, max_length=10, examples=["1"])


class ProvisionLecturerRequest(BaseModel):
    """Request schema for provisioning a lecturer."""

    first_name: str = Field(..., min_length=2, max_length=100)
    last_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    department: str = Field(..., min_length=2, max_length=100)
    academic_title: Literal["Prof", "Dr", "Mr", "Mrs", "Ms"]
    specialization: str | None = Field(default=None, max_length=200)


class ProvisionAccountResponse(BaseModel):
    """Response schema for provisioning (201 Created)."""

    message: str
    account: AccountResponse


class AccountStatusUpdateRequest(BaseModel):
    """Request schema for an admin status override."""

    status: AccountStatus
