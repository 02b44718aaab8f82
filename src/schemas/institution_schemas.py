"""Institution request/response schemas.

Endpoints:
    GET    /api/v1/auth/institutions                     - Public listing (active)
    POST   /api/v1/superadmin/institutions               - Create
    GET    /api/v1/superadmin/institutions               - List all
    PATCH  /api/v1/superadmin/institutions/{code}/status - Update status
    DELETE /api/v1/superadmin/institutions/{code}        - Deactivate
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities.institution import Institution
from src.domain.enums import InstitutionStatus


class InstitutionCreateRequest(BaseModel):
    """Request schema for creating an institution."""

    name: str = Field(..., max_length=200, examples=["Massachusetts Institute of Technology"])
    code: str = Field(..., max_length=20, examples=["MIT"])
    domain: str = Field(default="", max_length=200, examples=["mit.edu"])
    status: InstitutionStatus = InstitutionStatus.ACTIVE


class InstitutionStatusUpdateRequest(BaseModel):
    """Request schema for changing an institution's status."""

    status: InstitutionStatus


class InstitutionResponse(BaseModel):
    """Full institution view (super-admin)."""

    id: UUID
    name: str
    code: str
    domain: str
    status: InstitutionStatus
    allow_student_self_registration: bool
    require_email_verification: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, institution: Institution) -> "InstitutionResponse":
        """Build from the domain entity."""
        return cls(
            id=institution.id,
            name=institution.name,
            code=institution.code,
            domain=institution.domain,
            status=institution.status,
            allow_student_self_registration=institution.settings.allow_student_self_registration,
            require_email_verification=institution.settings.require_email_verification,
            created_at=institution.created_at,
            updated_at=institution.updated_at,
        )


class InstitutionListResponse(BaseModel):
    """Super-admin institution listing."""

    institutions: list[InstitutionResponse]
    total: int


class PublicInstitution(BaseModel):
    """Public listing entry used by the signup form."""

    id: UUID
    name: str
    code: str


class PublicInstitutionListResponse(BaseModel):
    """Public institution listing."""

    institutions: list[PublicInstitution]


class InstitutionMutationResponse(BaseModel):
    """Response for create/update/deactivate."""

    message: str
    institution: InstitutionResponse
