"""Super-admin router (institution management).

Every endpoint requires the X-Super-Admin-Key header.

Endpoints:
    POST   /api/v1/superadmin/institutions               - Create institution
    GET    /api/v1/superadmin/institutions               - List all institutions
    PATCH  /api/v1/superadmin/institutions/{code}/status - Update status
    DELETE /api/v1/superadmin/institutions/{code}        - Deactivate (soft delete)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.create_institution_handler import (
    CreateInstitutionHandler,
)
from src.application.commands.handlers.update_institution_status_handler import (
    UpdateInstitutionStatusHandler,
)
from src.application.commands.institution_commands import (
    CreateInstitution,
    DeactivateInstitution,
    UpdateInstitutionStatus,
)
from src.application.queries.handlers.list_institutions_handler import (
    ListInstitutionsHandler,
)
from src.application.queries.institution_queries import ListInstitutions
from src.core.container import (
    get_create_institution_handler,
    get_list_institutions_handler,
    get_update_institution_status_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    require_super_admin_key,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.institution_schemas import (
    InstitutionCreateRequest,
    InstitutionListResponse,
    InstitutionMutationResponse,
    InstitutionResponse,
    InstitutionStatusUpdateRequest,
)

router = APIRouter(
    prefix="/superadmin",
    tags=["Super Admin"],
    dependencies=[Depends(require_super_admin_key)],
)


@router.post(
    "/institutions",
    status_code=status.HTTP_201_CREATED,
    response_model=InstitutionMutationResponse,
    responses={
        400: {"model": ProblemDetails},
        401: {"model": ProblemDetails},
        409: {"model": ProblemDetails},
    },
    summary="Create institution",
)
async def create_institution(
    request: Request,
    data: InstitutionCreateRequest,
    handler: CreateInstitutionHandler = Depends(get_create_institution_handler),
) -> InstitutionMutationResponse | JSONResponse:
    """Create an institution. The code is stored uppercase."""
    command = CreateInstitution(
        name=data.name,
        code=data.code,
        domain=data.domain,
        status=data.status,
    )

    result = await handler.handle(command)

    match result:
        case Success(value=institution):
            return InstitutionMutationResponse(
                message="Institution created successfully",
                institution=InstitutionResponse.from_entity(institution),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.get(
    "/institutions",
    response_model=InstitutionListResponse,
    summary="List all institutions",
)
async def list_institutions(
    handler: ListInstitutionsHandler = Depends(get_list_institutions_handler),
) -> InstitutionListResponse:
    """List every institution regardless of status."""
    result = await handler.handle(ListInstitutions(active_only=False))
    institutions = []
    match result:
        case Success(value=found):
            institutions = [InstitutionResponse.from_entity(i) for i in found]
    return InstitutionListResponse(institutions=institutions, total=len(institutions))


@router.patch(
    "/institutions/{code}/status",
    response_model=InstitutionMutationResponse,
    responses={401: {"model": ProblemDetails}, 404: {"model": ProblemDetails}},
    summary="Update institution status",
)
async def update_institution_status(
    request: Request,
    code: str,
    data: InstitutionStatusUpdateRequest,
    handler: UpdateInstitutionStatusHandler = Depends(
        get_update_institution_status_handler
    ),
) -> InstitutionMutationResponse | JSONResponse:
    """Set an institution's status."""
    result = await handler.handle(UpdateInstitutionStatus(code=code, status=data.status))

    match result:
        case Success(value=institution):
            return InstitutionMutationResponse(
                message=f"Institution status updated to {institution.status.value}",
                institution=InstitutionResponse.from_entity(institution),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.delete(
    "/institutions/{code}",
    response_model=InstitutionMutationResponse,
    responses={401: {"model": ProblemDetails}, 404: {"model": ProblemDetails}},
    summary="Deactivate institution",
)
async def deactivate_institution(
    request: Request,
    code: str,
    handler: UpdateInstitutionStatusHandler = Depends(
        get_update_institution_status_handler
    ),
) -> InstitutionMutationResponse | JSONResponse:
    """Soft-delete an institution by moving it to inactive.

    Its accounts are kept.
    """
    result = await handler.handle(DeactivateInstitution(code=code))

    match result:
        case Success(value=institution):
            return InstitutionMutationResponse(
                message="Institution deactivated successfully",
                institution=InstitutionResponse.from_entity(institution),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
