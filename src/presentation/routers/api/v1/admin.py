"""Admin router (institution administration).

Every endpoint requires an active, verified admin. Admins act only on
accounts of their own institution.

Endpoints:
    POST  /api/v1/admin/students                     - Provision a student
    POST  /api/v1/admin/lecturers                    - Provision a lecturer
    GET   /api/v1/admin/students                     - List students
    GET   /api/v1/admin/lecturers                    - List lecturers
    PATCH /api/v1/admin/accounts/{account_id}/status - Suspend / re-activate
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.account_commands import (
    ProvisionAccount,
    SetAccountStatus,
)
from src.application.commands.handlers.provision_account_handler import (
    ProvisionAccountHandler,
)
from src.application.commands.handlers.set_account_status_handler import (
    SetAccountStatusHandler,
)
from src.application.queries.account_queries import ListInstitutionAccounts
from src.application.queries.handlers.list_institution_accounts_handler import (
    ListInstitutionAccountsHandler,
)
from src.core.container import (
    get_list_institution_accounts_handler,
    get_provision_account_handler,
    get_set_account_status_handler,
)
from src.core.result import Failure, Success
from src.domain.enums import AccountRole
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentAccount,
    require_admin,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.account_schemas import (
    AccountListResponse,
    AccountResponse,
    AccountStatusUpdateRequest,
    ProvisionAccountResponse,
    ProvisionLecturerRequest,
    ProvisionStudentRequest,
)

router = APIRouter(prefix="/admin", tags=["Admin"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ProblemDetails},
    401: {"model": ProblemDetails},
    403: {"model": ProblemDetails},
    404: {"model": ProblemDetails},
    409: {"model": ProblemDetails},
}


async def _provision(
    request: Request,
    handler: ProvisionAccountHandler,
    command: ProvisionAccount,
    message: str,
) -> ProvisionAccountResponse | JSONResponse:
    result = await handler.handle(command)

    match result:
        case Success(value=summary):
            return ProvisionAccountResponse(
                message=message,
                account=AccountResponse.from_summary(summary),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


async def _list(
    request: Request,
    handler: ListInstitutionAccountsHandler,
    admin: CurrentAccount,
    role: AccountRole,
) -> AccountListResponse | JSONResponse:
    result = await handler.handle(
        ListInstitutionAccounts(admin_id=admin.account_id, role=role)
    )

    match result:
        case Success(value=summaries):
            return AccountListResponse(
                accounts=[AccountResponse.from_summary(s) for s in summaries],
                total=len(summaries),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.post(
    "/students",
    status_code=status.HTTP_201_CREATED,
    response_model=ProvisionAccountResponse,
    responses=_ERROR_RESPONSES,
    summary="Provision student",
)
async def provision_student(
    request: Request,
    data: ProvisionStudentRequest,
    admin: CurrentAccount = Depends(require_admin),
    handler: ProvisionAccountHandler = Depends(get_provision_account_handler),
) -> ProvisionAccountResponse | JSONResponse:
    """Create a pending student and email the activation link.

    POST /api/v1/admin/students → 201 Created
    """
    command = ProvisionAccount(
        admin_id=admin.account_id,
        role=AccountRole.STUDENT,
        first_name=data.first_name,
        last_name=data.last_name,
        email=str(data.email),
        department=data.department,
        year=data.year,
    )
    return await _provision(
        request,
        handler,
        command,
        "Student created successfully. Activation email sent.",
    )


@router.post(
    "/lecturers",
    status_code=status.HTTP_201_CREATED,
    response_model=ProvisionAccountResponse,
    responses=_ERROR_RESPONSES,
    summary="Provision lecturer",
)
async def provision_lecturer(
    request: Request,
    data: ProvisionLecturerRequest,
    admin: CurrentAccount = Depends(require_admin),
    handler: ProvisionAccountHandler = Depends(get_provision_account_handler),
) -> ProvisionAccountResponse | JSONResponse:
    """Create a pending lecturer and email the activation link.

    POST /api/v1/admin/lecturers → 201 Created
    """
    command = ProvisionAccount(
        admin_id=admin.account_id,
        role=AccountRole.LECTURER,
        first_name=data.first_name,
        last_name=data.last_name,
        email=str(data.email),
        department=data.department,
        academic_title=data.academic_title,
        specialization=data.specialization,
    )
    return await _provision(
        request,
        handler,
        command,
        "Lecturer created successfully. Activation email sent.",
    )


@router.get(
    "/students",
    response_model=AccountListResponse,
    responses=_ERROR_RESPONSES,
    summary="List students",
)
async def list_students(
    request: Request,
    admin: CurrentAccount = Depends(require_admin),
    handler: ListInstitutionAccountsHandler = Depends(
        get_list_institution_accounts_handler
    ),
) -> AccountListResponse | JSONResponse:
    """List students of the admin's institution."""
    return await _list(request, handler, admin, AccountRole.STUDENT)


@router.get(
    "/lecturers",
    response_model=AccountListResponse,
    responses=_ERROR_RESPONSES,
    summary="List lecturers",
)
async def list_lecturers(
    request: Request,
    admin: CurrentAccount = Depends(require_admin),
    handler: ListInstitutionAccountsHandler = Depends(
        get_list_institution_accounts_handler
    ),
) -> AccountListResponse | JSONResponse:
    """List lecturers of the admin's institution."""
    return await _list(request, handler, admin, AccountRole.LECTURER)


@router.patch(
    "/accounts/{account_id}/status",
    response_model=AccountResponse,
    responses=_ERROR_RESPONSES,
    summary="Set account status",
)
async def set_account_status(
    request: Request,
    account_id: UUID,
    data: AccountStatusUpdateRequest,
    admin: CurrentAccount = Depends(require_admin),
    handler: SetAccountStatusHandler = Depends(get_set_account_status_handler),
) -> AccountResponse | JSONResponse:
    """Suspend or re-activate an account in the admin's institution."""
    command = SetAccountStatus(
        admin_id=admin.account_id,
        account_id=account_id,
        status=data.status,
    )

    result = await handler.handle(command)

    match result:
        case Success(value=summary):
            return AccountResponse.from_summary(summary)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
