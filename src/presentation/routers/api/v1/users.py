"""Users router (authenticated account self-service).

Endpoints:
    GET  /api/v1/users/profile          - Current account profile
    PUT  /api/v1/users/change-password  - Change own password
    POST /api/v1/users/logout           - Logout (client discards tokens)
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import ChangePassword, Logout
from src.application.commands.handlers.change_password_handler import (
    ChangePasswordHandler,
)
from src.application.commands.handlers.logout_handler import LogoutHandler
from src.application.queries.account_queries import GetAccountProfile
from src.application.queries.handlers.get_account_profile_handler import (
    GetAccountProfileHandler,
)
from src.core.container import (
    get_account_profile_handler,
    get_change_password_handler,
    get_logout_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentAccount,
    get_current_account,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.account_schemas import AccountResponse, ChangePasswordRequest
from src.schemas.auth_schemas import MessageResponse

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "/profile",
    response_model=AccountResponse,
    responses={401: {"model": ProblemDetails}, 404: {"model": ProblemDetails}},
    summary="Get current profile",
)
async def get_profile(
    request: Request,
    current: CurrentAccount = Depends(get_current_account),
    handler: GetAccountProfileHandler = Depends(get_account_profile_handler),
) -> AccountResponse | JSONResponse:
    """Return the caller's account with its institution name."""
    result = await handler.handle(GetAccountProfile(account_id=current.account_id))

    match result:
        case Success(value=summary):
            return AccountResponse.from_summary(summary)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.put(
    "/change-password",
    response_model=MessageResponse,
    responses={
        400: {"model": ProblemDetails},
        401: {"model": ProblemDetails},
        409: {"model": ProblemDetails},
    },
    summary="Change password",
)
async def change_password(
    request: Request,
    data: ChangePasswordRequest,
    current: CurrentAccount = Depends(get_current_account),
    handler: ChangePasswordHandler = Depends(get_change_password_handler),
) -> MessageResponse | JSONResponse:
    """Change the caller's password and clear the first-login flag."""
    command = ChangePassword(
        account_id=current.account_id,
        current_password=data.current_password,
        new_password=data.new_password,
        confirm_password=data.confirm_password,
    )

    result = await handler.handle(command)

    match result:
        case Success(value=_):
            return MessageResponse(message="Password changed successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Logout",
)
async def logout(
    current: CurrentAccount = Depends(get_current_account),
    handler: LogoutHandler = Depends(get_logout_handler),
) -> MessageResponse:
    """Acknowledge logout.

    Tokens are stateless and stay valid until they expire; the client is
    expected to discard them.
    """
    await handler.handle(Logout(account_id=current.account_id))
    return MessageResponse(message="Logged out successfully")
