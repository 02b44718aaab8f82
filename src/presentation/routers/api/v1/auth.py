"""Authentication router.

Public endpoints for the credential lifecycle: admin registration, login,
email verification, session refresh and password reset.

Endpoints:
    GET  /api/v1/auth/institutions    - Active institutions (signup form)
    POST /api/v1/auth/admin/register  - Admin self-registration
    POST /api/v1/auth/login           - Login
    GET  /api/v1/auth/verify-email    - Magic-link verification
    POST /api/v1/auth/verify-otp      - OTP verification
    POST /api/v1/auth/resend-otp      - Resend verification OTP
    POST /api/v1/auth/refresh-token   - Refresh session pair
    POST /api/v1/auth/forgot-password - Request password reset OTP
    POST /api/v1/auth/reset-password  - Reset password with OTP
"""

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import (
    LoginUser,
    RefreshSession,
    RegisterAdmin,
    RequestPasswordReset,
    ResendVerification,
    ResetPassword,
    VerifyEmail,
)
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.refresh_session_handler import (
    RefreshSessionHandler,
)
from src.application.commands.handlers.register_admin_handler import (
    RegisterAdminHandler,
)
from src.application.commands.handlers.request_password_reset_handler import (
    GENERIC_RESET_MESSAGE,
    RequestPasswordResetHandler,
)
from src.application.commands.handlers.resend_verification_handler import (
    ResendVerificationHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)
from src.application.queries.handlers.list_institutions_handler import (
    ListInstitutionsHandler,
)
from src.application.queries.institution_queries import ListInstitutions
from src.core.container import (
    get_list_institutions_handler,
    get_login_user_handler,
    get_refresh_session_handler,
    get_register_admin_handler,
    get_request_password_reset_handler,
    get_resend_verification_handler,
    get_reset_password_handler,
    get_verify_email_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    AdminRegisterRequest,
    AdminRegisterResponse,
    ForgotPasswordRequest,
    LoginAccount,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RefreshTokenRequest,
    ResendOtpRequest,
    ResetPasswordRequest,
    TokenPairResponse,
    VerifyOtpRequest,
)
from src.schemas.institution_schemas import (
    PublicInstitution,
    PublicInstitutionListResponse,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"description": "Validation or policy failure", "model": ProblemDetails},
    401: {"description": "Authentication failed", "model": ProblemDetails},
    404: {"description": "Resource not found", "model": ProblemDetails},
}


@router.get(
    "/institutions",
    response_model=PublicInstitutionListResponse,
    summary="List active institutions",
)
async def list_public_institutions(
    handler: ListInstitutionsHandler = Depends(get_list_institutions_handler),
) -> PublicInstitutionListResponse:
    """List active institutions (id, name, code) for the signup form."""
    result = await handler.handle(ListInstitutions(active_only=True))
    match result:
        case Success(value=institutions):
            return PublicInstitutionListResponse(
                institutions=[
                    PublicInstitution(id=i.id, name=i.name, code=i.code)
                    for i in institutions
                ]
            )
    return PublicInstitutionListResponse(institutions=[])


@router.post(
    "/admin/register",
    status_code=status.HTTP_201_CREATED,
    response_model=AdminRegisterResponse,
    responses={**_ERROR_RESPONSES, 409: {"model": ProblemDetails}},
    summary="Register institution admin",
)
async def register_admin(
    request: Request,
    data: AdminRegisterRequest,
    handler: RegisterAdminHandler = Depends(get_register_admin_handler),
) -> AdminRegisterResponse | JSONResponse:
    """Create a pending admin for an active institution.

    POST /api/v1/auth/admin/register → 201 Created

    A verification OTP is emailed; the admin must verify before logging in.
    """
    command = RegisterAdmin(
        first_name=data.first_name,
        last_name=data.last_name,
        email=str(data.email),
        password=data.password,
        confirm_password=data.confirm_password,
        institution_code=data.institution_code,
    )

    result = await handler.handle(command)

    match result:
        case Success(value=registration):
            return AdminRegisterResponse(
                admin_id=registration.admin_id,
                email=registration.email,
                institution_name=registration.institution_name,
                institution_code=registration.institution_code,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={**_ERROR_RESPONSES, 403: {"model": ProblemDetails}},
    summary="Login",
)
async def login(
    request: Request,
    data: LoginRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> LoginResponse | JSONResponse:
    """Authenticate by email (or student/lecturer ID) and password.

    Unknown identifier and wrong password return the same 401. An
    unverified email returns 403 with the email in ``details``.
    """
    command = LoginUser(
        identifier=data.identifier,
        password=data.password,
        role=data.role,
    )

    result = await handler.handle(command)

    match result:
        case Success(value=login_result):
            account = login_result.account
            return LoginResponse(
                access_token=login_result.tokens.access_token,
                refresh_token=login_result.tokens.refresh_token,
                account=LoginAccount(
                    id=account.id,
                    email=account.email,
                    role=account.role,
                    name=account.name,
                    avatar=account.avatar,
                    student_id=account.student_id,
                    lecturer_id=account.lecturer_id,
                    academic_title=account.academic_title,
                    institution_id=account.institution_id,
                    institution_name=account.institution_name,
                    is_first_login=account.is_first_login,
                ),
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.get(
    "/verify-email",
    response_model=MessageResponse,
    responses=_ERROR_RESPONSES,
    summary="Verify email via magic link",
)
async def verify_email_link(
    request: Request,
    token: str = Query(..., min_length=1),
    email: str = Query(..., min_length=1),
    handler: VerifyEmailHandler = Depends(get_verify_email_handler),
) -> MessageResponse | JSONResponse:
    """Consume the activation link emailed to a provisioned account."""
    result = await handler.handle(VerifyEmail(email=email, code=token))

    match result:
        case Success(value=_):
            return MessageResponse(
                message="Email verified successfully. Your account is now active."
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.post(
    "/verify-otp",
    response_model=MessageResponse,
    responses=_ERROR_RESPONSES,
    summary="Verify email via OTP",
)
async def verify_otp(
    request: Request,
    data: VerifyOtpRequest,
    handler: VerifyEmailHandler = Depends(get_verify_email_handler),
) -> MessageResponse | JSONResponse:
    """Consume a 6-digit email-verification OTP."""
    result = await handler.handle(VerifyEmail(email=str(data.email), code=data.code))

    match result:
        case Success(value=_):
            return MessageResponse(
                message="Email verified successfully. You can now log in."
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.post(
    "/resend-otp",
    response_model=MessageResponse,
    responses=_ERROR_RESPONSES,
    summary="Resend verification OTP",
)
async def resend_otp(
    request: Request,
    data: ResendOtpRequest,
    handler: ResendVerificationHandler = Depends(get_resend_verification_handler),
) -> MessageResponse | JSONResponse:
    """Issue a fresh verification OTP; earlier codes stop working."""
    result = await handler.handle(ResendVerification(email=str(data.email)))

    match result:
        case Success(value=_):
            return MessageResponse(message="Verification code sent successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.post(
    "/refresh-token",
    response_model=TokenPairResponse,
    responses=_ERROR_RESPONSES,
    summary="Refresh session",
)
async def refresh_token(
    request: Request,
    data: RefreshTokenRequest,
    handler: RefreshSessionHandler = Depends(get_refresh_session_handler),
) -> TokenPairResponse | JSONResponse:
    """Exchange a refresh token for a new access/refresh pair."""
    result = await handler.handle(RefreshSession(refresh_token=data.refresh_token))

    match result:
        case Success(value=tokens):
            return TokenPairResponse(
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())


@router.post(
    "/forgot-password",
    response_model=MessageResponse,
    summary="Request password reset",
)
async def forgot_password(
    data: ForgotPasswordRequest,
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> MessageResponse:
    """Email a password-reset OTP if the account exists.

    The response is identical whether or not it does.
    """
    result = await handler.handle(
        RequestPasswordReset(email=str(data.email), role=data.role)
    )
    match result:
        case Success(value=message):
            return MessageResponse(message=message)
    return MessageResponse(message=GENERIC_RESET_MESSAGE)


@router.post(
    "/reset-password",
    response_model=MessageResponse,
    responses=_ERROR_RESPONSES,
    summary="Reset password",
)
async def reset_password(
    request: Request,
    data: ResetPasswordRequest,
    handler: ResetPasswordHandler = Depends(get_reset_password_handler),
) -> MessageResponse | JSONResponse:
    """Consume a reset OTP and set a new password."""
    command = ResetPassword(
        email=str(data.email),
        code=data.code,
        new_password=data.new_password,
        confirm_password=data.confirm_password,
    )

    result = await handler.handle(command)

    match result:
        case Success(value=_):
            return MessageResponse(
                message="Password reset successfully. You can now log in with your new password."
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
