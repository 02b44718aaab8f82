"""Error response builder for RFC 9457 Problem Details.

Converts DomainError values returned by handlers into Problem Details
JSON responses.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.errors import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.domain.errors import (
    AccountNotActiveError,
    EmailNotVerifiedError,
    ExpiredOrConsumedError,
    InvalidCredentialsError,
    InvalidTokenError,
    PolicyViolationError,
)
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# Order matters: subclasses before their bases (DuplicateError is a ConflictError)
_STATUS_BY_TYPE: tuple[tuple[type[DomainError], int, str], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST, "Validation Failed"),
    (ExpiredOrConsumedError, status.HTTP_400_BAD_REQUEST, "Invalid Code"),
    (PolicyViolationError, status.HTTP_400_BAD_REQUEST, "Policy Violation"),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED, "Authentication Failed"),
    (InvalidTokenError, status.HTTP_401_UNAUTHORIZED, "Authentication Required"),
    (EmailNotVerifiedError, status.HTTP_403_FORBIDDEN, "Email Not Verified"),
    (AccountNotActiveError, status.HTTP_403_FORBIDDEN, "Account Not Active"),
    (AuthorizationError, status.HTTP_403_FORBIDDEN, "Access Denied"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    (ConflictError, status.HTTP_409_CONFLICT, "Resource Conflict"),
)


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> match result:
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error, request)
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None = None,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 9457 JSON response.

        Validation errors with a ``field`` get a single-entry ``errors`` list.
        ``details`` (e.g. the email of an unverified account) is passed
        through as an extension member.

        Args:
            error: Domain error returned by a handler.
            request: FastAPI Request object (for instance URL).
            trace_id: Optional request trace ID.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code, title = ErrorResponseBuilder.classify(error)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=title,
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            trace_id=trace_id,
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        content = problem.model_dump(exclude_none=True)
        if error.details:
            content["details"] = dict(error.details)

        return JSONResponse(status_code=status_code, content=content)

    @staticmethod
    def classify(error: DomainError) -> tuple[int, str]:
        """Map a DomainError to (HTTP status, title).

        Example:
            >>> ErrorResponseBuilder.classify(INVALID_CREDENTIALS)
            (401, 'Authentication Failed')
        """
        for error_type, status_code, title in _STATUS_BY_TYPE:
            if isinstance(error, error_type):
                return status_code, title
        return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
