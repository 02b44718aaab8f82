"""RFC 9457 Problem Details response models.

Every failed Campus ID request answers with a ``ProblemDetails`` body. The
``type`` URI ends with the ``ErrorCode`` value, so clients can branch on
``.../errors/email_not_verified`` without parsing ``detail``.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One offending field in a rejected request body.

    Example:
        >>> ErrorDetail(
        ...     field="confirm_password",
        ...     code="passwords_do_not_match",
        ...     message="Passwords do not match",
        ... )
    """

    field: str = Field(..., description="Request field that failed")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="What is wrong with the field")


class ProblemDetails(BaseModel):
    """Error body returned by every /api/v1 endpoint.

    ``errors`` is only present for validation failures. ``trace_id`` echoes
    the ``X-Trace-Id`` response header so a client report can be matched to
    server logs.

    Example:
        >>> ProblemDetails(
        ...     type="https://api.campusid.dev/errors/email_not_verified",
        ...     title="Email Not Verified",
        ...     status=403,
        ...     detail="Please verify your email before logging in",
        ...     instance="/api/v1/auth/login",
        ... )
    """

    type: str = Field(
        ...,
        description="Problem type URI, ending in the error code",
        examples=["https://api.campusid.dev/errors/invalid_credentials"],
    )
    title: str = Field(..., examples=["Authentication Failed"])
    status: int = Field(..., examples=[401])
    detail: str = Field(..., examples=["Invalid email or password"])
    instance: str = Field(
        ...,
        description="Request path that produced the problem",
        examples=["/api/v1/auth/login"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="Field-level failures (validation errors only)",
    )
    trace_id: str | None = Field(None, description="Request trace ID")
