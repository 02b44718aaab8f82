"""Authentication dependencies.

FastAPI dependencies that turn a bearer access token into the current
account, plus role and super-admin key guards.

Usage:
    @router.get("/profile")
    async def profile(
        current: CurrentAccount = Depends(get_current_account),
    ):
        return {"account_id": str(current.account_id)}

    @router.post("/students")
    async def provision(
        admin: CurrentAccount = Depends(require_admin),
    ):
        ...
"""

import secrets
from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.constants import SUPER_ADMIN_KEY_HEADER
from src.core.container import get_db_session, get_session_token_service
from src.core.result import Failure, Success
from src.domain.enums import AccountRole
from src.domain.protocols.session_token_protocol import SessionTokenProtocol

# auto_error=True returns 401 if no token provided
bearer_scheme = HTTPBearer(auto_error=True)

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentAccount:
    """Authenticated account resolved from the access token.

    Role and institution come from the stored account, not the token, so a
    role change takes effect on the next request.

    Attributes:
        account_id: Account identifier.
        email: Account email.
        role: Current role.
        institution_id: Owning institution.
    """

    account_id: UUID
    email: str
    role: AccountRole
    institution_id: UUID


async def get_current_account(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
    session_service: Annotated[
        SessionTokenProtocol, Depends(get_session_token_service)
    ],
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> CurrentAccount:
    """Resolve the current account from a bearer access token.

    Raises:
        HTTPException 401: Token invalid or expired, account missing, not
            active, or email not verified.
    """
    from src.infrastructure.persistence.repositories import AccountRepository

    match session_service.verify_access(credentials.credentials):
        case Failure(error=error):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=error.message,
                headers=_UNAUTHORIZED_HEADERS,
            )
        case Success(value=claims):
            pass

    account = await AccountRepository(session=session).find_by_id(claims.account_id)
    if account is None or not account.is_active or not account.email_verified:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Account not found or inactive",
            headers=_UNAUTHORIZED_HEADERS,
        )

    return CurrentAccount(
        account_id=account.id,
        email=account.email,
        role=account.role,
        institution_id=account.institution_id,
    )


async def require_admin(
    current: Annotated[CurrentAccount, Depends(get_current_account)],
) -> CurrentAccount:
    """Require the current account to be an institution admin.

    Raises:
        HTTPException 403: Caller is not an admin.
    """
    if current.role != AccountRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current


async def require_super_admin_key(
    x_super_admin_key: Annotated[
        str | None, Header(alias=SUPER_ADMIN_KEY_HEADER)
    ] = None,
) -> None:
    """Check the X-Super-Admin-Key header in constant time.

    Raises:
        HTTPException 401: Header missing or wrong.
    """
    if x_super_admin_key is None or not secrets.compare_digest(
        x_super_admin_key.encode(), settings.super_admin_key.encode()
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid super admin key",
        )
