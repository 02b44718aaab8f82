"""Session token protocol.

Access and refresh tokens are stateless signed claims. There is no
server-side revocation list; a token is valid while its signature checks
out and it has not expired. Logout is therefore client-side only.

Token Strategy:
    - Access token: 24 hours, carries account id, role, institution id, email
    - Refresh token: 7 days, carries account id only
    - Each token type is signed with its own secret
"""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.enums import AccountRole
from src.domain.errors import InvalidTokenError


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionTokens:
    """Access/refresh token pair returned on login and refresh."""

    access_token: str
    refresh_token: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessClaims:
    """Verified access token claims."""

    account_id: UUID
    role: AccountRole
    institution_id: UUID
    email: str


@dataclass(frozen=True, slots=True, kw_only=True)
class RefreshClaims:
    """Verified refresh token claims."""

    account_id: UUID


class SessionTokenProtocol(Protocol):
    """Session token issuing and verification interface.

    Implementations:
        - JWTSessionService: HS256 with distinct access/refresh secrets

    Usage:
        tokens = session_service.issue_session_pair(
            account_id=account.id,
            role=account.role,
            institution_id=account.institution_id,
            email=account.email,
        )
        match session_service.verify_refresh(tokens.refresh_token):
            case Success(value=claims):
                account_id = claims.account_id
            case Failure(error=error):
                ...
    """

    def issue_session_pair(
        self,
        account_id: UUID,
        role: AccountRole,
        institution_id: UUID,
        email: str,
    ) -> SessionTokens:
        """Sign a new access/refresh pair."""
        ...

    def verify_access(self, token: str) -> Result[AccessClaims, InvalidTokenError]:
        """Verify an access token against the access secret.

        Any failure (bad signature, expired, malformed) is reported as the
        same InvalidTokenError.
        """
        ...

    def verify_refresh(self, token: str) -> Result[RefreshClaims, InvalidTokenError]:
        """Verify a refresh token against the refresh secret."""
        ...
