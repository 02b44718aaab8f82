"""JWT session token service (adapter).

This service implements the SessionTokenProtocol using PyJWT with HMAC-SHA256.

Architecture:
    - Implements SessionTokenProtocol (no inheritance required)
    - Injected via dependency container

Security:
    - HS256 with separate secrets for access and refresh tokens, so a
      refresh token never verifies as an access token and vice versa
    - 256-bit secret minimum for each
    - Access token: 24 hours; refresh token: 7 days (configurable)
    - Unique JWT ID (jti) per token

Claims:
    access:  userId, userType, institutionId, email, iat, exp, jti
    refresh: userId, iat, exp, jti
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from uuid_extensions import uuid7

from src.core.constants import JWT_ALGORITHM, JWT_SECRET_MIN_LENGTH
from src.core.result import Failure, Result, Success
from src.domain.enums import AccountRole
from src.domain.errors import INVALID_TOKEN, InvalidTokenError
from src.domain.protocols.clock_protocol import ClockProtocol
from src.domain.protocols.session_token_protocol import (
    AccessClaims,
    RefreshClaims,
    SessionTokens,
)


class JWTSessionService:
    """JWT access/refresh token issuing and verification.

    Tokens are stateless; nothing is stored server-side.

    Usage:
        from src.core.container import get_session_token_service

        tokens = get_session_token_service().issue_session_pair(
            account_id=account.id,
            role=account.role,
            institution_id=account.institution_id,
            email=account.email,
        )
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        clock: ClockProtocol,
        access_expire_hours: int = 24,
        refresh_expire_days: int = 7,
    ) -> None:
        """Initialize JWT session service.

        Args:
            access_secret: Signing key for access tokens (>= 32 chars).
            refresh_secret: Signing key for refresh tokens (>= 32 chars).
            clock: Time source for iat/exp.
            access_expire_hours: Access token lifetime.
            refresh_expire_days: Refresh token lifetime.

        Raises:
            ValueError: If a secret is too short or both secrets are equal.
        """
        if (
            len(access_secret) < JWT_SECRET_MIN_LENGTH
            or len(refresh_secret) < JWT_SECRET_MIN_LENGTH
        ):
            msg = "JWT secret keys must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if access_secret == refresh_secret:
            msg = "Access and refresh token secrets must differ"
            raise ValueError(msg)

        self._access_secret = access_secret
        self._refresh_secret = refresh_secret
        self._clock = clock
        self._access_ttl = timedelta(hours=access_expire_hours)
        self._refresh_ttl = timedelta(days=refresh_expire_days)

    def issue_session_pair(
        self,
        account_id: UUID,
        role: AccountRole,
        institution_id: UUID,
        email: str,
    ) -> SessionTokens:
        """Sign a new access/refresh pair.

        Returns:
            SessionTokens with both compact JWS strings.
        """
        now = self._clock.now()

        access_payload: dict[str, Any] = {
            "userId": str(account_id),
            "userType": role.value,
            "institutionId": str(institution_id),
            "email": email,
            **self._time_claims(now, self._access_ttl),
        }
        refresh_payload: dict[str, Any] = {
            "userId": str(account_id),
            **self._time_claims(now, self._refresh_ttl),
        }

        return SessionTokens(
            access_token=jwt.encode(
                access_payload, self._access_secret, algorithm=JWT_ALGORITHM
            ),
            refresh_token=jwt.encode(
                refresh_payload, self._refresh_secret, algorithm=JWT_ALGORITHM
            ),
        )

    def verify_access(self, token: str) -> Result[AccessClaims, InvalidTokenError]:
        """Verify an access token and extract its claims.

        Returns:
            Success(AccessClaims) or Failure(INVALID_TOKEN) for any problem.
        """
        payload = self._decode(token, self._access_secret)
        if payload is None:
            return Failure(error=INVALID_TOKEN)

        try:
            claims = AccessClaims(
                account_id=UUID(payload["userId"]),
                role=AccountRole(payload["userType"]),
                institution_id=UUID(payload["institutionId"]),
                email=str(payload["email"]),
            )
        except (KeyError, ValueError, TypeError, AttributeError):
            return Failure(error=INVALID_TOKEN)

        return Success(value=claims)

    def verify_refresh(self, token: str) -> Result[RefreshClaims, InvalidTokenError]:
        """Verify a refresh token and extract the account ID."""
        payload = self._decode(token, self._refresh_secret)
        if payload is None:
            return Failure(error=INVALID_TOKEN)

        try:
            claims = RefreshClaims(account_id=UUID(payload["userId"]))
        except (KeyError, ValueError, TypeError, AttributeError):
            return Failure(error=INVALID_TOKEN)

        return Success(value=claims)

    def _decode(self, token: str, secret: str) -> dict[str, Any] | None:
        # PyJWT checks signature and claim presence; time checks use the clock
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                secret,
                algorithms=[JWT_ALGORITHM],
                options={
                    "require": ["exp", "iat"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError:
            # Bad signature or malformed
            return None

        expires_at = payload["exp"]
        if not isinstance(expires_at, int) or isinstance(expires_at, bool):
            return None
        if expires_at <= int(self._clock.now().timestamp()):
            return None
        return payload

    @staticmethod
    def _time_claims(now: datetime, ttl: timedelta) -> dict[str, Any]:
        issued_at = now.astimezone(UTC)
        return {
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + ttl).timestamp()),
            "jti": str(uuid7()),
        }
