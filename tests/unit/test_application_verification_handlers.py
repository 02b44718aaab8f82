"""Unit tests for verification and session handlers.

Tests cover:
- VerifyEmailHandler: consume then activate
- ResendVerificationHandler: only for existing accounts
- RefreshSessionHandler: new pair from a valid refresh token
- LogoutHandler: always succeeds
- GetAccountProfileHandler: summary with institution name
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import (
    Logout,
    RefreshSession,
    ResendVerification,
    VerifyEmail,
)
from src.application.commands.handlers.logout_handler import LogoutHandler
from src.application.commands.handlers.refresh_session_handler import (
    RefreshSessionHandler,
)
from src.application.commands.handlers.resend_verification_handler import (
    ResendVerificationHandler,
)
from src.application.commands.handlers.verify_email_handler import VerifyEmailHandler
from src.application.queries.account_queries import GetAccountProfile
from src.application.queries.handlers.get_account_profile_handler import (
    GetAccountProfileHandler,
)
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.enums import AccountStatus, CredentialPurpose
from src.domain.errors import EXPIRED_OR_CONSUMED, INVALID_TOKEN
from src.domain.protocols.session_token_protocol import RefreshClaims, SessionTokens
from tests.conftest import make_account, make_institution


@pytest.mark.unit
class TestVerifyEmail:
    """Test email verification."""

    async def test_verification_activates_account(self):
        account = make_account(status=AccountStatus.PENDING, email_verified=False)
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = account
        token_service = AsyncMock()
        token_service.consume.return_value = Success(value=None)
        handler = VerifyEmailHandler(
            account_repo=account_repo, token_service=token_service, logger=Mock()
        )

        result = await handler.handle(VerifyEmail(email="ada@mit.edu", code=" 042137 "))

        assert result == Success(value=None)
        token_service.consume.assert_awaited_once_with(
            "ada@mit.edu", "042137", CredentialPurpose.EMAIL_VERIFICATION
        )
        assert account.email_verified is True
        assert account.status == AccountStatus.ACTIVE
        account_repo.update.assert_awaited_once_with(account)

    async def test_bad_code_leaves_account_untouched(self):
        account_repo = AsyncMock()
        token_service = AsyncMock()
        token_service.consume.return_value = Failure(error=EXPIRED_OR_CONSUMED)
        handler = VerifyEmailHandler(
            account_repo=account_repo, token_service=token_service, logger=Mock()
        )

        result = await handler.handle(VerifyEmail(email="ada@mit.edu", code="000000"))

        assert result == Failure(error=EXPIRED_OR_CONSUMED)
        account_repo.update.assert_not_awaited()

    async def test_consumed_code_without_account(self):
        account_repo = AsyncMock()
        account_repo.find_by_email.return_value = None
        token_service = AsyncMock()
        token_service.consume.return_value = Success(value=None)
        handler = VerifyEmailHandler(
            account_repo=account_repo, token_service=token_service, logger=Mock()
        )

        result = await handler.handle(VerifyEmail(email="ghost@mit.edu", code="042137"))

        assert isinstance(result.error, NotFoundError)


@pytest.mark.unit
class TestResendVerification:
    """Test verification OTP resend."""

    async def test_resend_issues_new_otp(self):
        account_repo = AsyncMock()
        account_repo.exists_by_email.return_value = True
        token_service = AsyncMock()
        handler = ResendVerificationHandler(
            account_repo=account_repo, token_service=token_service
        )

        result = await handler.handle(ResendVerification(email="ada@mit.edu"))

        assert result == Success(value=None)
        token_service.issue.assert_awaited_once_with(
            "ada@mit.edu", CredentialPurpose.EMAIL_VERIFICATION
        )

    async def test_unknown_email(self):
        account_repo = AsyncMock()
        account_repo.exists_by_email.return_value = False
        token_service = AsyncMock()
        handler = ResendVerificationHandler(
            account_repo=account_repo, token_service=token_service
        )

        result = await handler.handle(ResendVerification(email="ghost@mit.edu"))

        assert isinstance(result.error, NotFoundError)
        token_service.issue.assert_not_awaited()


@pytest.mark.unit
class TestRefreshSession:
    """Test session refresh."""

    async def test_refresh_issues_new_pair(self):
        account = make_account()
        account_repo = AsyncMock()
        account_repo.find_by_id.return_value = account
        session_service = Mock()
        session_service.verify_refresh.return_value = Success(
            value=RefreshClaims(account_id=account.id)
        )
        session_service.issue_session_pair.return_value = SessionTokens(
            access_token="a2", refresh_token="r2"
        )
        handler = RefreshSessionHandler(
            account_repo=account_repo, session_service=session_service
        )

        result = await handler.handle(RefreshSession(refresh_token="r1"))

        assert result == Success(value=SessionTokens(access_token="a2", refresh_token="r2"))
        account_repo.find_by_id.assert_awaited_once_with(account.id)

    async def test_invalid_refresh_token(self):
        session_service = Mock()
        session_service.verify_refresh.return_value = Failure(error=INVALID_TOKEN)
        handler = RefreshSessionHandler(
            account_repo=AsyncMock(), session_service=session_service
        )

        result = await handler.handle(RefreshSession(refresh_token="garbage"))

        assert result == Failure(error=INVALID_TOKEN)
        session_service.issue_session_pair.assert_not_called()

    async def test_deleted_account(self):
        account_repo = AsyncMock()
        account_repo.find_by_id.return_value = None
        session_service = Mock()
        session_service.verify_refresh.return_value = Success(
            value=RefreshClaims(account_id=uuid7())
        )
        handler = RefreshSessionHandler(
            account_repo=account_repo, session_service=session_service
        )

        result = await handler.handle(RefreshSession(refresh_token="r1"))

        assert isinstance(result.error, NotFoundError)


@pytest.mark.unit
class TestLogoutAndProfile:
    """Test logout and profile lookup."""

    async def test_logout_always_succeeds(self):
        logger = Mock()
        handler = LogoutHandler(logger=logger)

        result = await handler.handle(Logout(account_id=uuid7()))

        assert result == Success(value=None)
        logger.info.assert_called_once()

    async def test_profile_includes_institution_name(self):
        institution = make_institution()
        account = make_account(institution_id=institution.id, student_id="MIT-413000001")
        account_repo = AsyncMock()
        account_repo.find_by_id.return_value = account
        institution_repo = AsyncMock()
        institution_repo.find_by_id.return_value = institution
        handler = GetAccountProfileHandler(
            account_repo=account_repo, institution_repo=institution_repo
        )

        result = await handler.handle(GetAccountProfile(account_id=account.id))

        assert result.value.institution_name == institution.name
        assert result.value.student_id == "MIT-413000001"
        assert not hasattr(result.value, "password_hash")
