"""Unit tests for password handlers.

Tests cover:
- RequestPasswordResetHandler: identical outcome for known/unknown emails
- ResetPasswordHandler: OTP consumption, reuse policy, first-login flag kept
- ChangePasswordHandler: current password check, first-login flag cleared
"""

from unittest.mock import AsyncMock, Mock

import pytest

from src.application.commands.auth_commands import (
    ChangePassword,
    RequestPasswordReset,
    ResetPassword,
)
from src.application.commands.handlers.change_password_handler import (
    ChangePasswordHandler,
)
from src.application.commands.handlers.request_password_reset_handler import (
    GENERIC_RESET_MESSAGE,
    RequestPasswordResetHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.services.password_policy_service import PasswordPolicyService
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError, ValidationError
from src.core.result import Failure, Success
from src.domain.enums import AccountRole, CredentialPurpose
from src.domain.errors import (
    EXPIRED_OR_CONSUMED,
    PASSWORD_RECENTLY_REUSED,
    PASSWORD_SAME_AS_CURRENT,
)
from tests.conftest import FakePasswordService, make_account


@pytest.fixture
def policy():
    return PasswordPolicyService(password_service=FakePasswordService())


@pytest.fixture
def account():
    return make_account(
        password_hash="hashed:Current-1",
        password_history=["hashed:Older-pw1", "hashed:Oldest-1"],
        is_first_login=True,
    )


@pytest.fixture
def account_repo(account):
    repo = AsyncMock()
    repo.find_by_email.return_value = account
    repo.find_by_id.return_value = account
    repo.update_password.return_value = True
    return repo


@pytest.fixture
def token_service():
    service = AsyncMock()
    service.consume.return_value = Success(value=None)
    return service


@pytest.mark.unit
class TestRequestPasswordReset:
    """Test forgot-password."""

    async def test_known_account_gets_code(self, account_repo, token_service, account):
        account_repo.find_by_login_identifier.return_value = account
        handler = RequestPasswordResetHandler(
            account_repo=account_repo, token_service=token_service, logger=Mock()
        )

        result = await handler.handle(
            RequestPasswordReset(email="ada@mit.edu", role=AccountRole.STUDENT)
        )

        assert result == Success(value=GENERIC_RESET_MESSAGE)
        token_service.issue.assert_awaited_once_with(
            "ada@mit.edu", CredentialPurpose.PASSWORD_RESET
        )

    async def test_unknown_account_gets_same_answer(self, account_repo, token_service):
        account_repo.find_by_login_identifier.return_value = None
        handler = RequestPasswordResetHandler(
            account_repo=account_repo, token_service=token_service, logger=Mock()
        )

        result = await handler.handle(
            RequestPasswordReset(email="nobody@mit.edu", role=AccountRole.STUDENT)
        )

        assert result == Success(value=GENERIC_RESET_MESSAGE)
        token_service.issue.assert_not_awaited()


@pytest.mark.unit
class TestResetPassword:
    """Test OTP password reset."""

    @pytest.fixture
    def handler(self, account_repo, token_service, policy):
        return ResetPasswordHandler(
            account_repo=account_repo,
            token_service=token_service,
            password_policy=policy,
            logger=Mock(),
        )

    def command(self, new_password="Fresh-pass1", confirm=None) -> ResetPassword:
        return ResetPassword(
            email="ada@mit.edu",
            code="042137",
            new_password=new_password,
            confirm_password=confirm or new_password,
        )

    async def test_reset_succeeds(self, handler, account_repo, token_service, account):
        result = await handler.handle(self.command())

        assert result == Success(value=None)
        token_service.consume.assert_awaited_once_with(
            "ada@mit.edu", "042137", CredentialPurpose.PASSWORD_RESET
        )
        kwargs = account_repo.update_password.await_args.kwargs
        assert kwargs["new_hash"] == "hashed:Fresh-pass1"
        assert kwargs["new_history"] == [
            "hashed:Current-1",
            "hashed:Older-pw1",
            "hashed:Oldest-1",
        ]
        assert kwargs["clear_first_login"] is False
        assert account.is_first_login is True

    async def test_mismatch_checked_before_consuming(self, handler, token_service):
        result = await handler.handle(self.command(confirm="Other-pass1"))

        assert isinstance(result.error, ValidationError)
        token_service.consume.assert_not_awaited()

    async def test_bad_code(self, handler, token_service, account_repo):
        token_service.consume.return_value = Failure(error=EXPIRED_OR_CONSUMED)

        result = await handler.handle(self.command())

        assert result == Failure(error=EXPIRED_OR_CONSUMED)
        account_repo.update_password.assert_not_awaited()

    async def test_unknown_account(self, handler, account_repo):
        account_repo.find_by_email.return_value = None

        result = await handler.handle(self.command())

        assert isinstance(result.error, NotFoundError)

    async def test_same_as_current_rejected(self, handler, account_repo):
        result = await handler.handle(self.command("Current-1"))

        assert result == Failure(error=PASSWORD_SAME_AS_CURRENT)
        account_repo.update_password.assert_not_awaited()

    async def test_recent_password_rejected(self, handler):
        result = await handler.handle(self.command("Oldest-1"))

        assert result == Failure(error=PASSWORD_RECENTLY_REUSED)

    async def test_concurrent_change_conflict(self, handler, account_repo):
        account_repo.update_password.return_value = False

        result = await handler.handle(self.command())

        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.CONCURRENT_UPDATE_CONFLICT


@pytest.mark.unit
class TestChangePassword:
    """Test authenticated password change."""

    @pytest.fixture
    def handler(self, account_repo, policy):
        return ChangePasswordHandler(
            account_repo=account_repo, password_policy=policy, logger=Mock()
        )

    async def test_change_clears_first_login(self, handler, account_repo, account):
        result = await handler.handle(
            ChangePassword(
                account_id=account.id,
                current_password="Current-1",
                new_password="Fresh-pass1",
                confirm_password="Fresh-pass1",
            )
        )

        assert result == Success(value=None)
        assert account_repo.update_password.await_args.kwargs["clear_first_login"] is True
        assert account.is_first_login is False
        assert account.password_hash == "hashed:Fresh-pass1"

    async def test_wrong_current_password(self, handler, account_repo, account):
        result = await handler.handle(
            ChangePassword(
                account_id=account.id,
                current_password="Guess-1",
                new_password="Fresh-pass1",
                confirm_password="Fresh-pass1",
            )
        )

        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.CURRENT_PASSWORD_INCORRECT
        assert result.error.field == "current_password"
        account_repo.update_password.assert_not_awaited()

    async def test_new_password_too_short(self, handler, account):
        result = await handler.handle(
            ChangePassword(
                account_id=account.id,
                current_password="Current-1",
                new_password="short",
                confirm_password="short",
            )
        )

        assert result.error.code == ErrorCode.PASSWORD_TOO_SHORT
        assert result.error.field == "new_password"

    async def test_reuse_of_history_rejected(self, handler, account):
        result = await handler.handle(
            ChangePassword(
                account_id=account.id,
                current_password="Current-1",
                new_password="Older-pw1",
                confirm_password="Older-pw1",
            )
        )

        assert result == Failure(error=PASSWORD_RECENTLY_REUSED)

    async def test_missing_account(self, handler, account_repo, account):
        account_repo.find_by_id.return_value = None

        result = await handler.handle(
            ChangePassword(
                account_id=account.id,
                current_password="Current-1",
                new_password="Fresh-pass1",
                confirm_password="Fresh-pass1",
            )
        )

        assert isinstance(result.error, NotFoundError)
