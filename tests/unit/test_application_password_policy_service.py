"""Unit tests for PasswordPolicyService and password helpers.

Tests cover:
- Reuse check against current password and last 5
- History rotation bound
- Compare-and-swap conflict handling
- New password validation (match, minimum length)
"""

from unittest.mock import AsyncMock

import pytest

from src.application.services.password_policy_service import (
    PasswordPolicyService,
    check_new_password,
    rotate_history,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, ValidationError
from src.core.result import Failure, Success
from src.domain.errors import PASSWORD_RECENTLY_REUSED, PASSWORD_SAME_AS_CURRENT
from tests.conftest import FakePasswordService, make_account


@pytest.fixture
def policy() -> PasswordPolicyService:
    return PasswordPolicyService(password_service=FakePasswordService())


@pytest.mark.unit
class TestCheckReuse:
    """Test reuse detection."""

    async def test_rejects_current_password(self, policy):
        violation = await policy.check_reuse("Current1", "hashed:Current1", [])
        assert violation is PASSWORD_SAME_AS_CURRENT

    async def test_rejects_each_of_last_five(self, policy):
        history = [f"hashed:Old{i}pass" for i in range(5)]
        for i in range(5):
            violation = await policy.check_reuse(f"Old{i}pass", "hashed:Now", history)
            assert violation is PASSWORD_RECENTLY_REUSED

    async def test_accepts_password_older_than_history(self, policy):
        history = [f"hashed:Old{i}pass" for i in range(6)]
        assert await policy.check_reuse("Old5pass", "hashed:Now", history) is None

    async def test_accepts_fresh_password_with_no_history(self, policy):
        assert await policy.check_reuse("Brand-new1", "hashed:Now", None) is None


@pytest.mark.unit
class TestRotateHistory:
    """Test history rotation."""

    def test_outgoing_hash_first(self):
        assert rotate_history(["b", "c"], "a") == ["a", "b", "c"]

    def test_history_never_exceeds_five(self):
        history: list[str] = []
        for i in range(12):
            history = rotate_history(history, f"h{i}")
            assert len(history) <= 5
        assert history == ["h11", "h10", "h9", "h8", "h7"]

    def test_none_history_treated_as_empty(self):
        assert rotate_history(None, "a") == ["a"]


@pytest.mark.unit
class TestReplacePassword:
    """Test the reuse-check-then-write flow."""

    async def test_successful_replace_updates_entity(self, policy):
        account = make_account(password_hash="hashed:Old-pass1", is_first_login=True)
        repo = AsyncMock()
        repo.update_password.return_value = True

        result = await policy.replace_password(
            account, "New-pass1", repo, clear_first_login=True
        )

        assert result == Success(value=None)
        repo.update_password.assert_awaited_once_with(
            account_id=account.id,
            expected_hash="hashed:Old-pass1",
            new_hash="hashed:New-pass1",
            new_history=["hashed:Old-pass1"],
            clear_first_login=True,
        )
        assert account.password_hash == "hashed:New-pass1"
        assert account.password_history == ["hashed:Old-pass1"]
        assert account.is_first_login is False

    async def test_reset_keeps_first_login_flag(self, policy):
        account = make_account(password_hash="hashed:Old-pass1", is_first_login=True)
        repo = AsyncMock()
        repo.update_password.return_value = True

        await policy.replace_password(account, "New-pass1", repo, clear_first_login=False)

        assert account.is_first_login is True

    async def test_reuse_skips_write(self, policy):
        account = make_account(password_hash="hashed:Same-pass1")
        repo = AsyncMock()

        result = await policy.replace_password(
            account, "Same-pass1", repo, clear_first_login=True
        )

        assert result == Failure(error=PASSWORD_SAME_AS_CURRENT)
        repo.update_password.assert_not_awaited()

    async def test_lost_race_returns_conflict(self, policy):
        account = make_account(password_hash="hashed:Old-pass1")
        repo = AsyncMock()
        repo.update_password.return_value = False

        result = await policy.replace_password(
            account, "New-pass1", repo, clear_first_login=False
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.CONCURRENT_UPDATE_CONFLICT
        assert account.password_hash == "hashed:Old-pass1"


@pytest.mark.unit
class TestCheckNewPassword:
    """Test new password validation."""

    def test_mismatch_reports_confirm_field(self):
        error = check_new_password("Password1", "Password2")
        assert isinstance(error, ValidationError)
        assert error.code == ErrorCode.PASSWORDS_DO_NOT_MATCH
        assert error.field == "confirm_password"

    def test_short_password_reports_given_field(self):
        error = check_new_password("short", "short", field="new_password")
        assert error is not None
        assert error.code == ErrorCode.PASSWORD_TOO_SHORT
        assert error.field == "new_password"

    def test_eight_characters_accepted(self):
        assert check_new_password("12345678", "12345678") is None

    def test_over_72_bytes_rejected(self):
        password = "a" * 73
        error = check_new_password(password, password, field="new_password")
        assert error is not None
        assert error.code == ErrorCode.PASSWORD_TOO_LONG
        assert error.field == "new_password"

    def test_byte_limit_counts_utf8_not_characters(self):
        # 25 characters, 75 bytes
        password = "密" * 25
        error = check_new_password(password, password)
        assert error is not None
        assert error.code == ErrorCode.PASSWORD_TOO_LONG

    def test_exactly_72_bytes_accepted(self):
        assert check_new_password("a" * 72, "a" * 72) is None
