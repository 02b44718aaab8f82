"""Unit tests for OneTimeTokenService.

Tests cover:
- Issue order: supersede earlier credentials, then persist, then notify
- Expiry per kind (10 minutes OTP, 24 hours magic link)
- Activation link construction
- Notification failure is logged and ignored
- Consume success / failure mapping

Architecture:
- Mocked repository, generator and notifier
- Fixed clock
"""

from datetime import timedelta
from unittest.mock import AsyncMock, Mock, call

import pytest

from src.application.services.one_time_token_service import (
    EMAIL_VERIFICATION_SUBJECT,
    PASSWORD_RESET_SUBJECT,
    OneTimeTokenService,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import CredentialKind, CredentialPurpose, NotificationTemplate
from src.domain.errors import EXPIRED_OR_CONSUMED, NotificationError
from tests.conftest import FIXED_NOW, FixedClock


def build_service(
    code: str = "042137",
    notify_result=None,
    consume_result: bool = True,
):
    credential_repo = AsyncMock()
    credential_repo.consume.return_value = consume_result
    code_generator = Mock()
    code_generator.generate.return_value = code
    notifier = AsyncMock()
    notifier.send.return_value = notify_result or Success(value=None)
    logger = Mock()
    service = OneTimeTokenService(
        credential_repo=credential_repo,
        code_generator=code_generator,
        notifier=notifier,
        clock=FixedClock(),
        logger=logger,
    )
    return service, credential_repo, code_generator, notifier, logger


@pytest.mark.unit
class TestIssue:
    """Test credential issuing."""

    async def test_issue_returns_generated_code(self):
        service, _, code_generator, _, _ = build_service(code="004213")

        code = await service.issue("ada@mit.edu", CredentialPurpose.PASSWORD_RESET)

        assert code == "004213"
        code_generator.generate.assert_called_once_with(CredentialKind.OTP)

    async def test_issue_invalidates_before_saving(self):
        service, credential_repo, _, _, _ = build_service()
        manager = Mock()
        manager.attach_mock(credential_repo.invalidate_unused, "invalidate_unused")
        manager.attach_mock(credential_repo.save, "save")

        await service.issue("ada@mit.edu", CredentialPurpose.EMAIL_VERIFICATION)

        names = [c[0] for c in manager.mock_calls]
        assert names == ["invalidate_unused", "save"]
        credential_repo.invalidate_unused.assert_awaited_once_with(
            "ada@mit.edu", CredentialPurpose.EMAIL_VERIFICATION
        )

    async def test_otp_expires_after_ten_minutes(self):
        service, credential_repo, _, _, _ = build_service()

        await service.issue("ada@mit.edu", CredentialPurpose.EMAIL_VERIFICATION)

        saved = credential_repo.save.await_args.args[0]
        assert saved.expires_at == FIXED_NOW + timedelta(minutes=10)
        assert saved.created_at == FIXED_NOW
        assert saved.used is False
        assert saved.purpose == CredentialPurpose.EMAIL_VERIFICATION

    async def test_magic_link_expires_after_twenty_four_hours(self):
        service, credential_repo, _, _, _ = build_service(code="a" * 32)

        await service.issue(
            "ada@mit.edu",
            CredentialPurpose.EMAIL_VERIFICATION,
            kind=CredentialKind.MAGIC_LINK,
        )

        saved = credential_repo.save.await_args.args[0]
        assert saved.expires_at == FIXED_NOW + timedelta(hours=24)

    async def test_default_templates_follow_purpose(self):
        service, _, _, notifier, _ = build_service()

        await service.issue("ada@mit.edu", CredentialPurpose.EMAIL_VERIFICATION)
        await service.issue("ada@mit.edu", CredentialPurpose.PASSWORD_RESET)

        first, second = notifier.send.await_args_list
        assert first.kwargs["template"] == NotificationTemplate.EMAIL_VERIFICATION_OTP
        assert first.kwargs["subject"] == EMAIL_VERIFICATION_SUBJECT
        assert second.kwargs["template"] == NotificationTemplate.PASSWORD_RESET_OTP
        assert second.kwargs["subject"] == PASSWORD_RESET_SUBJECT
        assert second.kwargs["data"]["code"] == "042137"
        assert second.kwargs["data"]["expire_minutes"] == 10

    async def test_activation_link_carries_token_and_email(self):
        service, _, _, notifier, _ = build_service(code="Tok3n")

        await service.issue(
            "ada+cs@mit.edu",
            CredentialPurpose.EMAIL_VERIFICATION,
            kind=CredentialKind.MAGIC_LINK,
            template=NotificationTemplate.STUDENT_ACTIVATION,
            subject="Welcome",
            context={"first_name": "Ada"},
            link_base_url="http://localhost:8000/api/v1/auth/verify-email",
        )

        data = notifier.send.await_args.kwargs["data"]
        assert data["activation_link"] == (
            "http://localhost:8000/api/v1/auth/verify-email"
            "?token=Tok3n&email=ada%2Bcs%40mit.edu"
        )
        assert data["first_name"] == "Ada"
        assert notifier.send.await_args.kwargs["subject"] == "Welcome"

    async def test_notification_failure_is_logged_not_raised(self):
        failure = Failure(
            error=NotificationError(
                code=ErrorCode.NOTIFICATION_DELIVERY_FAILED,
                message="SES unavailable",
            )
        )
        service, credential_repo, _, _, logger = build_service(notify_result=failure)

        code = await service.issue("ada@mit.edu", CredentialPurpose.PASSWORD_RESET)

        assert code == "042137"
        credential_repo.save.assert_awaited_once()
        logger.warning.assert_called_once()
        assert logger.warning.call_args.args[0] == "notification_failed"

    async def test_issue_log_omits_code(self):
        service, _, _, _, logger = build_service(code="998877")

        await service.issue("ada@mit.edu", CredentialPurpose.PASSWORD_RESET)

        for logged in logger.info.call_args_list:
            assert "998877" not in str(logged)


@pytest.mark.unit
class TestConsume:
    """Test credential consumption."""

    async def test_consume_success(self):
        service, credential_repo, _, _, _ = build_service(consume_result=True)

        result = await service.consume(
            "ada@mit.edu", "042137", CredentialPurpose.PASSWORD_RESET
        )

        assert result == Success(value=None)
        assert credential_repo.consume.await_args == call(
            email="ada@mit.edu",
            code="042137",
            purpose=CredentialPurpose.PASSWORD_RESET,
            now=FIXED_NOW,
        )

    async def test_consume_miss_returns_expired_or_consumed(self):
        service, _, _, _, _ = build_service(consume_result=False)

        result = await service.consume(
            "ada@mit.edu", "000000", CredentialPurpose.PASSWORD_RESET
        )

        assert isinstance(result, Failure)
        assert result.error is EXPIRED_OR_CONSUMED
