"""Integration tests for notification senders.

Tests cover:
- Template rendering for OTP and activation bodies
- StubEmailService recording
- SesEmailService request shape and ClientError mapping (SES client stubbed)
"""

from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import NotificationTemplate
from src.infrastructure.email.ses_email_service import SesEmailService
from src.infrastructure.email.stub_email_service import StubEmailService
from src.infrastructure.email.templates import render_body

ACTIVATION_DATA = {
    "institution_name": "Massachusetts Institute of Technology",
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "ada@mit.edu",
    "student_id": "MIT-413000001",
    "default_password": "ada123",
    "activation_link": "http://localhost:8000/api/v1/auth/verify-email?token=t&email=e",
    "expire_hours": 24,
}


@pytest.mark.integration
class TestTemplates:
    """Test body rendering."""

    def test_otp_body(self):
        body = render_body(
            NotificationTemplate.PASSWORD_RESET_OTP,
            {"code": "004213", "expire_minutes": 10},
        )

        assert "004213" in body
        assert "10 minutes" in body

    def test_student_activation_body(self):
        body = render_body(NotificationTemplate.STUDENT_ACTIVATION, ACTIVATION_DATA)

        assert "MIT-413000001" in body
        assert "ada123" in body
        assert ACTIVATION_DATA["activation_link"] in body

    def test_missing_field_raises(self):
        with pytest.raises(KeyError):
            render_body(NotificationTemplate.EMAIL_VERIFICATION_OTP, {})


@pytest.mark.integration
class TestStubEmailService:
    """Test stub sender."""

    async def test_records_message(self):
        sender = StubEmailService(logger=Mock())

        result = await sender.send(
            to_email="ada@mit.edu",
            subject="Campus ID - Email Verification Code",
            template=NotificationTemplate.EMAIL_VERIFICATION_OTP,
            data={"code": "042137", "expire_minutes": 10},
        )

        assert result == Success(value=None)
        assert sender.sent[-1]["to_email"] == "ada@mit.edu"
        assert sender.sent[-1]["data"]["code"] == "042137"

    async def test_missing_field_is_failure(self):
        sender = StubEmailService(logger=Mock())

        result = await sender.send(
            to_email="ada@mit.edu",
            subject="x",
            template=NotificationTemplate.EMAIL_VERIFICATION_OTP,
            data={},
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOTIFICATION_DELIVERY_FAILED
        assert sender.sent == []


@pytest.mark.integration
class TestSesEmailService:
    """Test SES sender with a stubbed boto3 client."""

    def make_sender(self, ses_client: Mock) -> SesEmailService:
        return SesEmailService(
            region_name="us-east-1",
            from_email="no-reply@campus-id.dev",
            from_name="Campus ID",
            logger=Mock(),
            ses_client=ses_client,
        )

    async def test_sends_text_message(self):
        ses_client = Mock()
        ses_client.send_email.return_value = {"MessageId": "0100018e-abc"}

        result = await self.make_sender(ses_client).send(
            to_email="ada@mit.edu",
            subject="Campus ID - Password Reset Code",
            template=NotificationTemplate.PASSWORD_RESET_OTP,
            data={"code": "042137", "expire_minutes": 10},
        )

        assert result == Success(value=None)
        kwargs = ses_client.send_email.call_args.kwargs
        assert kwargs["Source"] == "Campus ID <no-reply@campus-id.dev>"
        assert kwargs["Destination"] == {"ToAddresses": ["ada@mit.edu"]}
        assert kwargs["Message"]["Subject"]["Data"] == "Campus ID - Password Reset Code"
        assert "042137" in kwargs["Message"]["Body"]["Text"]["Data"]

    async def test_client_error_is_failure(self):
        ses_client = Mock()
        ses_client.send_email.side_effect = ClientError(
            {"Error": {"Code": "MessageRejected", "Message": "Email address is not verified"}},
            "SendEmail",
        )

        result = await self.make_sender(ses_client).send(
            to_email="ada@mit.edu",
            subject="x",
            template=NotificationTemplate.PASSWORD_RESET_OTP,
            data={"code": "042137", "expire_minutes": 10},
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOTIFICATION_DELIVERY_FAILED
        assert result.error.message == "Email delivery failed"

    async def test_connection_error_is_failure(self):
        ses_client = Mock()
        ses_client.send_email.side_effect = EndpointConnectionError(
            endpoint_url="https://email.us-east-1.amazonaws.com"
        )

        result = await self.make_sender(ses_client).send(
            to_email="ada@mit.edu",
            subject="x",
            template=NotificationTemplate.PASSWORD_RESET_OTP,
            data={"code": "042137", "expire_minutes": 10},
        )

        assert isinstance(result, Failure)

    async def test_missing_field_skips_delivery(self):
        ses_client = Mock()

        result = await self.make_sender(ses_client).send(
            to_email="ada@mit.edu",
            subject="x",
            template=NotificationTemplate.EMAIL_VERIFICATION_OTP,
            data={},
        )

        assert isinstance(result, Failure)
        ses_client.send_email.assert_not_called()

    def test_builds_regional_client(self):
        with patch("boto3.client") as client_factory:
            SesEmailService(
                region_name="eu-west-1",
                from_email="no-reply@campus-id.dev",
                from_name="Campus ID",
                logger=Mock(),
            )

        client_factory.assert_called_once_with(
            "ses",
            region_name="eu-west-1",
            aws_access_key_id=None,
            aws_secret_access_key=None,
        )
