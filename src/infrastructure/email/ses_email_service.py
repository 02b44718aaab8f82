"""AWS SES email service.

Delivers notifications with ``boto3``'s SES client. The boto3 call is
blocking, so it runs in a worker thread. Delivery problems come back as
NotificationError; nothing is raised to the caller.
"""

import asyncio
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import NotificationTemplate
from src.domain.errors import NotificationError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.email.templates import render_body


class SesEmailService:
    """SES notification sender.

    Attributes:
        ses_client: Boto3 SES client.
        source: ``"Name <address>"`` used as the SES Source.

    Example:
        >>> sender = SesEmailService(
        ...     region_name="us-east-1",
        ...     from_email="no-reply@campus-id.dev",
        ...     from_name="Campus ID",
        ...     logger=get_logger(),
        ... )
    """

    def __init__(
        self,
        *,
        region_name: str,
        from_email: str,
        from_name: str,
        logger: LoggerProtocol,
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
        ses_client: Any | None = None,
    ) -> None:
        """Initialize SES sender.

        Args:
            region_name: AWS region hosting the verified sender identity.
            from_email: Verified sender address.
            from_name: Sender display name.
            logger: Structured logger.
            aws_access_key_id: Explicit key; None uses the default chain.
            aws_secret_access_key: Explicit secret; None uses the default chain.
            ses_client: Pre-built client (tests inject a stub).
        """
        self.source = f"{from_name} <{from_email}>"
        self._logger = logger
        self.ses_client = ses_client or boto3.client(
            "ses",
            region_name=region_name,
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
        )

    async def send(
        self,
        to_email: str,
        subject: str,
        template: NotificationTemplate,
        data: dict[str, Any],
    ) -> Result[None, NotificationError]:
        """Render ``template`` and send it through SES.

        Returns:
            Success(None) once SES accepted the message, otherwise
            Failure(NotificationError).
        """
        try:
            body = render_body(template, data)
        except KeyError as e:
            return self._failure(f"Missing template field: {e.args[0]}")

        try:
            response = await asyncio.to_thread(
                self.ses_client.send_email,
                Source=self.source,
                Destination={"ToAddresses": [to_email]},
                Message={
                    "Subject": {"Charset": "UTF-8", "Data": subject},
                    "Body": {"Text": {"Charset": "UTF-8", "Data": body}},
                },
            )
        except ClientError as e:
            self._logger.warning(
                "ses_delivery_failed",
                to_email=to_email,
                template=template.value,
                error_code=e.response.get("Error", {}).get("Code", "unknown"),
            )
            return self._failure("Email delivery failed")
        except BotoCoreError as e:
            self._logger.warning(
                "ses_delivery_failed",
                to_email=to_email,
                template=template.value,
                error_type=type(e).__name__,
            )
            return self._failure("Email delivery failed")

        self._logger.info(
            "email_sent",
            to_email=to_email,
            template=template.value,
            message_id=response.get("MessageId", "unknown"),
        )
        return Success(value=None)

    @staticmethod
    def _failure(message: str) -> Failure[NotificationError]:
        return Failure(
            error=NotificationError(
                code=ErrorCode.NOTIFICATION_DELIVERY_FAILED,
                message=message,
            )
        )
