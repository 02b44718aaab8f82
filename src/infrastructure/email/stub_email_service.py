"""Stub email service for development and testing.

Logs the rendered message instead of delivering it. This is the only place
one-time codes appear in logs, so developers can complete verification
flows locally.
"""

from typing import Any

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import NotificationTemplate
from src.domain.errors import NotificationError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.email.templates import render_body


class StubEmailService:
    """Notification sender that writes messages to the log.

    Attributes:
        sent: Messages "sent" so far, newest last (inspected by tests).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize stub sender.

        Args:
            logger: Logger the messages are written to.
        """
        self._logger = logger
        self.sent: list[dict[str, Any]] = []

    async def send(
        self,
        to_email: str,
        subject: str,
        template: NotificationTemplate,
        data: dict[str, Any],
    ) -> Result[None, NotificationError]:
        """Render and log the message."""
        try:
            body = render_body(template, data)
        except KeyError as e:
            return Failure(
                error=NotificationError(
                    code=ErrorCode.NOTIFICATION_DELIVERY_FAILED,
                    message=f"Missing template field: {e.args[0]}",
                )
            )

        self.sent.append(
            {
                "to_email": to_email,
                "subject": subject,
                "template": template,
                "data": dict(data),
                "body": body,
            }
        )
        self._logger.info(
            "email_sent_stub",
            to_email=to_email,
            subject=subject,
            template=template.value,
            body=body,
        )
        return Success(value=None)
