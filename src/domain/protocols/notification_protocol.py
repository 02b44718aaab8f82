"""NotificationProtocol - port for outbound email.

Notifications are fire-and-forget. Adapters report delivery problems as a
``Failure`` instead of raising, and callers log the failure and carry on:
issuing a credential or provisioning an account never fails because mail
delivery did.
"""

from typing import Any, Protocol

from src.core.result import Result
from src.domain.enums import NotificationTemplate
from src.domain.errors.notification_errors import NotificationError


class NotificationProtocol(Protocol):
    """Notification sender protocol (port).

    Implementations:
        - StubEmailService: logs the message (development/testing)
        - SesEmailService: delivers through AWS SES

    Example:
        >>> await sender.send(
        ...     to_email="ada@mit.edu",
        ...     subject="Campus ID - Email Verification Code",
        ...     template=NotificationTemplate.EMAIL_VERIFICATION_OTP,
        ...     data={"code": "123456"},
        ... )
    """

    async def send(
        self,
        to_email: str,
        subject: str,
        template: NotificationTemplate,
        data: dict[str, Any],
    ) -> Result[None, NotificationError]:
        """Render ``template`` with ``data`` and deliver it.

        Returns:
            Success(None) when handed to the transport, Failure otherwise.
        """
        ...
