"""One-time token engine.

Issues OTP codes and magic-link tokens scoped to (email, purpose), and
consumes them exactly once.

Issue flow:
1. Generate the code (6 digits or 32 alphanumerics)
2. Compute expiry from the clock (10 minutes / 24 hours)
3. Invalidate every unused credential for (email, purpose)
4. Persist the new credential
5. Hand the notification to the sender (result logged, never propagated)

Consume flow:
    A single conditional write flips ``used`` on a matching, unused,
    unexpired credential. Exactly one changed row means success.
"""

from datetime import timedelta
from typing import Any
from urllib.parse import urlencode

from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.entities.one_time_credential import OneTimeCredential
from src.domain.enums import CredentialKind, CredentialPurpose, NotificationTemplate
from src.domain.errors import EXPIRED_OR_CONSUMED, ExpiredOrConsumedError
from src.domain.protocols.clock_protocol import ClockProtocol
from src.domain.protocols.code_generator_protocol import OneTimeCodeGeneratorProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notification_protocol import NotificationProtocol
from src.domain.protocols.one_time_credential_repository import (
    OneTimeCredentialRepository,
)

EMAIL_VERIFICATION_SUBJECT = "Campus ID - Email Verification Code"
PASSWORD_RESET_SUBJECT = "Campus ID - Password Reset Code"

_DEFAULT_OTP_NOTIFICATION: dict[CredentialPurpose, tuple[NotificationTemplate, str]] = {
    CredentialPurpose.EMAIL_VERIFICATION: (
        NotificationTemplate.EMAIL_VERIFICATION_OTP,
        EMAIL_VERIFICATION_SUBJECT,
    ),
    CredentialPurpose.PASSWORD_RESET: (
        NotificationTemplate.PASSWORD_RESET_OTP,
        PASSWORD_RESET_SUBJECT,
    ),
}


class OneTimeTokenService:
    """Issue and consume one-time credentials.

    Example:
        >>> code = await token_service.issue(
        ...     "ada@mit.edu", CredentialPurpose.PASSWORD_RESET
        ... )
        >>> result = await token_service.consume(
        ...     "ada@mit.edu", code, CredentialPurpose.PASSWORD_RESET
        ... )
    """

    def __init__(
        self,
        credential_repo: OneTimeCredentialRepository,
        code_generator: OneTimeCodeGeneratorProtocol,
        notifier: NotificationProtocol,
        clock: ClockProtocol,
        logger: LoggerProtocol,
        otp_expire_minutes: int = 10,
        magic_link_expire_hours: int = 24,
    ) -> None:
        """Initialize token engine.

        Args:
            credential_repo: Persistence for one-time credentials.
            code_generator: Source of OTP digits and magic-link tokens.
            notifier: Outbound email sender.
            clock: Time source for expiry.
            logger: Structured logger.
            otp_expire_minutes: OTP lifetime.
            magic_link_expire_hours: Magic-link lifetime.
        """
        self._credential_repo = credential_repo
        self._code_generator = code_generator
        self._notifier = notifier
        self._clock = clock
        self._logger = logger
        self._otp_ttl = timedelta(minutes=otp_expire_minutes)
        self._magic_link_ttl = timedelta(hours=magic_link_expire_hours)

    async def issue(
        self,
        email: str,
        purpose: CredentialPurpose,
        kind: CredentialKind = CredentialKind.OTP,
        template: NotificationTemplate | None = None,
        subject: str | None = None,
        context: dict[str, Any] | None = None,
        link_base_url: str | None = None,
    ) -> str:
        """Issue a fresh credential and notify the subject.

        Args:
            email: Subject email.
            purpose: What the credential authorizes.
            kind: OTP (default) or MAGIC_LINK.
            template: Notification template. Defaults to the OTP template
                for ``purpose``.
            subject: Email subject. Defaults to the OTP subject for ``purpose``.
            context: Extra template data.
            link_base_url: When set, ``activation_link`` is added to the
                template data as ``{link_base_url}?token=...&email=...``.

        Returns:
            The issued code.
        """
        # Step 1: Generate code and expiry
        code = self._code_generator.generate(kind)
        now = self._clock.now()
        ttl = self._otp_ttl if kind == CredentialKind.OTP else self._magic_link_ttl

        # Step 2: Supersede earlier credentials for the pair
        await self._credential_repo.invalidate_unused(email, purpose)

        # Step 3: Persist new credential
        await self._credential_repo.save(
            OneTimeCredential(
                id=uuid7(),
                email=email,
                code=code,
                purpose=purpose,
                expires_at=now + ttl,
                used=False,
                created_at=now,
            )
        )
        self._logger.info(
            "one_time_credential_issued",
            email=email,
            purpose=purpose.value,
            kind=kind.value,
        )

        # Step 4: Notify (fire-and-forget)
        default_template, default_subject = _DEFAULT_OTP_NOTIFICATION[purpose]
        chosen_template = template or default_template
        data: dict[str, Any] = {
            **(context or {}),
            "code": code,
            "email": email,
            "expire_minutes": int(self._otp_ttl.total_seconds() // 60),
            "expire_hours": int(self._magic_link_ttl.total_seconds() // 3600),
        }
        if link_base_url is not None:
            data["activation_link"] = (
                f"{link_base_url}?{urlencode({'token': code, 'email': email})}"
            )

        result = await self._notifier.send(
            to_email=email,
            subject=subject or default_subject,
            template=chosen_template,
            data=data,
        )
        match result:
            case Failure(error=error):
                self._logger.warning(
                    "notification_failed",
                    email=email,
                    template=chosen_template.value,
                    error_code=error.code.value,
                    error_message=error.message,
                )

        return code

    async def consume(
        self,
        email: str,
        code: str,
        purpose: CredentialPurpose,
    ) -> Result[None, ExpiredOrConsumedError]:
        """Consume a credential exactly once.

        Returns:
            Success(None) if this call consumed it. Failure(EXPIRED_OR_CONSUMED)
            if the code is unknown, used, superseded, or expired.
        """
        consumed = await self._credential_repo.consume(
            email=email,
            code=code,
            purpose=purpose,
            now=self._clock.now(),
        )
        if not consumed:
            return Failure(error=EXPIRED_OR_CONSUMED)
        return Success(value=None)
