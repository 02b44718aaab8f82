"""Notification templates known to the email senders."""

from enum import Enum


class NotificationTemplate(str, Enum):
    """Templates rendered by notification adapters.

    Each value names a body template; adapters own the wording.
    """

    EMAIL_VERIFICATION_OTP = "email_verification_otp"
    PASSWORD_RESET_OTP = "password_reset_otp"
    STUDENT_ACTIVATION = "student_activation"
    LECTURER_ACTIVATION = "lecturer_activation"
