"""Plain-text bodies for outbound notifications.

Bodies are ``str.format_map`` templates keyed by NotificationTemplate.
Missing keys raise KeyError, which senders report as a NotificationError.

Data keys:
    EMAIL_VERIFICATION_OTP / PASSWORD_RESET_OTP:
        code, expire_minutes
    STUDENT_ACTIVATION:
        institution_name, first_name, last_name, email, student_id,
        default_password, activation_link, expire_hours
    LECTURER_ACTIVATION:
        same as student, with lecturer_id instead of student_id, plus
        academic_title and department
"""

from typing import Any

from src.domain.enums import NotificationTemplate

_OTP_FOOTER = (
    "This code will expire in {expire_minutes} minutes.\n\n"
    "If you didn't request this code, please ignore this email or contact "
    "your institution administrator.\n\n"
    "Campus ID System"
)

_BODIES: dict[NotificationTemplate, str] = {
    NotificationTemplate.EMAIL_VERIFICATION_OTP: (
        "Email Verification\n\n"
        "Please use the following code to verify your email address:\n\n"
        "    {code}\n\n" + _OTP_FOOTER
    ),
    NotificationTemplate.PASSWORD_RESET_OTP: (
        "Password Reset\n\n"
        "Please use the following code to reset your password:\n\n"
        "    {code}\n\n" + _OTP_FOOTER
    ),
    NotificationTemplate.STUDENT_ACTIVATION: (
        "{institution_name} - Student Account Activation\n\n"
        "Welcome {first_name} {last_name}!\n\n"
        "Your student account has been created. Your login credentials:\n\n"
        "    Student ID:       {student_id}\n"
        "    Email:            {email}\n"
        "    Default Password: {default_password}\n\n"
        "Activate your account by opening this link "
        "(valid for {expire_hours} hours):\n\n"
        "    {activation_link}\n\n"
        "You can log in with your Student ID or your email. You will be "
        "asked to change your password after your first login.\n\n"
        "{institution_name} - Campus ID System"
    ),
    NotificationTemplate.LECTURER_ACTIVATION: (
        "{institution_name} - Lecturer Account Activation\n\n"
        "Welcome {academic_title} {first_name} {last_name}!\n\n"
        "Your lecturer account for the {department} department has been "
        "created. Your login credentials:\n\n"
        "    Lecturer ID:      {lecturer_id}\n"
        "    Email:            {email}\n"
        "    Default Password: {default_password}\n\n"
        "Activate your account by opening this link "
        "(valid for {expire_hours} hours):\n\n"
        "    {activation_link}\n\n"
        "You can log in with your Lecturer ID or your email. You will be "
        "asked to change your password after your first login.\n\n"
        "{institution_name} - Campus ID System"
    ),
}


def render_body(template: NotificationTemplate, data: dict[str, Any]) -> str:
    """Render the plain-text body for ``template``.

    Raises:
        KeyError: If ``data`` lacks a placeholder the template uses.
    """
    return _BODIES[template].format_map(data)
