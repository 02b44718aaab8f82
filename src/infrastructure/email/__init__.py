"""Email service implementations.

This package contains notification adapters:
- StubEmailService: logs messages (development/testing)
- SesEmailService: AWS SES delivery (production)
"""

from src.infrastructure.email.ses_email_service import SesEmailService
from src.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "SesEmailService",
    "StubEmailService",
]
