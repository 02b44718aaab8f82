"""Security infrastructure adapters.

This package contains security-related infrastructure implementations:
- Password hashing (bcrypt, off the event loop)
- Session token issuing/verification (JWT HS256, two secrets)
- One-time code generation (OTP digits and magic-link tokens)
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_session_service import JWTSessionService
from src.infrastructure.security.one_time_code_generator import SecureCodeGenerator

__all__ = [
    "BcryptPasswordService",
    "JWTSessionService",
    "SecureCodeGenerator",
]
