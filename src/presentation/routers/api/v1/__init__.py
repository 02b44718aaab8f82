"""API v1 routers.

Resources:
    /api/v1/auth        - Registration, login, verification, password reset
    /api/v1/users       - Authenticated self-service
    /api/v1/admin       - Institution administration (admin role)
    /api/v1/superadmin  - Institution management (X-Super-Admin-Key)
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1 import admin, auth, superadmin, users

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(auth.router)
v1_router.include_router(users.router)
v1_router.include_router(admin.router)
v1_router.include_router(superadmin.router)

__all__ = [
    "v1_router",
]
