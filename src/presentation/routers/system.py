"""System router for non-versioned application endpoints.

Root and health endpoints used by load balancers and uptime checks.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check."""
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """Health check endpoint.

    Returns:
        200 with ``{"status": "healthy"}`` when the database answers,
        503 with ``{"status": "unhealthy"}`` otherwise.
    """
    if await get_database().check_connection():
        return JSONResponse(
            content={"status": "healthy", "environment": settings.environment.value}
        )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy", "environment": settings.environment.value},
    )
