"""
Main FastAPI application entry point.

Wires the versioned API, system endpoints, trace middleware, CORS and the
RFC 9457 exception handlers. The lifespan creates tables, purges expired
one-time credentials, and disposes the database engine on shutdown.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    - Startup: create tables, purge expired one-time credentials
    - Shutdown: dispose the database engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    from src.core.container import get_clock, get_database, get_logger
    from src.infrastructure.persistence.repositories import (
        OneTimeCredentialRepository,
    )

    logger = get_logger()
    database = get_database()

    await database.create_all()
    async with database.get_session() as session:
        purged = await OneTimeCredentialRepository(session=session).delete_expired(
            get_clock().now()
        )
    logger.info(
        "application_started",
        environment=settings.environment.value,
        expired_credentials_purged=purged,
    )

    yield

    await database.close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Campus identity: institutions, accounts, verification and sessions",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Request correlation
app.add_middleware(TraceMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Super-Admin-Key", "X-Trace-Id"],
)

# RFC 9457 error responses
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(v1_router)
