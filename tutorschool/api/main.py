"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, tutorschool.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tutorschool.api.deps.dependencies import get_service_cache
from tutorschool.configs import get_settings
from tutorschool.observability import configure_logging
from tutorschool.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    currencies_router,
    groups_router,
    health_router,
    lesson_sessions_router,
    schedule_router,
    students_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger("uvicorn")
    logger.info("Starting tutorschool API (%s)", settings.environment)

    yield

    # Shutdown
    get_service_cache().clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title="Tutor School API",
        description="Tutoring school scheduling with teacher schedule conflict checks",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(students_router, prefix="/api/v1")
    app.include_router(groups_router, prefix="/api/v1")
    app.include_router(lesson_sessions_router, prefix="/api/v1")
    app.include_router(schedule_router, prefix="/api/v1")
    app.include_router(currencies_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "tutorschool.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
