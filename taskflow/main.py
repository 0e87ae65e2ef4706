"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from taskflow.config import Settings, settings as default_settings
from taskflow.application.dto.base_dto import HealthCheckResponseDTO
from taskflow.infrastructure.container import build_container
from taskflow.infrastructure.db.database import create_tables
from taskflow.infrastructure.web.middleware.error_handler import (
    ErrorHandlerMiddleware,
    register_exception_handlers,
)
from taskflow.infrastructure.web.routers import (
    auth,
    users,
    tasks,
    categories,
    collaborations,
    reports,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    settings = settings or default_settings
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application lifecycle.
        Builds the service container and makes sure the schema exists.
        """
        # Startup
        logger.info(f"Starting {settings.api_title} v{settings.api_version}")
        logger.info(f"Environment: {settings.environment}")

        container = build_container(settings)
        await create_tables(container.engine)
        app.state.container = container

        yield

        # Shutdown
        logger.info("Shutting down application")
        await container.dispose()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=f"{settings.api_prefix}/redoc",
        openapi_url=f"{settings.api_prefix}/openapi.json",
        lifespan=lifespan
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom error handler middleware
    app.add_middleware(ErrorHandlerMiddleware, debug=settings.debug)
    register_exception_handlers(app)

    # Include routers
    app.include_router(
        auth.router,
        prefix=f"{settings.api_prefix}/auth",
        tags=["Authentication"]
    )
    app.include_router(
        users.router,
        prefix=f"{settings.api_prefix}/users",
        tags=["Users"]
    )
    app.include_router(
        tasks.router,
        prefix=f"{settings.api_prefix}/tasks",
        tags=["Tasks"]
    )
    app.include_router(
        categories.router,
        prefix=f"{settings.api_prefix}/categories",
        tags=["Categories"]
    )
    app.include_router(
        collaborations.router,
        prefix=f"{settings.api_prefix}/collaborations",
        tags=["Collaborations"]
    )
    app.include_router(
        reports.router,
        prefix=f"{settings.api_prefix}/reports",
        tags=["Reports"]
    )

    # Health check endpoint
    @app.get(f"{settings.api_prefix}/health", response_model=HealthCheckResponseDTO)
    async def health_check():
        """Health check endpoint for monitoring."""
        return HealthCheckResponseDTO(
            status="healthy",
            environment=settings.environment,
            version=settings.api_version
        )

    # Custom 404 handler
    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc):
        """Custom 404 error handler for unknown paths."""
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": f"The path {request.url.path} was not found",
                "status_code": 404
            }
        )

    return app


# Create the FastAPI app instance
app = create_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "taskflow.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development,
        log_level="debug" if default_settings.debug else "info",
    )
