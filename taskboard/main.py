"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard.config import Settings, get_settings
from taskboard.infrastructure.auth.jwt_handler import JWTHandler
from taskboard.infrastructure.auth.password_hasher import BcryptPasswordHasher
from taskboard.infrastructure.db.database import Database
from taskboard.infrastructure.web.middleware.auth_middleware import AuthenticationMiddleware
from taskboard.infrastructure.web.middleware.error_handler import (
    ErrorHandlerMiddleware,
    register_exception_handlers,
)
from taskboard.infrastructure.web.routers import auth, tasks, users

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=settings.effective_log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Setup and teardown operations.
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database

    # Startup
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")

    if settings.auto_create_tables:
        await database.create_all()

    yield

    # Shutdown
    logger.info("Shutting down application")
    await database.dispose()


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    if settings.is_production:
        settings.validate_environment()

    prefix = settings.api_prefix.rstrip("/")

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{prefix}/docs" if settings.debug else None,
        redoc_url=f"{prefix}/redoc" if settings.debug else None,
        openapi_url=f"{prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    # Shared components
    jwt_handler = JWTHandler(settings=settings)
    app.state.settings = settings
    app.state.database = Database(settings.database_url_async, echo=settings.debug)
    app.state.jwt_handler = jwt_handler
    app.state.password_hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)

    register_exception_handlers(app)

    # Add authentication middleware
    app.add_middleware(AuthenticationMiddleware, jwt_handler=jwt_handler, api_prefix=prefix)

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

    # Include routers
    app.include_router(auth.router, prefix=f"{prefix}/auth", tags=["Authentication"])
    app.include_router(tasks.router, prefix=f"{prefix}/tasks", tags=["Tasks"])
    app.include_router(users.router, prefix=f"{prefix}/users", tags=["Users"])

    # Root endpoint
    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": f"{prefix}/docs" if settings.debug else None,
            "health": f"{prefix}/health"
        }

    # Health check endpoint
    @app.get(f"{prefix}/health")
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "version": settings.api_version
        }

    return app


def run() -> None:
    """Console entry point: serve the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "taskboard.main:create_application",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.effective_log_level.lower(),
    )


if __name__ == "__main__":
    run()
