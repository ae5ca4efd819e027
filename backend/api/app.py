"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import TaskdeskError
from shared.logging_config import configure_logging

from .middleware.auth import JwtAuthMiddleware
from .middleware.admin_access import AdminAccessMiddleware
from .routes import health
from modules.auth.routes import router as auth_router
from modules.users.routes import router as users_router
from modules.users.admin_routes import router as user_admin_router
from modules.todos.routes import router as todos_router
from modules.comments.admin_routes import router as comment_admin_router

logger = logging.getLogger(__name__)


async def handle_taskdesk_error(request: Request, exc: TaskdeskError) -> JSONResponse:
    """Render any TaskdeskError as its to_dict() body with its own status."""
    if exc.status_code >= 500:
        logger.warning(f"{exc.code} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    prefix = settings.api_prefix

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant todo tracking API with audited admin operations",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url=f"{prefix}/docs" if settings.debug else None,
        redoc_url=f"{prefix}/redoc" if settings.debug else None,
    )

    app.add_exception_handler(TaskdeskError, handle_taskdesk_error)

    # Middleware added last runs first: CORS, then token verification,
    # then admin access logging.
    app.add_middleware(
        AdminAccessMiddleware,
        admin_path_prefix=settings.admin_path_prefix,
    )
    app.add_middleware(
        JwtAuthMiddleware,
        public_paths=(
            f"{prefix}/auth/",
            f"{prefix}/health",
            f"{prefix}/ready",
            f"{prefix}/docs",
            f"{prefix}/redoc",
            "/openapi.json",
        ),
        admin_path_prefix=settings.admin_path_prefix,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Register routes
    app.include_router(health.router, prefix=prefix, tags=["health"])
    app.include_router(auth_router, prefix=f"{prefix}/auth", tags=["auth"])
    app.include_router(users_router, prefix=f"{prefix}/users", tags=["users"])
    app.include_router(todos_router, prefix=f"{prefix}/todos", tags=["todos"])
    app.include_router(user_admin_router, prefix=f"{prefix}/admin", tags=["admin"])
    app.include_router(comment_admin_router, prefix=f"{prefix}/admin", tags=["admin"])

    return app


# Application instance for uvicorn
app = create_app()
