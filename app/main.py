# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Users API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, settings
from app.dependencies import build_user_store
from app.exceptions import (
    UsersServiceError,
    http_exception_handler,
    unhandled_exception_handler,
    users_service_exception_handler,
    validation_exception_handler,
)
from app.routers import health, users
from app.routers.health import API_VERSION
from lib.user_store import UserStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings | None = None,
    user_store: UserStore | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the global settings)
        user_store: Store to serve; when omitted one is built at startup
            from STORE_BACKEND

    Returns:
        FastAPI: The configured application
    """
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: create the user store and attach it to app.state
        - Shutdown: close the store if this app created it
        """
        logger.info(f"Starting Users API in {app_settings.ENVIRONMENT} mode")
        owns_store = user_store is None
        store = build_user_store(app_settings) if owns_store else user_store
        app.state.user_store = store

        yield

        logger.info("Shutting down Users API")
        if owns_store:
            await store.close()

    app = FastAPI(
        title="Users API",
        description="CRUD service for users, protected by JWT bearer authentication.",
        version=API_VERSION,
        docs_url=None if app_settings.is_production else "/docs",
        redoc_url=None if app_settings.is_production else "/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "Create, read, update and delete users (bearer token required)",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )
    app.state.settings = app_settings

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list if app_settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log method, path, status and duration of every request."""
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(f"{request.method} {request.url.path} raised after {duration_ms:.1f}ms")
            raise
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.1f}ms)"
        )
        return response

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(UsersServiceError, users_service_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    # Health check endpoints
    app.include_router(
        health.router,
        prefix="/api",
        tags=["Health"]
    )

    # User CRUD endpoints
    app.include_router(
        users.router,
        prefix="/api/users",
        tags=["Users"]
    )

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Users API",
            "version": API_VERSION,
            "docs": None if app_settings.is_production else "/docs",
            "health": "/api/health",
        }

    return app


# Create FastAPI application
app = create_app()
