# 📄 File: sportclub/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the sport club backend, connects all the parts together
# and makes sure everything is ready before the first request arrives.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with lifespan hooks (database engine and session
# factory), middleware setup, router registration and the domain exception handler.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - sportclub.shared.config.settings
# - sportclub.shared.infrastructure.database (connection, session)
# - sportclub.api (middleware, v1 router)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - tests (httpx ASGITransport)

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from sportclub.api.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from sportclub.api.v1.router import api_v1_router
from sportclub.shared.config.settings import get_settings
from sportclub.shared.core.exceptions import SportClubException, is_client_error
from sportclub.shared.infrastructure.database.connection import close_database, init_database
from sportclub.shared.infrastructure.database.session import initialize_sessions, session_manager
from sportclub.shared.utils.logging import get_request_id, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Opens the database engine and session factory on startup and
    releases them on shutdown.
    """
    settings = get_settings()
    logger.info(f"🏅 {settings.APP_NAME} starting up ({settings.ENVIRONMENT})...")

    try:
        # SQLite has no migrations run against it; build the schema from the models
        await init_database(create_tables=settings.is_sqlite)
        logger.info("✅ Database connection initialized")

        initialize_sessions()
        logger.info("✅ Session manager initialized")

        logger.info(f"✅ {settings.APP_NAME} startup complete")

    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        raise

    try:
        yield  # Application is running
    finally:
        logger.info(f"🔄 {settings.APP_NAME} shutting down...")
        session_manager.reset()
        await close_database()
        logger.info("✅ Shutdown complete")


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with middleware,
    routers and exception handlers based on the current settings.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = get_settings()
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG and settings.is_development,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION (last added runs first)
    # =========================================================================

    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api/v1")

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(SportClubException)
    async def sport_club_exception_handler(
        request: Request,
        exc: SportClubException
    ) -> JSONResponse:
        """Handle custom Sport Club application exceptions."""
        if not is_client_error(exc):
            logger.error(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": {
                    "code": exc.error_code,
                    "message": exc.message,
                    "details": exc.details,
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "request_id": getattr(request.state, "request_id", None) or get_request_id() or None,
                }
            },
        )

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Run the application with uvicorn (``python -m sportclub.main`` or the
    ``sportclub`` console script).
    """
    settings = get_settings()
    uvicorn.run(
        "sportclub.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
