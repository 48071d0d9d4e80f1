"""Main FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio_api.api.v1.router import api_router
from portfolio_api.config import settings
from portfolio_api.core.errors import UnhandledErrorMiddleware, register_exception_handlers
from portfolio_api.core.headers import SecurityHeadersMiddleware
from portfolio_api.core.rate_limiter import RateLimitMiddleware
from portfolio_api.db.mongodb import close_mongodb, init_mongodb
from portfolio_api.db.redis import close_redis, init_redis
from portfolio_api.models.base import utcnow

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown events."""
    # Startup
    logger.info("Starting up Portfolio API...")
    await init_mongodb()
    await init_redis()
    logger.info("All database connections established")

    yield

    # Shutdown
    logger.info("Shutting down Portfolio API...")
    await close_mongodb()
    await close_redis()
    logger.info("All database connections closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Portfolio API",
        description="Content and admin backend for a personal portfolio site",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Error Envelope Middleware (innermost)
    app.add_middleware(UnhandledErrorMiddleware)

    # Rate Limiting Middleware
    app.add_middleware(RateLimitMiddleware)

    # Security Headers Middleware
    app.add_middleware(SecurityHeadersMiddleware)

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
        max_age=86400,
    )

    # Include API routers
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/health", tags=["Health"], include_in_schema=False)
    @app.get(f"{settings.API_PREFIX}/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": utcnow().isoformat(),
            "service": settings.SERVICE_NAME,
        }

    return app


app = create_app()
