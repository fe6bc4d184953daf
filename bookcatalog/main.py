"""
Application entry point.

Creates the FastAPI application and wires together:
- The Database accessor (constructed here, released at shutdown)
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from bookcatalog.core.config import settings
from bookcatalog.infrastructure.database import Database
from bookcatalog.interfaces.books.router import router as books_router
from bookcatalog.interfaces.health import router as health_router
from bookcatalog.shared.errors.handlers import register_error_handlers
from bookcatalog.shared.logging import configure_logging
from bookcatalog.shared.security.headers import SecurityHeadersMiddleware
from bookcatalog.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare the books table, release the pool."""
    database: Database = app.state.database
    if settings.create_schema_on_startup:
        database.create_schema()

    yield

    database.dispose()


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        database: Database to serve from. Built from settings when omitted.
            Creating the engine does not open a connection.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.database = database or Database.from_settings(settings)

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(books_router)

    logger.info("Application created (environment=%s)", settings.environment)
    return app


app = create_app()
