"""
Health check router.

Readiness endpoint for orchestrators: the service is only ready when
the books database answers a trivial query.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from bookcatalog.core.config import settings
from bookcatalog.domain.books.errors import PersistenceError
from bookcatalog.infrastructure.database import Database
from bookcatalog.interfaces.books.dependencies import get_database
from bookcatalog.interfaces.books.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
    summary="Readiness check",
    description="Returns 200 when the database is reachable, 503 otherwise.",
)
def health_check(database: Database = Depends(get_database)):
    """Run ``SELECT 1`` against the catalogue database."""
    try:
        database.execute("SELECT 1")
    except PersistenceError as exc:
        logger.warning("Readiness check failed: %s", exc.message)
        body = HealthResponse(status="unavailable", version=settings.version)
        return JSONResponse(status_code=503, content=body.model_dump())
    return HealthResponse(status="ok", version=settings.version)
