"""Health & Readiness Probes: root liveness text and readiness endpoint.

Invariants:
    - GET / always returns the liveness text if the process is up
    - GET /health/ready returns 503 if the database is unreachable
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse

import redhope.infrastructure.database as database

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

LIVENESS_TEXT = "redHope is hoping!!"


@router.get("/", response_class=PlainTextResponse)
async def root():
    return LIVENESS_TEXT


@router.get("/health/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "redhope-api", "version": "1.0.0"}


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe, including database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
