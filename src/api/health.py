"""Health check route — database liveness."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api.schemas import HealthResponse
from src.db.connection import Database, get_db

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")


def _unhealthy(detail: str) -> JSONResponse:
    body = HealthResponse(status="Unhealthy", database=detail, timestamp=datetime.now(timezone.utc))
    return JSONResponse(status_code=503, content=body.model_dump(mode="json", by_alias=True))


@router.get("/health", response_model=HealthResponse, tags=["health"])
def health(db: Database = Depends(get_db)):
    """Run `SELECT 1`; any failure is reported as 503 rather than raised."""
    logger.info("Health check requested")
    try:
        result = db.execute_scalar("SELECT 1")
    except Exception as e:
        logger.error("Health check failed: database connection error: %s", e)
        return _unhealthy(f"Error: {e}")

    if result != 1:
        logger.warning("Health check failed: database query did not return expected result")
        return _unhealthy("Query failed")

    return HealthResponse(status="Healthy", database="Connected", timestamp=datetime.now(timezone.utc))
