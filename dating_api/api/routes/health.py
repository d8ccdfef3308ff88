"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 while the process is up
    - GET /health/ready returns 503 until the database answers
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from dating_api.config import Settings, get_settings
from dating_api.infrastructure import database

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_settings)):
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@router.get("/ready")
async def readiness_check():
    """Ready once the database behind db_manager accepts a query."""
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
