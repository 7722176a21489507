"""Health Checks — process liveness and order-database readiness.

Invariants:
    - GET /health/ answers 200 whenever the app can serve a request
    - GET /health/ready answers 503 until a session manager exists and SELECT 1 succeeds

Design Decisions:
    - db_manager read at request time: it is only set once the lifespan has run
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from order_api.infrastructure import database

router = APIRouter(prefix="/health", tags=["health"])

SERVICE_NAME = "order-api"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness():
    """503 with a reason while the order database cannot be reached."""
    manager = database.db_manager
    if manager is None:
        return _not_ready("database_not_initialized")
    if not await manager.health_check():
        return _not_ready("database_unavailable")
    return {"status": "ready", "checks": {"database": "healthy"}}


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
