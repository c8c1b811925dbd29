"""Health check endpoints for monitoring and orchestration."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from flowtrack.core.database import check_db_health
from flowtrack.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the service is running. Does not check dependencies.
    """
    return HealthResponse(status="healthy")


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness() -> JSONResponse:
    """
    Readiness probe endpoint.

    Returns 200 only if the database is reachable, 503 otherwise.
    """
    db_healthy = await check_db_health()
    status_code = 200 if db_healthy else 503

    return JSONResponse(
        status_code=status_code,
        content={
            "status": "ready" if db_healthy else "not ready",
            "checks": {
                "database": "ok" if db_healthy else "failed",
            },
        },
    )


@router.get("/health/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe: the process is up and serving requests."""
    return HealthResponse(status="alive")
