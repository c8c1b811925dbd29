"""Service status endpoint."""

from fastapi import APIRouter, Depends

from flowtrack import __version__
from flowtrack.core.auth import verify_api_key
from flowtrack.dependencies import SettingsDep
from flowtrack.schemas.common import ServiceStatus

router = APIRouter(tags=["status"])


@router.get(
    "/status",
    response_model=ServiceStatus,
    dependencies=[Depends(verify_api_key)],
)
async def get_status(settings: SettingsDep) -> ServiceStatus:
    """
    Get service status and version information.

    Requires API key authentication.
    """
    return ServiceStatus(
        service="flowtrack-api",
        version=__version__,
        environment=settings.environment,
        status="operational",
    )
