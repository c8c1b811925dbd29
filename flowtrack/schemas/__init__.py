"""Pydantic schemas for API requests and responses."""

from flowtrack.schemas.common import ServiceStatus
from flowtrack.schemas.health import HealthCheckDetail, HealthResponse, ReadinessResponse
from flowtrack.schemas.imports import GarminImportResponse
from flowtrack.schemas.insights import DailyInsightsResponse

__all__ = [
    "DailyInsightsResponse",
    "GarminImportResponse",
    "HealthCheckDetail",
    "HealthResponse",
    "ReadinessResponse",
    "ServiceStatus",
]
