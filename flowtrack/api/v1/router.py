"""V1 API router."""

from fastapi import APIRouter

from flowtrack.api.v1.imports import router as imports_router
from flowtrack.api.v1.insights import router as insights_router
from flowtrack.api.v1.status import router as status_router

router = APIRouter()

router.include_router(status_router)

# Wearable CSV import
router.include_router(imports_router)

# Daily insights
router.include_router(insights_router)
