"""Daily insights endpoints."""

from datetime import date, timedelta

from fastapi import APIRouter, Query

from flowtrack.core.logging import get_logger
from flowtrack.dependencies import CurrentUser, SettingsDep, StoreDep
from flowtrack.schemas.insights import DailyInsightsResponse
from flowtrack.services.insights import reconcile_daily_insights

logger = get_logger(__name__)

router = APIRouter(prefix="/insights", tags=["insights"])


@router.get("/daily", response_model=DailyInsightsResponse)
async def get_daily_insights(
    user: CurrentUser,
    store: StoreDep,
    settings: SettingsDep,
    days: int | None = Query(default=None, ge=1, le=365, description="Trailing window length"),
) -> DailyInsightsResponse:
    """
    Get one row per day joining flow sessions, physio logs and wearable data.

    Every day of the window is returned, including days without any data.
    Manually logged values take precedence over imported wearable values
    in the merged_* fields.
    """
    window_days = days or settings.insights_default_window_days
    today = date.today()
    since = today - timedelta(days=window_days - 1)

    sessions = await store.fetch_sessions(user.user_id, since)
    physio_logs = await store.fetch_physio_logs(user.user_id, since)
    external_snapshots = await store.fetch_external_snapshots(user.user_id, since)

    rows = reconcile_daily_insights(
        sessions,
        physio_logs,
        external_snapshots,
        window_days=window_days,
        today=today,
        preferred_provider=settings.insights_preferred_provider,
    )

    logger.info(
        "Daily insights built",
        user_id=user.user_id,
        window_days=window_days,
        session_count=len(sessions),
        physio_count=len(physio_logs),
        external_count=len(external_snapshots),
    )

    return DailyInsightsResponse(days=window_days, rows=rows)
