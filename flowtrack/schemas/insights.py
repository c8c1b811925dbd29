"""Schemas for the daily insights API."""

from pydantic import BaseModel

from flowtrack.services.insights import DailyInsightRow


class DailyInsightsResponse(BaseModel):
    """Dense per-day insights over a trailing window."""

    days: int
    rows: list[DailyInsightRow]
