"""Daily insights: reconciliation of manual and wearable data."""

from flowtrack.services.insights.reconciler import DailyInsightRow, reconcile_daily_insights

__all__ = ["DailyInsightRow", "reconcile_daily_insights"]
