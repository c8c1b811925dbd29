"""Storage access for wearable snapshots and insights source data."""

import json
from datetime import date
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from flowtrack.core.logging import get_logger
from flowtrack.services.ingestion.pipeline import ExternalSnapshotRecord

logger = get_logger(__name__)


class FlowtrackStore:
    """
    Thin query layer over the Flowtrack tables.

    Errors from the database are not caught here; callers decide how a
    failed upsert or read surfaces to the user.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def upsert_external_snapshot(self, record: ExternalSnapshotRecord) -> None:
        """Insert or update one snapshot keyed on (user_id, provider, date)."""
        query = text("""
            INSERT INTO public.external_daily_snapshots (
                user_id, provider, date, sleep_hours, sleep_quality,
                hrv_score, resting_hr, raw_payload
            ) VALUES (
                :user_id, :provider, :date, :sleep_hours, :sleep_quality,
                :hrv_score, :resting_hr, CAST(:raw_payload AS jsonb)
            )
            ON CONFLICT (user_id, provider, date) DO UPDATE SET
                sleep_hours = EXCLUDED.sleep_hours,
                sleep_quality = EXCLUDED.sleep_quality,
                hrv_score = EXCLUDED.hrv_score,
                resting_hr = EXCLUDED.resting_hr,
                raw_payload = EXCLUDED.raw_payload,
                updated_at = NOW()
        """)

        await self.db.execute(
            query,
            {
                "user_id": record.user_id,
                "provider": record.provider,
                "date": date.fromisoformat(record.date),
                "sleep_hours": record.sleep_hours,
                "sleep_quality": record.sleep_quality,
                "hrv_score": record.hrv_score,
                "resting_hr": record.resting_hr,
                "raw_payload": json.dumps(record.raw_payload),
            },
        )

    async def fetch_sessions(self, user_id: str, since: date) -> list[dict[str, Any]]:
        """Flow sessions on or after a date."""
        query = text("""
            SELECT date, flow_rating
            FROM public.sessions
            WHERE user_id = :user_id
            AND date >= :since
            ORDER BY date ASC
        """)
        return await self._fetch_all(query, user_id, since)

    async def fetch_physio_logs(self, user_id: str, since: date) -> list[dict[str, Any]]:
        """Manual physio logs on or after a date."""
        query = text("""
            SELECT date, sleep_hours, sleep_quality, caffeine_total_mg,
                   hrv_score, resting_hr, day_tags
            FROM public.physio_logs
            WHERE user_id = :user_id
            AND date >= :since
            ORDER BY date ASC
        """)
        return await self._fetch_all(query, user_id, since)

    async def fetch_external_snapshots(self, user_id: str, since: date) -> list[dict[str, Any]]:
        """Imported snapshots from every provider on or after a date."""
        query = text("""
            SELECT provider, date, sleep_hours, sleep_quality, hrv_score,
                   resting_hr, raw_payload
            FROM public.external_daily_snapshots
            WHERE user_id = :user_id
            AND date >= :since
            ORDER BY date ASC, provider ASC
        """)
        rows = await self._fetch_all(query, user_id, since)
        for row in rows:
            if isinstance(row.get("raw_payload"), str):
                row["raw_payload"] = json.loads(row["raw_payload"])
        return rows

    async def _fetch_all(self, query, user_id: str, since: date) -> list[dict[str, Any]]:
        result = await self.db.execute(query, {"user_id": user_id, "since": since})
        return [dict(row) for row in result.mappings().all()]
