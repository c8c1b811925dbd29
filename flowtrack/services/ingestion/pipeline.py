"""Garmin CSV import pipeline: files in, daily snapshots out."""

from typing import Any

from pydantic import BaseModel

from flowtrack.core.logging import get_logger
from flowtrack.services.ingestion.base import DailyMetricPartial, DailySnapshot, SourceExtractor
from flowtrack.services.ingestion.merge import merge_partials
from flowtrack.services.ingestion.sources import (
    ActivitiesExtractor,
    HeartRateExtractor,
    HrvExtractor,
    SleepExtractor,
)

logger = get_logger(__name__)

GARMIN_PROVIDER = "garmin"
RAW_PAYLOAD_PROVIDER = "garmin_csv"


class GarminImportFiles(BaseModel):
    """Raw contents of the CSV files submitted in one import."""

    sleep_csv: str | None = None
    hrv_csv: str | None = None
    heart_rate_csv: str | None = None
    activities_csv: str | None = None

    def has_any(self) -> bool:
        return any(text for _, text in self.ordered_sources())

    def ordered_sources(self) -> list[tuple[SourceExtractor, str | None]]:
        """Sources in merge precedence order."""
        return [
            (SleepExtractor(), self.sleep_csv),
            (HrvExtractor(), self.hrv_csv),
            (HeartRateExtractor(), self.heart_rate_csv),
            (ActivitiesExtractor(), self.activities_csv),
        ]


class ExternalSnapshotRecord(BaseModel):
    """A daily snapshot in the shape stored for a provider."""

    user_id: str
    provider: str
    date: str
    sleep_hours: float | None = None
    sleep_quality: float | None = None
    hrv_score: float | None = None
    resting_hr: float | None = None
    raw_payload: dict[str, Any]


class ImportSummary(BaseModel):
    """What an import reports back: counts and sample dates, never row errors."""

    days_processed: int
    sample_dates: list[str]
    date_range_start: str | None = None
    date_range_end: str | None = None


def build_daily_snapshots(files: GarminImportFiles) -> list[DailySnapshot]:
    """
    Run every submitted file through its extractor and merge the results.

    Missing or empty files are skipped. Earlier sources win field
    conflicts: sleep, then HRV, then heart rate, then activities.

    Returns:
        Snapshots sorted ascending by date
    """
    partials: list[dict[str, DailyMetricPartial]] = []
    for extractor, csv_text in files.ordered_sources():
        if not csv_text:
            continue
        partials.append(extractor.extract(csv_text))

    snapshots = list(merge_partials(partials).values())
    logger.info(
        "Built daily snapshots",
        source_count=len(partials),
        day_count=len(snapshots),
    )
    return snapshots


def to_external_record(
    snapshot: DailySnapshot,
    user_id: str,
    provider: str = GARMIN_PROVIDER,
) -> ExternalSnapshotRecord:
    """Map a snapshot to the stored external snapshot columns."""
    return ExternalSnapshotRecord(
        user_id=user_id,
        provider=provider,
        date=snapshot.date,
        sleep_hours=(
            snapshot.sleep_duration_min / 60 if snapshot.sleep_duration_min is not None else None
        ),
        sleep_quality=snapshot.sleep_score,
        hrv_score=snapshot.hrv_ms,
        resting_hr=snapshot.resting_hr_bpm,
        raw_payload={
            "provider": RAW_PAYLOAD_PROVIDER,
            **snapshot.model_dump(exclude={"date"}),
        },
    )


def summarize_import(snapshots: list[DailySnapshot], sample_size: int = 10) -> ImportSummary:
    """Summarize an import by day count and a sample of dates."""
    return ImportSummary(
        days_processed=len(snapshots),
        sample_dates=[snapshot.date for snapshot in snapshots[:sample_size]],
        date_range_start=snapshots[0].date if snapshots else None,
        date_range_end=snapshots[-1].date if snapshots else None,
    )
