"""Wearable CSV ingestion: tokenize, resolve columns, normalize and merge."""

from flowtrack.services.ingestion.base import (
    DailyMetricPartial,
    DailySnapshot,
    SourceExtractor,
)
from flowtrack.services.ingestion.merge import merge_partials
from flowtrack.services.ingestion.pipeline import (
    ExternalSnapshotRecord,
    GarminImportFiles,
    ImportSummary,
    build_daily_snapshots,
    summarize_import,
    to_external_record,
)

__all__ = [
    "DailyMetricPartial",
    "DailySnapshot",
    "ExternalSnapshotRecord",
    "GarminImportFiles",
    "ImportSummary",
    "SourceExtractor",
    "build_daily_snapshots",
    "merge_partials",
    "summarize_import",
    "to_external_record",
]
