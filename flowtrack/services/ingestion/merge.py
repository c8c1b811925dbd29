"""Merge per-source partials into one snapshot per day."""

from flowtrack.services.fallback import first_present
from flowtrack.services.ingestion.base import METRIC_FIELDS, DailyMetricPartial, DailySnapshot


def merge_partials(
    partials: list[dict[str, DailyMetricPartial]],
) -> dict[str, DailySnapshot]:
    """
    Combine per-source partial maps into daily snapshots.

    For each field the first non-null value wins, in the order the maps
    are supplied. Values are never summed here. Every date mentioned by any
    source is emitted, even when all of its fields are null.

    Returns:
        Snapshots keyed by ISO date, in ascending date order
    """
    dates = sorted({day for partial in partials for day in partial})

    merged: dict[str, DailySnapshot] = {}
    for day in dates:
        contributions = [partial[day] for partial in partials if day in partial]
        merged[day] = DailySnapshot(
            date=day,
            **{
                field: first_present(*(getattr(c, field) for c in contributions))
                for field in METRIC_FIELDS
            },
        )

    return merged
