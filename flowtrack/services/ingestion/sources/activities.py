"""Activities export extractor."""

from flowtrack.services.ingestion.base import DailyMetricPartial, SourceExtractor
from flowtrack.services.ingestion.columns import (
    ACTIVITY_DURATION_VOCABULARY,
    ACTIVITY_START_VOCABULARY,
    resolve_any_key,
    resolve_date_key,
    resolve_metric_key,
)
from flowtrack.services.ingestion.csv_reader import CsvRow
from flowtrack.services.ingestion.durations import clock_to_minutes


class ActivitiesExtractor(SourceExtractor):
    """
    Training minutes per day, summed over every activity on that day.

    Sleep, HRV and resting heart rate exports already hold one aggregate
    per day; an activities export holds one row per workout, so durations
    are added up instead of overwritten. A workout whose duration cannot be
    read still marks the day, contributing zero minutes.
    """

    source = "activities"

    def resolve_row_date_key(self, row: CsvRow) -> str | None:
        return resolve_any_key(row, ACTIVITY_START_VOCABULARY) or resolve_date_key(row)

    def extract_fields(self, row: CsvRow) -> dict[str, float | int | None]:
        duration_key = resolve_metric_key(row, ACTIVITY_DURATION_VOCABULARY)
        minutes = clock_to_minutes(row.get(duration_key)) if duration_key else None
        return {"training_minutes": minutes or 0.0}

    def accumulate(
        self,
        current: DailyMetricPartial | None,
        fields: dict[str, float | int | None],
    ) -> DailyMetricPartial:
        previous = current.training_minutes if current and current.training_minutes else 0.0
        return DailyMetricPartial(training_minutes=previous + (fields["training_minutes"] or 0.0))
