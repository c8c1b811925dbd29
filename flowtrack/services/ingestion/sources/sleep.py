"""Sleep export extractor."""

from flowtrack.services.ingestion.base import SourceExtractor, parse_number
from flowtrack.services.ingestion.columns import (
    SLEEP_SCORE_VOCABULARY,
    resolve_metric_key,
    resolve_sleep_duration_key,
)
from flowtrack.services.ingestion.csv_reader import CsvRow
from flowtrack.services.ingestion.durations import to_minutes


class SleepExtractor(SourceExtractor):
    """Sleep duration (minutes) and sleep score per night."""

    source = "sleep"

    def extract_fields(self, row: CsvRow) -> dict[str, float | int | None]:
        duration_key = resolve_sleep_duration_key(row)
        score_key = resolve_metric_key(row, SLEEP_SCORE_VOCABULARY)

        return {
            "sleep_duration_min": to_minutes(row.get(duration_key)) if duration_key else None,
            "sleep_score": parse_number(row.get(score_key)) if score_key else None,
        }
