"""Heart rate export extractor."""

from flowtrack.services.ingestion.base import SourceExtractor, parse_number
from flowtrack.services.ingestion.columns import RESTING_HR_VOCABULARY, resolve_metric_key
from flowtrack.services.ingestion.csv_reader import CsvRow


class HeartRateExtractor(SourceExtractor):
    """Resting heart rate in beats per minute."""

    source = "heart_rate"

    def extract_fields(self, row: CsvRow) -> dict[str, float | int | None]:
        resting_key = resolve_metric_key(row, RESTING_HR_VOCABULARY)
        return {"resting_hr_bpm": parse_number(row.get(resting_key)) if resting_key else None}
