"""HRV status export extractor."""

from flowtrack.services.ingestion.base import SourceExtractor, parse_number
from flowtrack.services.ingestion.columns import HRV_VOCABULARY, resolve_any_key
from flowtrack.services.ingestion.csv_reader import CsvRow


class HrvExtractor(SourceExtractor):
    """Overnight HRV in milliseconds (average or last-night value)."""

    source = "hrv"

    def extract_fields(self, row: CsvRow) -> dict[str, float | int | None]:
        hrv_key = resolve_any_key(row, HRV_VOCABULARY)
        return {"hrv_ms": parse_number(row.get(hrv_key)) if hrv_key else None}
