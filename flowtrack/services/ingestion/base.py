"""Shared models and base class for wearable CSV source extractors."""

import math
import re
from abc import ABC, abstractmethod

from pydantic import BaseModel

from flowtrack.core.logging import get_logger
from flowtrack.services.ingestion.columns import resolve_date_key
from flowtrack.services.ingestion.csv_reader import CsvRow, parse_csv
from flowtrack.services.ingestion.dates import normalize_date

logger = get_logger(__name__)

_GROUPED_THOUSANDS = re.compile(r"^[+-]?\d{1,3}(,\d{3})+(\.\d+)?$")

METRIC_FIELDS = (
    "sleep_duration_min",
    "sleep_score",
    "hrv_ms",
    "resting_hr_bpm",
    "training_minutes",
)


class DailyMetricPartial(BaseModel):
    """What a single source file could determine about one calendar date."""

    sleep_duration_min: int | None = None
    sleep_score: float | None = None
    hrv_ms: float | None = None
    resting_hr_bpm: float | None = None
    training_minutes: float | None = None


class DailySnapshot(DailyMetricPartial):
    """Merged wearable metrics for one calendar date."""

    date: str


def parse_number(raw: str | None) -> float | None:
    """
    Parse a numeric cell, tolerating thousands separators and a % suffix.

    Only grouped thousands ("1,234.5") lose their commas. A decimal comma
    ("42,5") is not a number here and yields None.
    """
    value = (raw or "").strip()
    if value.endswith("%"):
        value = value[:-1].strip()
    if not value:
        return None
    try:
        if _GROUPED_THOUSANDS.match(value):
            value = value.replace(",", "")
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


class SourceExtractor(ABC):
    """
    Base class for per-file extractors.

    Subclasses turn one row into partial metric fields; the base class
    handles tokenizing, date resolution and skipping rows whose date cannot
    be normalized. Rows for the same date overwrite each other unless a
    subclass overrides accumulate().
    """

    source: str

    def resolve_row_date_key(self, row: CsvRow) -> str | None:
        """Pick the column holding this row's date."""
        return resolve_date_key(row)

    @abstractmethod
    def extract_fields(self, row: CsvRow) -> dict[str, float | int | None]:
        """Return the metric fields this source contributes for one row."""

    def accumulate(
        self,
        current: DailyMetricPartial | None,
        fields: dict[str, float | int | None],
    ) -> DailyMetricPartial:
        """Fold one row's fields into the partial already held for its date."""
        if current is None:
            return DailyMetricPartial(**fields)
        return current.model_copy(update=fields)

    def extract(self, csv_text: str) -> dict[str, DailyMetricPartial]:
        """
        Extract per-date partial metrics from one CSV export.

        Args:
            csv_text: Raw file contents

        Returns:
            Mapping of ISO date to the partial metrics found for that date
        """
        partials: dict[str, DailyMetricPartial] = {}
        rows = parse_csv(csv_text)
        skipped = 0

        for row in rows:
            date_key = self.resolve_row_date_key(row)
            if date_key is None:
                skipped += 1
                continue

            iso_date = normalize_date(row.get(date_key), row)
            if iso_date is None:
                skipped += 1
                continue

            partials[iso_date] = self.accumulate(partials.get(iso_date), self.extract_fields(row))

        logger.debug(
            "Extracted wearable source",
            source=self.source,
            row_count=len(rows),
            date_count=len(partials),
            skipped_rows=skipped,
        )
        return partials
