"""Per-file extractors for wearable CSV exports."""

from flowtrack.services.ingestion.sources.activities import ActivitiesExtractor
from flowtrack.services.ingestion.sources.heart_rate import HeartRateExtractor
from flowtrack.services.ingestion.sources.hrv import HrvExtractor
from flowtrack.services.ingestion.sources.sleep import SleepExtractor

__all__ = [
    "ActivitiesExtractor",
    "HeartRateExtractor",
    "HrvExtractor",
    "SleepExtractor",
]
