"""Schemas for the wearable import API."""

from pydantic import BaseModel, Field

from flowtrack.services.ingestion import DailySnapshot


class GarminImportResponse(BaseModel):
    """Result of a Garmin CSV import."""

    ok: bool = True
    days_processed: int = Field(description="Number of days upserted")
    sample_dates: list[str] = Field(default_factory=list)
    date_range_start: str | None = None
    date_range_end: str | None = None
    snapshots: list[DailySnapshot] = Field(
        default_factory=list,
        description="Leading snapshots of the import, capped by configuration",
    )
