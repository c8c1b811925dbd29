"""Wearable CSV import endpoints."""

import os
from typing import Annotated

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from flowtrack.core.logging import get_logger
from flowtrack.dependencies import CurrentUser, SettingsDep, StoreDep
from flowtrack.schemas.imports import GarminImportResponse
from flowtrack.services.ingestion import (
    GarminImportFiles,
    build_daily_snapshots,
    summarize_import,
    to_external_record,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/import", tags=["import"])

ALLOWED_EXTENSIONS = {".csv", ".txt"}
ALLOWED_CONTENT_TYPES = {
    "text/csv",
    "text/plain",  # Some browsers send CSV as text/plain
    "application/csv",
    "application/vnd.ms-excel",
    "application/octet-stream",
}


def validate_file(file: UploadFile) -> None:
    """Validate uploaded file type."""
    if file.filename:
        ext = os.path.splitext(file.filename)[1].lower()
        if ext and ext not in ALLOWED_EXTENSIONS:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"File type '{ext}' not supported. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}",
            )

    if file.content_type and file.content_type not in ALLOWED_CONTENT_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Content type '{file.content_type}' not supported.",
        )


async def read_csv_upload(file: UploadFile | None, max_size_mb: int) -> str | None:
    """Read an optional upload as text, enforcing type and size limits."""
    if file is None:
        return None

    validate_file(file)
    content = await file.read()

    if len(content) > max_size_mb * 1024 * 1024:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File '{file.filename}' exceeds maximum of {max_size_mb}MB",
        )

    # utf-8-sig drops the BOM some exporters prepend to the header line
    return content.decode("utf-8-sig", errors="replace")


@router.post("/garmin", response_model=GarminImportResponse)
async def import_garmin(
    user: CurrentUser,
    store: StoreDep,
    settings: SettingsDep,
    sleep: Annotated[UploadFile | None, File(description="Sleep export CSV")] = None,
    hrv: Annotated[UploadFile | None, File(description="HRV status export CSV")] = None,
    heart_rate: Annotated[UploadFile | None, File(description="Heart rate export CSV")] = None,
    activities: Annotated[UploadFile | None, File(description="Activities export CSV")] = None,
) -> GarminImportResponse:
    """
    Import Garmin Connect CSV exports as daily snapshots.

    Any subset of the four files may be sent. Rows whose date cannot be
    read are skipped without error; the response reports how many days
    were stored and a sample of their dates.
    """
    max_size_mb = settings.import_max_file_size_mb
    files = GarminImportFiles(
        sleep_csv=await read_csv_upload(sleep, max_size_mb),
        hrv_csv=await read_csv_upload(hrv, max_size_mb),
        heart_rate_csv=await read_csv_upload(heart_rate, max_size_mb),
        activities_csv=await read_csv_upload(activities, max_size_mb),
    )

    if not files.has_any():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="At least one non-empty CSV file is required",
        )

    snapshots = build_daily_snapshots(files)
    summary = summarize_import(snapshots, sample_size=settings.import_sample_size)

    logger.info(
        "Garmin import parsed",
        user_id=user.user_id,
        days_processed=summary.days_processed,
        sample_dates=summary.sample_dates,
    )

    try:
        for snapshot in snapshots:
            await store.upsert_external_snapshot(to_external_record(snapshot, user.user_id))
    except Exception as e:
        logger.error(
            "Garmin import failed",
            user_id=user.user_id,
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to import Garmin CSV",
        ) from e

    return GarminImportResponse(
        ok=True,
        days_processed=summary.days_processed,
        sample_dates=summary.sample_dates,
        date_range_start=summary.date_range_start,
        date_range_end=summary.date_range_end,
        snapshots=snapshots[: settings.import_response_snapshot_limit],
    )
