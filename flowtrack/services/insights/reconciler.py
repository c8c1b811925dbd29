"""Join flow sessions, manual physio logs and wearable snapshots per day."""

import math
from collections.abc import Iterable, Mapping
from datetime import date, timedelta
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from flowtrack.services.fallback import first_present

PARTNER_SLEEPOVER_TAG = "partner_sleepover"
SICK_TAG = "sick"
DEFAULT_PREFERRED_PROVIDER = "garmin"


class DailyInsightRow(BaseModel):
    """One calendar day of the insights window."""

    date: str
    avg_flow: float | None = None
    session_count: int = 0

    # Manual physio log
    sleep_hours: float | None = None
    sleep_quality: float | None = None
    caffeine_total_mg: float | None = None
    hrv_score: float | None = None

    # Wearable snapshot
    resting_hr: float | None = None
    training_minutes: float | None = None

    # Manual entry first, wearable value as fallback
    merged_sleep_hours: float | None = None
    merged_hrv_score: float | None = None
    merged_resting_hr: float | None = None

    has_partner_sleepover: bool = False
    has_sick_tag: bool = False


def _field(row: Any, name: str) -> Any:
    if row is None:
        return None
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def _date_key(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)[:10]


def _numeric(value: Any) -> float | None:
    """Coerce a stored metric to float; anything non-numeric is absent."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    return None if math.isnan(number) else number


def _sessions_by_date(sessions: Iterable[Any]) -> dict[str, list[float]]:
    by_date: dict[str, list[float]] = {}
    for session in sessions:
        day = _date_key(_field(session, "date"))
        if day is None:
            continue
        # Sessions without a rating still count, as a zero
        rating = _numeric(_field(session, "flow_rating"))
        by_date.setdefault(day, []).append(rating if rating is not None else 0.0)
    return by_date


def _physio_by_date(physio_logs: Iterable[Any]) -> dict[str, Any]:
    by_date: dict[str, Any] = {}
    for log in physio_logs:
        day = _date_key(_field(log, "date"))
        if day is not None:
            by_date[day] = log
    return by_date


def _external_by_date(snapshots: Iterable[Any], preferred_provider: str) -> dict[str, Any]:
    """Index snapshots by date; the preferred provider replaces any other."""
    preferred = preferred_provider.lower()
    by_date: dict[str, Any] = {}
    for snapshot in snapshots:
        day = _date_key(_field(snapshot, "date"))
        if day is None:
            continue
        current = by_date.get(day)
        if current is None:
            by_date[day] = snapshot
            continue
        provider = str(_field(snapshot, "provider") or "").lower()
        current_provider = str(_field(current, "provider") or "").lower()
        if provider == preferred and current_provider != preferred:
            by_date[day] = snapshot
    return by_date


def _training_minutes(snapshot: Any) -> float | None:
    minutes = _numeric(_field(snapshot, "training_minutes"))
    if minutes is not None:
        return minutes
    payload = _field(snapshot, "raw_payload")
    if isinstance(payload, Mapping):
        return _numeric(payload.get("training_minutes"))
    return None


def _has_tag(physio: Any, tag: str) -> bool:
    tags = _field(physio, "day_tags")
    return isinstance(tags, (list, tuple, set)) and tag in tags


def reconcile_daily_insights(
    sessions: Iterable[Any],
    physio_logs: Iterable[Any],
    external_snapshots: Iterable[Any],
    window_days: int,
    today: date | None = None,
    preferred_provider: str = DEFAULT_PREFERRED_PROVIDER,
) -> list[DailyInsightRow]:
    """
    Build one insights row per day over a trailing window.

    The window is [today - (window_days - 1), today], inclusive, and every
    day in it gets a row even without data. Manual physio values take
    precedence over wearable values in the merged_* fields.

    Args:
        sessions: Rows with date and flow_rating
        physio_logs: Rows with date, sleep_hours, sleep_quality,
            caffeine_total_mg, hrv_score and day_tags
        external_snapshots: Rows with provider, date, sleep_hours,
            hrv_score, resting_hr and training_minutes (or raw_payload)
        window_days: Number of days in the window
        today: Last day of the window, defaults to the local date
        preferred_provider: Provider that wins when a date has several

    Returns:
        Rows sorted ascending by date

    Raises:
        ValueError: If window_days is less than 1
    """
    if window_days < 1:
        raise ValueError(f"window_days must be at least 1, got {window_days}")

    end = today or date.today()
    start = end - timedelta(days=window_days - 1)

    ratings_by_date = _sessions_by_date(sessions)
    physio_lookup = _physio_by_date(physio_logs)
    external_lookup = _external_by_date(external_snapshots, preferred_provider)

    rows: list[DailyInsightRow] = []
    for offset in range(window_days):
        day = (start + timedelta(days=offset)).isoformat()
        ratings = ratings_by_date.get(day, [])
        physio = physio_lookup.get(day)
        external = external_lookup.get(day)

        sleep_hours = _numeric(_field(physio, "sleep_hours"))
        hrv_score = _numeric(_field(physio, "hrv_score"))

        rows.append(
            DailyInsightRow(
                date=day,
                avg_flow=sum(ratings) / len(ratings) if ratings else None,
                session_count=len(ratings),
                sleep_hours=sleep_hours,
                sleep_quality=_numeric(_field(physio, "sleep_quality")),
                caffeine_total_mg=_numeric(_field(physio, "caffeine_total_mg")),
                hrv_score=hrv_score,
                resting_hr=_numeric(_field(external, "resting_hr")),
                training_minutes=_training_minutes(external),
                merged_sleep_hours=first_present(
                    sleep_hours, _numeric(_field(external, "sleep_hours"))
                ),
                merged_hrv_score=first_present(
                    hrv_score, _numeric(_field(external, "hrv_score"))
                ),
                merged_resting_hr=first_present(
                    _numeric(_field(physio, "resting_hr")),
                    _numeric(_field(external, "resting_hr")),
                ),
                has_partner_sleepover=_has_tag(physio, PARTNER_SLEEPOVER_TAG),
                has_sick_tag=_has_tag(physio, SICK_TAG),
            )
        )

    return rows
