"""Normalize vendor date representations to ISO calendar dates."""

import re
from datetime import date, datetime

from flowtrack.core.logging import get_logger
from flowtrack.services.ingestion.columns import YEAR_COLUMN_VOCABULARY, resolve_metric_key
from flowtrack.services.ingestion.csv_reader import CsvRow

logger = get_logger(__name__)

MIN_YEAR = 2010
MAX_YEAR = 2100

_FIRST_YEAR = re.compile(r"(\d{4})")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_ISO_DATETIME = re.compile(r"^\d{4}-\d{2}-\d{2}T")
_SLASHED_DAY_MONTH_YEAR = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_SLASHED_YEAR_MONTH_DAY = re.compile(r"^(\d{4})/(\d{1,2})/(\d{1,2})$")
_DAY_MONTH_ONLY = re.compile(r"^(\d{1,2})[-/](\d{1,2})$")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _day_month(first: int, second: int) -> tuple[int, int]:
    """
    Order two leading numbers as (day, month).

    A first number above 12 can only be a day; otherwise the first number
    is taken as the month. Values like 03/04 stay ambiguous and are read
    month-first.
    """
    if first > 12:
        return first, second
    return second, first


def _iso(year: int, month: int, day: int) -> str | None:
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return None


def _parse_iso_datetime(value: str) -> str | None:
    candidate = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.date().isoformat()


def _normalize_with_year(value: str) -> str | None:
    year_match = _FIRST_YEAR.search(value)
    if not year_match:
        return None

    year = int(year_match.group(1))
    if year < MIN_YEAR or year > MAX_YEAR:
        logger.debug("Rejected date with implausible year", value=value, year=year)
        return None

    if _ISO_DATE.match(value):
        return value

    if _ISO_DATETIME.match(value):
        return _parse_iso_datetime(value)

    match = _SLASHED_DAY_MONTH_YEAR.match(value)
    if match:
        day, month = _day_month(int(match.group(1)), int(match.group(2)))
        return _iso(int(match.group(3)), month, day)

    match = _SLASHED_YEAR_MONTH_DAY.match(value)
    if match:
        return _iso(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    return None


def _normalize_from_year_column(value: str, row: CsvRow) -> str | None:
    match = _DAY_MONTH_ONLY.match(value)
    if not match:
        return None

    year_key = resolve_metric_key(row, YEAR_COLUMN_VOCABULARY)
    if year_key is None:
        return None

    year_match = _LEADING_INT.match(row.get(year_key) or "")
    if not year_match:
        return None

    day, month = _day_month(int(match.group(1)), int(match.group(2)))
    return _iso(int(year_match.group(1)), month, day)


def normalize_date(raw: str | None, row: CsvRow | None = None) -> str | None:
    """
    Convert a vendor date string to YYYY-MM-DD.

    Supported: ISO dates (passed through), ISO date-times (converted to the
    local calendar date when an offset is present), D/M/YYYY or M/D/YYYY,
    YYYY/M/D, and D-M or D/M completed from a "year" column of the same row.

    Args:
        raw: Cell value from the date column
        row: The full row, used to find a companion year column

    Returns:
        ISO date string, or None when the value is not recognized
    """
    if not raw:
        return None

    value = raw.strip()
    if not value:
        return None

    iso = _normalize_with_year(value)
    if iso is None and row is not None:
        iso = _normalize_from_year_column(value, row)

    if iso is None:
        logger.debug("Unsupported date format", value=value)

    return iso
