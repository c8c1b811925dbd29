"""Convert vendor duration encodings to minutes."""

import math
import re

_NUMBER = re.compile(r"^\d+(\.\d+)?$")
_CLOCK = re.compile(r"^\d{1,2}:\d{2}(:\d{2})?$")
_HOURS = re.compile(r"(\d+(?:\.\d+)?)\s*h", re.IGNORECASE)
_MINUTES = re.compile(r"(\d+(?:\.\d+)?)\s*min", re.IGNORECASE)


def _round_half_up(value: float | None) -> int | None:
    """Round to whole minutes; overflowing digit strings are unreadable."""
    if value is None or not math.isfinite(value):
        return None
    return math.floor(value + 0.5)


def _clock_seconds(value: str) -> int:
    parts = [int(part) for part in value.split(":")]
    if len(parts) == 3:
        return parts[0] * 3600 + parts[1] * 60 + parts[2]
    return parts[0] * 3600 + parts[1] * 60


def clock_to_minutes(raw: str | None) -> float | None:
    """
    Convert raw seconds or H:MM[:SS] to fractional minutes.

    This is the activity export form; word forms like "1h" are not accepted.
    A two-part clock is hours:minutes, never minutes:seconds, so "45:12"
    is 2712 minutes.
    """
    value = (raw or "").strip()
    if not value:
        return None
    if _NUMBER.match(value):
        minutes = float(value) / 60
        return minutes if math.isfinite(minutes) else None
    if _CLOCK.match(value):
        return _clock_seconds(value) / 60
    return None


def to_minutes(raw: str | None) -> int | None:
    """
    Convert a sleep-style duration to whole minutes.

    Accepted forms: plain seconds ("27000"), clock time ("7:30" or
    "07:30:00", where a two-part clock is hours:minutes), hours ("7.5h",
    "7 h") and minutes ("450 min").

    Returns:
        Rounded minutes, or None for empty or unrecognized values
    """
    value = (raw or "").strip()
    if not value:
        return None

    if _NUMBER.match(value) or _CLOCK.match(value):
        return _round_half_up(clock_to_minutes(value))

    hours_match = _HOURS.search(value)
    if hours_match:
        return _round_half_up(float(hours_match.group(1)) * 60)

    minutes_match = _MINUTES.search(value)
    if minutes_match:
        return _round_half_up(float(minutes_match.group(1)))

    return None
