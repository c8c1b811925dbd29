"""Heuristic column resolution for vendor CSV headers.

Vendor exports name the same metric many different ways, so columns are
located by substring matching against ordered vocabulary tables. Each
vocabulary is a tuple of substring groups; a header matches a group when
it contains every substring in it. Groups are tried in order, so more
specific phrasing goes first and generic fallbacks last. New header
variants are added to the tables, not to the resolution code.
"""

import re

from flowtrack.services.ingestion.csv_reader import CsvRow

Vocabulary = tuple[tuple[str, ...], ...]

SLEEP_DURATION_VOCABULARY: Vocabulary = (
    ("sleep duration",),
    ("total sleep time",),
    ("time asleep",),
    ("duration",),
    ("asleep time",),
    ("minutes asleep",),
    ("hours asleep",),
)

# Used only when SLEEP_DURATION_VOCABULARY finds nothing and the file
# has at least one header mentioning sleep.
SLEEP_DURATION_FALLBACK_VOCABULARY: Vocabulary = (
    ("duration",),
    ("minutes",),
)

SLEEP_SCORE_VOCABULARY: Vocabulary = (
    ("sleep", "score"),
    ("score",),
)

HRV_VOCABULARY: Vocabulary = (
    ("hrv", "avg"),
    ("hrv", "average"),
    ("hrv", "last"),
)

RESTING_HR_VOCABULARY: Vocabulary = (("resting",),)

ACTIVITY_START_VOCABULARY: Vocabulary = (
    ("start", "date"),
    ("start", "time"),
)

ACTIVITY_DURATION_VOCABULARY: Vocabulary = (("duration",),)

YEAR_COLUMN_VOCABULARY: Vocabulary = (("year",),)

_STANDALONE_YEAR = re.compile(r"\b\d{4}\b")


def resolve_metric_key(row: CsvRow, vocabulary: Vocabulary) -> str | None:
    """
    Find the header matching the highest-priority vocabulary group.

    Args:
        row: Parsed CSV row
        vocabulary: Ordered substring groups

    Returns:
        The matching header name, or None when nothing matches
    """
    keys = list(row.keys())
    for group in vocabulary:
        needles = [needle.lower() for needle in group]
        for key in keys:
            lowered = key.lower()
            if all(needle in lowered for needle in needles):
                return key
    return None


def resolve_date_key(row: CsvRow) -> str | None:
    """
    Pick the column holding the row's calendar date.

    Order: a "calendar date" header, then the first column whose value has
    a 4-digit year, then the first value with an ISO "T" marker, then any
    header containing "date".
    """
    keys = list(row.keys())

    for key in keys:
        lowered = key.lower()
        if "calendar" in lowered and "date" in lowered:
            return key

    for key in keys:
        if _STANDALONE_YEAR.search(row.get(key) or ""):
            return key

    for key in keys:
        if "T" in (row.get(key) or ""):
            return key

    for key in keys:
        if "date" in key.lower():
            return key

    return None


def resolve_sleep_duration_key(row: CsvRow) -> str | None:
    """Resolve the sleep duration column, with the generic fallback."""
    key = resolve_metric_key(row, SLEEP_DURATION_VOCABULARY)
    if key is not None:
        return key

    if any("sleep" in header.lower() for header in row):
        return resolve_any_key(row, SLEEP_DURATION_FALLBACK_VOCABULARY)
    return None


def resolve_any_key(row: CsvRow, vocabulary: Vocabulary) -> str | None:
    """Return the first header, in column order, matching any vocabulary group."""
    for key in row:
        lowered = key.lower()
        for group in vocabulary:
            if all(needle.lower() in lowered for needle in group):
                return key
    return None
