"""Tests for heuristic column resolution."""

from flowtrack.services.ingestion.columns import (
    HRV_VOCABULARY,
    RESTING_HR_VOCABULARY,
    SLEEP_DURATION_VOCABULARY,
    SLEEP_SCORE_VOCABULARY,
    resolve_any_key,
    resolve_date_key,
    resolve_metric_key,
    resolve_sleep_duration_key,
)


class TestResolveDateKey:
    """Tests for date column selection order."""

    def test_calendar_date_preferred(self):
        row = {"start": "2024-03-01T22:00:00", "calendar date": "2024-03-02"}
        assert resolve_date_key(row) == "calendar date"

    def test_value_with_year(self):
        row = {"score": "82", "day": "03/01/2024"}
        assert resolve_date_key(row) == "day"

    def test_value_with_iso_marker(self):
        row = {"score": "82", "when": "T22:00"}
        assert resolve_date_key(row) == "when"

    def test_header_containing_date(self):
        row = {"score": "82", "date": "N/A"}
        assert resolve_date_key(row) == "date"

    def test_no_candidate(self):
        assert resolve_date_key({"score": "82", "duration": "7:30"}) is None


class TestResolveMetricKey:
    """Tests for vocabulary-priority metric resolution."""

    def test_vocabulary_priority_over_column_order(self):
        row = {"duration": "1", "sleep duration": "2"}
        assert resolve_metric_key(row, SLEEP_DURATION_VOCABULARY) == "sleep duration"

    def test_all_substrings_must_match(self):
        row = {"score": "1", "sleep score": "2"}
        assert resolve_metric_key(row, SLEEP_SCORE_VOCABULARY) == "sleep score"

    def test_generic_fallback(self):
        row = {"date": "2024-03-01", "overall score": "80"}
        assert resolve_metric_key(row, SLEEP_SCORE_VOCABULARY) == "overall score"

    def test_case_insensitive(self):
        row = {"Resting Heart Rate": "55"}
        assert resolve_metric_key(row, RESTING_HR_VOCABULARY) == "Resting Heart Rate"

    def test_no_match_returns_none(self):
        assert resolve_metric_key({"date": "x"}, RESTING_HR_VOCABULARY) is None


class TestResolveAnyKey:
    """Tests for column-order resolution."""

    def test_first_column_matching_any_group(self):
        row = {"last night hrv": "50", "hrv 7d avg": "48"}
        assert resolve_any_key(row, HRV_VOCABULARY) == "last night hrv"

    def test_requires_hrv_and_qualifier(self):
        assert resolve_any_key({"hrv status": "balanced"}, HRV_VOCABULARY) is None


class TestResolveSleepDurationKey:
    """Tests for the sleep duration fallback."""

    def test_fallback_to_minutes_column(self):
        row = {"date": "2024-03-01", "sleep minutes": "420"}
        assert resolve_sleep_duration_key(row) == "sleep minutes"

    def test_no_fallback_without_sleep_header(self):
        assert resolve_sleep_duration_key({"date": "2024-03-01", "minutes": "420"}) is None
