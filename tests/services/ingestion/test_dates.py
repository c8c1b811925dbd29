"""Tests for date normalization."""

from datetime import date, timedelta

import pytest

from flowtrack.services.ingestion.dates import normalize_date


class TestNormalizeDate:
    """Tests for the supported vendor date formats."""

    @pytest.mark.parametrize("value", ["2024-03-01", "2010-01-01", "2100-12-31", "2024-02-29"])
    def test_iso_date_is_identity(self, value):
        assert normalize_date(value) == value

    def test_iso_datetime_naive(self):
        assert normalize_date("2024-03-01T07:15:00") == "2024-03-01"

    def test_iso_datetime_with_offset_uses_local_date(self):
        from datetime import datetime

        raw = "2024-03-01T12:00:00+00:00"
        expected = datetime.fromisoformat(raw).astimezone().date().isoformat()
        assert normalize_date(raw) == expected

    def test_iso_datetime_with_z_suffix(self):
        from datetime import datetime

        expected = datetime.fromisoformat("2024-03-01T12:00:00+00:00").astimezone().date().isoformat()
        assert normalize_date("2024-03-01T12:00:00Z") == expected

    @pytest.mark.parametrize("day", [13, 20, 31])
    def test_first_component_above_twelve_is_day(self, day):
        assert normalize_date(f"{day}/01/2024") == f"2024-01-{day:02d}"

    def test_month_first_when_ambiguous(self):
        assert normalize_date("03/04/2024") == "2024-03-04"

    def test_month_first_unambiguous(self):
        assert normalize_date("3/25/2024") == "2024-03-25"

    def test_year_first_slashes(self):
        assert normalize_date("2024/3/5") == "2024-03-05"

    def test_day_month_with_year_column(self):
        row = {"date": "15-03", "year": "2024"}
        assert normalize_date("15-03", row) == "2024-03-15"

    def test_day_month_slash_with_year_column(self):
        row = {"date": "3/5", "calendar year": "2023"}
        assert normalize_date("3/5", row) == "2023-03-05"

    def test_day_month_without_year_column(self):
        assert normalize_date("15-03", {"date": "15-03"}) is None

    @pytest.mark.parametrize("value", ["1999-05-01", "2101-01-01", "05/01/2009"])
    def test_implausible_year_rejected(self, value):
        assert normalize_date(value) is None

    @pytest.mark.parametrize("value", ["N/A", "", "   ", "yesterday", "March 1 2024", "02/30/2024"])
    def test_unrecognized_returns_none(self, value):
        assert normalize_date(value) is None

    def test_none_input(self):
        assert normalize_date(None) is None

    def test_sweep_of_iso_dates_is_identity(self):
        day = date(2023, 1, 1)
        for _ in range(400):
            assert normalize_date(day.isoformat()) == day.isoformat()
            day += timedelta(days=1)
