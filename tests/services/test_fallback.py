"""Tests for ordered fallback helpers."""

import pytest

from flowtrack.services.fallback import first_present, is_present


class TestIsPresent:
    """Tests for presence checks."""

    @pytest.mark.parametrize("value", [0, 0.0, "", False, "n/a", []])
    def test_falsy_values_are_present(self, value):
        assert is_present(value) is True

    def test_none_and_nan_are_absent(self):
        assert is_present(None) is False
        assert is_present(float("nan")) is False


class TestFirstPresent:
    """Tests for first-present selection."""

    def test_first_value_wins(self):
        assert first_present(6, 8) == 6

    def test_skips_none(self):
        assert first_present(None, 8) == 8

    def test_skips_nan(self):
        assert first_present(float("nan"), 8) == 8

    def test_zero_is_kept(self):
        assert first_present(0, 8) == 0

    def test_all_absent(self):
        assert first_present(None, float("nan")) is None

    def test_no_values(self):
        assert first_present() is None
