"""Tests for the daily insights endpoint."""

from datetime import date
from unittest.mock import MagicMock


def result_with(rows):
    result = MagicMock()
    result.mappings.return_value.all.return_value = rows
    return result


class TestDailyInsights:
    """Tests for GET /api/v1/insights/daily."""

    def test_returns_one_row_per_day(self, client, auth_headers):
        """Test that the window is dense even without data."""
        response = client.get("/api/v1/insights/daily?days=7", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["days"] == 7
        assert len(data["rows"]) == 7
        assert data["rows"][-1]["date"] == date.today().isoformat()
        assert all(row["session_count"] == 0 for row in data["rows"])

    def test_default_window(self, client, auth_headers):
        """Test the configured default window length."""
        response = client.get("/api/v1/insights/daily", headers=auth_headers)

        assert response.status_code == 200
        assert len(response.json()["rows"]) == 90

    def test_window_bounds(self, client, auth_headers):
        """Test that out-of-range windows are rejected."""
        assert client.get("/api/v1/insights/daily?days=0", headers=auth_headers).status_code == 422
        assert client.get("/api/v1/insights/daily?days=366", headers=auth_headers).status_code == 422

    def test_reconciles_sources(self, client, auth_headers, mock_db_session):
        """Test that manual values win and wearable values fill gaps."""
        today = date.today()
        mock_db_session.execute.side_effect = [
            result_with([{"date": today, "flow_rating": 4}]),
            result_with(
                [
                    {
                        "date": today,
                        "sleep_hours": 6,
                        "sleep_quality": None,
                        "caffeine_total_mg": 120,
                        "hrv_score": None,
                        "resting_hr": None,
                        "day_tags": ["sick"],
                    }
                ]
            ),
            result_with(
                [
                    {
                        "provider": "garmin",
                        "date": today,
                        "sleep_hours": 8,
                        "sleep_quality": 82,
                        "hrv_score": 48,
                        "resting_hr": 54,
                        "raw_payload": '{"provider": "garmin_csv", "training_minutes": 25}',
                    }
                ]
            ),
        ]

        response = client.get("/api/v1/insights/daily?days=3", headers=auth_headers)

        assert response.status_code == 200
        row = response.json()["rows"][-1]
        assert row["avg_flow"] == 4.0
        assert row["session_count"] == 1
        assert row["merged_sleep_hours"] == 6
        assert row["merged_hrv_score"] == 48
        assert row["merged_resting_hr"] == 54
        assert row["training_minutes"] == 25
        assert row["caffeine_total_mg"] == 120
        assert row["has_sick_tag"] is True

        _, params = mock_db_session.execute.call_args_list[0].args
        assert params["user_id"] == "test-user-id"
        assert (today - params["since"]).days == 2
