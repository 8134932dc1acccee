"""Tests for the forecast builder."""
import logging
from datetime import date, datetime, timedelta, timezone

import pytest

from pgforecast.services.forecast_builder import ForecastBuilder, resolve_timezone

START = datetime(2024, 6, 21, 0, 0)  # a Friday


@pytest.fixture
def hourly_run(make_observation):
    """Factory for consecutive hourly observations starting at midnight UTC."""

    def _run(hours: int, **overrides):
        return [
            make_observation(time=START + timedelta(hours=h), **overrides)
            for h in range(hours)
        ]

    return _run


class TestResolveTimezone:
    """Tests for resolve_timezone."""

    def test_known_zone(self):
        """Test lookup of an IANA zone."""
        tz = resolve_timezone("Europe/London")
        assert datetime(2024, 6, 21, 12, tzinfo=tz).utcoffset() == timedelta(hours=1)

    def test_unknown_zone_falls_back_to_utc(self, caplog):
        """Test fallback with a warning."""
        with caplog.at_level(logging.WARNING):
            assert resolve_timezone("Not/AZone") is timezone.utc
        assert "Not/AZone" in caplog.text

    def test_empty_is_utc(self):
        """Test that no zone means UTC."""
        assert resolve_timezone(None) is timezone.utc


class TestForecastBuilder:
    """Tests for ForecastBuilder."""

    def test_detailed_and_extended_split(self, tuning, ringstead, hourly_run):
        """Test that the first days are detailed and the rest summarized."""
        builder = ForecastBuilder(tuning=tuning, detailed_days=3)
        forecast = builder.build(ringstead, hourly_run(5 * 24))

        assert [d.date for d in forecast.detailed_days] == [
            date(2024, 6, 21), date(2024, 6, 22), date(2024, 6, 23),
        ]
        assert [s.date for s in forecast.extended_days] == [
            date(2024, 6, 24), date(2024, 6, 25),
        ]

    def test_daylight_hours_only(self, tuning, ringstead, hourly_run):
        """Test that only 08:00-18:00 local is kept."""
        forecast = ForecastBuilder(tuning=tuning).build(ringstead, hourly_run(24))

        hours = [m.time.hour for m in forecast.detailed_days[0].hours]
        assert hours == list(range(8, 19))

    def test_best_window_label(self, tuning, ringstead, hourly_run):
        """Test that the first top-scoring hour is labelled."""
        forecast = ForecastBuilder(tuning=tuning).build(ringstead, hourly_run(48))

        assert forecast.detailed_days[0].summary.best_score == 5
        assert forecast.best_window == "Fri 08:00"

    def test_no_best_window_on_poor_days(self, tuning, ringstead, hourly_run):
        """Test that a wet, off-direction forecast has no highlighted window."""
        observations = hourly_run(48, wind_direction=45, precipitation=3.0)
        forecast = ForecastBuilder(tuning=tuning).build(ringstead, observations)

        assert forecast.best_window == ""
        assert forecast.to_dict()["best_window"] == ""

    def test_best_window_ignores_extended_days(self, tuning, ringstead, make_observation):
        """Test that only detailed days compete for the best window."""
        observations = [
            make_observation(
                time=START + timedelta(hours=12), wind_direction=45, precipitation=3.0,
            ),
            make_observation(time=START + timedelta(days=1, hours=12)),
        ]
        forecast = ForecastBuilder(tuning=tuning, detailed_days=1).build(ringstead, observations)

        assert forecast.extended_days[0].best_score == 5
        assert forecast.best_window == ""

    def test_local_timezone(self, tuning, ringstead, hourly_run):
        """Test days and daylight hours follow the local zone."""
        builder = ForecastBuilder(tuning=tuning, timezone_name="Europe/London")
        forecast = builder.build(ringstead, hourly_run(24))

        first_day, second_day = forecast.detailed_days
        assert first_day.date == date(2024, 6, 21)
        assert len(first_day.hours) == 11
        first_hour = first_day.hours[0].time
        assert first_hour.hour == 8
        assert first_hour.utcoffset() == timedelta(hours=1)

        # 00:00 UTC on the 22nd is 01:00 local: no daylight hours
        assert second_day.date == date(2024, 6, 22)
        assert second_day.hours == ()
        assert second_day.summary.best_score == 0

    def test_extended_day_without_daylight_skipped(self, tuning, ringstead, hourly_run):
        """Test that an extended day with only night hours is dropped."""
        observations = hourly_run(24 + 6)
        forecast = ForecastBuilder(tuning=tuning, detailed_days=1).build(ringstead, observations)
        assert forecast.extended_days == ()

    def test_non_positive_detailed_days_uses_default(self, tuning):
        """Test that zero detailed days selects the default of three."""
        assert ForecastBuilder(tuning=tuning, detailed_days=0).detailed_days == 3

    def test_unsupported_units(self, tuning):
        """Test that unknown unit labels are rejected."""
        with pytest.raises(ValueError, match="furlongs"):
            ForecastBuilder(tuning=tuning, units="furlongs")

    def test_empty_observations(self, tuning, ringstead):
        """Test a forecast with no data."""
        forecast = ForecastBuilder(tuning=tuning).build(ringstead, [])
        assert forecast.detailed_days == ()
        assert forecast.extended_days == ()
        assert forecast.best_window == ""

    def test_to_dict(self, tuning, ringstead, hourly_run):
        """Test the forecast wire shape."""
        generated = datetime(2024, 6, 20, 18, 0, tzinfo=timezone.utc)
        builder = ForecastBuilder(tuning=tuning, units="knots")
        data = builder.build(ringstead, hourly_run(24), generated=generated).to_dict()

        assert set(data) == {
            "site", "generated", "units", "detailed_days", "extended_days", "best_window",
        }
        assert data["site"]["name"] == "Ringstead"
        assert data["site"]["wind_min"] == 210
        assert data["generated"] == "2024-06-20T18:00:00+00:00"
        assert data["units"] == "knots"
        assert data["detailed_days"][0]["date"] == "2024-06-21"
        assert len(data["detailed_days"][0]["hours"]) == 11
        assert data["detailed_days"][0]["summary"]["best_score"] == 5
