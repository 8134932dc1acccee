"""Tests for the day aggregator."""
from datetime import date, datetime, timedelta

import pytest

from pgforecast.models.ratings import ThermalRating, XCPotential
from pgforecast.services.day_aggregator import DayAggregator

DAY = date(2024, 6, 21)


def _at(hour: int, day: int = 21) -> datetime:
    return datetime(2024, 6, day, hour, 0)


class TestTopNAverage:
    """Tests for DayAggregator.top_n_average."""

    @pytest.mark.parametrize("scores,expected", [
        ([5, 4, 4, 3, 2], 4),  # not the single best hour
        ([2, 3, 5, 4, 4], 4),  # order does not matter
        ([5, 5, 4], 5),  # 14/3 rounds to 5
        ([4, 3, 3], 3),  # 10/3 rounds to 3
        ([5, 4], 5),  # 9/2 ties round up
        ([3], 3),
        ([], 0),
    ])
    def test_average(self, tuning, scores, expected):
        """Test rounded averaging of the top three scores."""
        assert DayAggregator(tuning).top_n_average(scores) == expected

    def test_custom_top_n(self, tuning):
        """Test averaging a different number of hours."""
        assert DayAggregator(tuning, top_n=1).top_n_average([5, 4, 4, 3, 2]) == 5


class TestSummarize:
    """Tests for DayAggregator.summarize."""

    def test_day_score_is_top_three_average(self, tuning, make_metrics):
        """Test that one excellent hour does not make an excellent day."""
        metrics = [make_metrics(_at(8 + i), score=s) for i, s in enumerate([5, 4, 4, 3, 2])]
        summary = DayAggregator(tuning).summarize(DAY, metrics)
        assert summary.best_score == 4

    def test_averages_and_maxima(self, tuning, make_metrics):
        """Test wind averages, maxima and integer cloudbase average."""
        metrics = [
            make_metrics(_at(10), wind_speed=10, wind_gusts=14, precip_probability=10, cloudbase_ft=1000),
            make_metrics(_at(11), wind_speed=12, wind_gusts=20, precip_probability=40, cloudbase_ft=1001),
            make_metrics(_at(12), wind_speed=14, wind_gusts=17, precip_probability=20, cloudbase_ft=1001),
        ]
        summary = DayAggregator(tuning).summarize(DAY, metrics)

        assert summary.date == DAY
        assert summary.avg_wind_speed == pytest.approx(12)
        assert summary.avg_wind_direction == pytest.approx(225)
        assert summary.wind_dir_str == "SW"
        assert summary.max_gusts == 20
        assert summary.max_precip_prob == 40
        assert summary.avg_cloudbase_ft == 1000  # 3002 // 3

    def test_direction_mean_is_arithmetic(self, tuning, make_metrics):
        """Test the known limitation: 350° and 10° average to south."""
        metrics = [
            make_metrics(_at(10), wind_direction=350),
            make_metrics(_at(11), wind_direction=10),
        ]
        summary = DayAggregator(tuning).summarize(DAY, metrics)
        assert summary.avg_wind_direction == pytest.approx(180)
        assert summary.wind_dir_str == "S"

    def test_best_thermal_by_rank(self, tuning, make_metrics):
        """Test that the strongest thermal rating of the day is kept."""
        metrics = [
            make_metrics(_at(10), thermal=ThermalRating.WEAK),
            make_metrics(_at(11), thermal=ThermalRating.STRONG),
            make_metrics(_at(12), thermal=ThermalRating.MODERATE),
        ]
        summary = DayAggregator(tuning).summarize(DAY, metrics)
        assert summary.thermal_rating == ThermalRating.STRONG

    def test_xc_recomputed_from_day_values(self, tuning, make_metrics):
        """Test that XC uses day max CAPE, mean cloudbase and wind, best thermal."""
        metrics = [
            make_metrics(_at(12), cape=1200, cloudbase_ft=5000, wind_speed=15,
                         thermal=ThermalRating.STRONG),
            make_metrics(_at(13), cape=0, cloudbase_ft=5000, wind_speed=15,
                         thermal=ThermalRating.NONE),
        ]
        summary = DayAggregator(tuning).summarize(DAY, metrics)
        assert summary.xc_potential == XCPotential.EPIC

    def test_empty_day(self, tuning):
        """Test that a day without hours yields a zeroed summary."""
        summary = DayAggregator(tuning).summarize(DAY, [])
        assert summary.date == DAY
        assert summary.best_score == 0
        assert summary.thermal_rating == ThermalRating.NONE
        assert summary.xc_potential == XCPotential.LOW

    def test_to_dict(self, tuning, make_metrics):
        """Test the summary wire shape."""
        summary = DayAggregator(tuning).summarize(DAY, [make_metrics(_at(12), score=4)])
        data = summary.to_dict()
        assert data["date"] == "2024-06-21"
        assert data["best_score"] == 4
        assert data["thermal_rating"] == "None"
        assert set(data) == {
            "date", "avg_wind_speed", "avg_wind_direction", "wind_dir_str",
            "max_gusts", "thermal_rating", "max_precip_prob",
            "avg_cloudbase_ft", "best_score", "xc_potential",
        }


class TestGroupByDay:
    """Tests for DayAggregator.group_by_day."""

    def test_first_seen_order(self):
        """Test that days keep the order they first appear in."""
        records = ["b1", "a1", "b2", "c1"]
        days = {"a": date(2024, 6, 20), "b": date(2024, 6, 22), "c": date(2024, 6, 21)}

        grouped = DayAggregator.group_by_day(records, lambda r: days[r[0]])

        assert list(grouped) == [date(2024, 6, 22), date(2024, 6, 20), date(2024, 6, 21)]
        assert grouped[date(2024, 6, 22)] == ["b1", "b2"]

    def test_custom_day_key(self, make_metrics):
        """Test grouping with a caller-supplied date, such as a shifted local day."""
        metrics = [make_metrics(_at(hour)) for hour in (10, 22, 23)]

        grouped = DayAggregator.group_by_day(
            metrics, lambda m: (m.time + timedelta(hours=2)).date()
        )

        assert [len(v) for v in grouped.values()] == [1, 2]
        assert list(grouped) == [date(2024, 6, 21), date(2024, 6, 22)]

    def test_empty(self):
        assert DayAggregator.group_by_day([], lambda r: r) == {}


class TestSummarizeDays:
    """Tests for DayAggregator.summarize_days."""

    def test_groups_by_calendar_date(self, tuning, make_metrics):
        """Test one summary per date, in order of appearance."""
        metrics = [
            make_metrics(_at(10, day=21), score=5),
            make_metrics(_at(11, day=21), score=5),
            make_metrics(_at(10, day=22), score=2),
        ]
        summaries = DayAggregator(tuning).summarize_days(metrics)

        assert [s.date for s in summaries] == [date(2024, 6, 21), date(2024, 6, 22)]
        assert [s.best_score for s in summaries] == [5, 2]

    def test_empty(self, tuning):
        """Test no metrics, no summaries."""
        assert DayAggregator(tuning).summarize_days([]) == []


class TestBestWindow:
    """Tests for DayAggregator.best_window."""

    def test_first_highest_hour(self, make_metrics):
        """Test that the earliest of equally good hours wins."""
        metrics = [
            make_metrics(_at(9), score=3),
            make_metrics(_at(10), score=5),
            make_metrics(_at(11), score=5),
            make_metrics(_at(12), score=2),
        ]
        best = DayAggregator.best_window(metrics)
        assert best.time == _at(10)

    def test_weak_days_not_highlighted(self, make_metrics):
        """Test that a best score below 3 is not surfaced."""
        metrics = [make_metrics(_at(9), score=2), make_metrics(_at(10), score=1)]
        assert DayAggregator.best_window(metrics) is None

    def test_empty(self):
        """Test no hours, no window."""
        assert DayAggregator.best_window([]) is None
