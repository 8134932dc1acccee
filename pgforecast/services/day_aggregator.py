"""Service for summarizing hourly metrics into daily outlooks."""
from datetime import date
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

import pandas as pd

from pgforecast.config import BEST_WINDOW_MIN_SCORE, TOP_N_HOURS
from pgforecast.models.forecast import DaySummary, HourlyMetrics
from pgforecast.models.ratings import ThermalRating
from pgforecast.models.tuning import DEFAULT_TUNING, TuningConfig
from pgforecast.services.estimators import calc_xc_potential
from pgforecast.utils.angles import degrees_to_compass

T = TypeVar("T")


class DayAggregator:
    """Service for building day summaries from hourly metrics.

    The day score is the rounded average of the best few hours rather than
    the single best hour, so a one-hour spike does not make a good day.
    Hourly metrics are expected to be pre-filtered to daylight hours.
    """

    def __init__(self, tuning: TuningConfig = DEFAULT_TUNING, top_n: int = TOP_N_HOURS):
        """
        Initialize the aggregator.

        Args:
            tuning: Tuning snapshot used to recompute the day's XC potential
            top_n: Number of best hourly scores averaged into the day score
        """
        self.tuning = tuning
        self.top_n = top_n

    def top_n_average(self, scores: Iterable[int]) -> int:
        """
        Rounded integer average of the highest ``top_n`` scores.

        Ties round up (integer division after adding half the count).
        Uses fewer scores when fewer are available; 0 for no scores.
        """
        best = pd.Series(list(scores), dtype="int64").nlargest(self.top_n)
        count = len(best)
        if count == 0:
            return 0
        return (int(best.sum()) + count // 2) // count

    def summarize(self, day: date, metrics: Sequence[HourlyMetrics]) -> DaySummary:
        """
        Build the summary for one calendar day.

        Args:
            day: The calendar date
            metrics: That day's hourly metrics

        Returns:
            DaySummary; an all-zero summary when ``metrics`` is empty
        """
        if len(metrics) == 0:
            return DaySummary(date=day)

        df = pd.DataFrame({
            "wind_speed": [m.wind_speed for m in metrics],
            "wind_direction": [m.wind_direction for m in metrics],
            "wind_gusts": [m.wind_gusts for m in metrics],
            "precip_probability": [m.precip_probability for m in metrics],
            "cape": [m.cape for m in metrics],
            "cloudbase_ft": [m.cloudbase_ft for m in metrics],
            "flyability_score": [m.flyability_score for m in metrics],
        })
        hours = len(df)

        avg_wind = float(df["wind_speed"].sum()) / hours
        # Arithmetic, not circular, mean: 350° and 10° average to 180°.
        avg_dir = float(df["wind_direction"].sum()) / hours
        avg_cloudbase = int(df["cloudbase_ft"].sum()) // hours
        max_cape = max(0.0, float(df["cape"].max()))

        best_thermal = ThermalRating.NONE
        for m in metrics:
            if m.thermal_rating.rank > best_thermal.rank:
                best_thermal = m.thermal_rating

        return DaySummary(
            date=day,
            avg_wind_speed=avg_wind,
            avg_wind_direction=avg_dir,
            wind_dir_str=degrees_to_compass(avg_dir),
            max_gusts=max(0.0, float(df["wind_gusts"].max())),
            thermal_rating=best_thermal,
            max_precip_prob=max(0.0, float(df["precip_probability"].max())),
            avg_cloudbase_ft=avg_cloudbase,
            best_score=self.top_n_average(df["flyability_score"]),
            xc_potential=calc_xc_potential(
                max_cape, avg_cloudbase, avg_wind, best_thermal, self.tuning
            ),
        )

    @staticmethod
    def group_by_day(
        records: Sequence[T], day_of: Callable[[T], date],
    ) -> Dict[date, List[T]]:
        """
        Group records by calendar date, keeping first-seen day order.

        Args:
            records: Hourly records in chronological order
            day_of: Maps a record to its calendar date (e.g. in local time)

        Returns:
            Ordered mapping of date to that day's records, order preserved
        """
        if len(records) == 0:
            return {}

        frame = pd.DataFrame({
            "date": [day_of(record) for record in records],
            "position": range(len(records)),
        })
        return {
            day: [records[i] for i in group["position"]]
            for day, group in frame.groupby("date", sort=False)
        }

    def summarize_days(self, metrics: Sequence[HourlyMetrics]) -> List[DaySummary]:
        """Group hourly metrics by calendar date and summarize each day, in order."""
        days = self.group_by_day(metrics, lambda m: m.time.date())
        return [self.summarize(day, day_metrics) for day, day_metrics in days.items()]

    @staticmethod
    def best_window(
        metrics: Iterable[HourlyMetrics],
        min_score: int = BEST_WINDOW_MIN_SCORE,
    ) -> Optional[HourlyMetrics]:
        """
        Find the single best hour.

        Returns the first hour with the highest flyability score, or None
        when that score is below ``min_score``.
        """
        best = None
        for m in metrics:
            if best is None or m.flyability_score > best.flyability_score:
                best = m
        if best is None or best.flyability_score < min_score:
            return None
        return best
