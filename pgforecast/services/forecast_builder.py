"""Service for turning a run of hourly observations into a site forecast."""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from attrs import evolve

from pgforecast.config import (
    BEST_WINDOW_FORMAT,
    DAYLIGHT_END_HOUR,
    DAYLIGHT_START_HOUR,
    DEFAULT_DETAILED_DAYS,
    DEFAULT_UNITS,
    SUPPORTED_UNITS,
)
from pgforecast.models.forecast import DayForecast, DaySummary, HourlyMetrics, SiteForecast
from pgforecast.models.site import Site
from pgforecast.models.tuning import DEFAULT_TUNING, TuningConfig
from pgforecast.models.weather import HourlyObservation
from pgforecast.services.day_aggregator import DayAggregator
from pgforecast.services.hourly_metrics import compute_hourly_metrics

logger = logging.getLogger(__name__)


def resolve_timezone(name: Optional[str]):
    """Look up an IANA timezone, falling back to UTC when it is unknown."""
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using UTC", name)
        return timezone.utc


class ForecastBuilder:
    """Builds a SiteForecast: detailed hourly days followed by an extended outlook."""

    def __init__(
        self,
        tuning: TuningConfig = DEFAULT_TUNING,
        detailed_days: int = DEFAULT_DETAILED_DAYS,
        timezone_name: Optional[str] = None,
        units: str = DEFAULT_UNITS,
    ):
        """
        Initialize the forecast builder.

        Args:
            tuning: Tuning snapshot shared by every computation
            detailed_days: Number of leading days reported hour by hour;
                values <= 0 select the default
            timezone_name: IANA zone used to split days and pick daylight hours
            units: Wind speed unit label of the observations

        Raises:
            ValueError: If units is not a supported unit label
        """
        if units not in SUPPORTED_UNITS:
            raise ValueError(
                f"Unsupported units {units!r}, expected one of {', '.join(SUPPORTED_UNITS)}"
            )
        self.tuning = tuning
        self.detailed_days = detailed_days if detailed_days > 0 else DEFAULT_DETAILED_DAYS
        self.tz = resolve_timezone(timezone_name)
        self.units = units
        self.aggregator = DayAggregator(tuning=tuning)

    def _to_local(self, timestamp: datetime) -> datetime:
        """Convert a provider timestamp to local time; naive means UTC."""
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return timestamp.astimezone(self.tz)

    def _daylight_metrics(
        self, site: Site, observations: Sequence[HourlyObservation],
    ) -> List[HourlyMetrics]:
        """Compute metrics for the daylight hours only, stamped with local time."""
        metrics = []
        for observation in observations:
            local_time = self._to_local(observation.time)
            if not DAYLIGHT_START_HOUR <= local_time.hour <= DAYLIGHT_END_HOUR:
                continue
            hourly = compute_hourly_metrics(observation, site, self.tuning)
            metrics.append(evolve(hourly, time=local_time))
        return metrics

    def build(
        self,
        site: Site,
        observations: Sequence[HourlyObservation],
        generated: Optional[datetime] = None,
    ) -> SiteForecast:
        """
        Build the forecast for one site.

        Args:
            site: Launch site
            observations: Hourly observations in chronological order
            generated: Generation timestamp; defaults to now

        Returns:
            SiteForecast with the detailed days, the extended outlook and the
            best flying window label ("" when no hour scores at least 3)
        """
        days = self.aggregator.group_by_day(
            observations, lambda observation: self._to_local(observation.time).date()
        )
        logger.debug("Building forecast for %s: %d days", site.name, len(days))

        detailed: List[DayForecast] = []
        extended: List[DaySummary] = []
        detailed_hours: List[HourlyMetrics] = []

        for day_idx, (day, day_observations) in enumerate(days.items()):
            metrics = self._daylight_metrics(site, day_observations)
            if day_idx < self.detailed_days:
                detailed.append(DayForecast(
                    date=day,
                    hours=metrics,
                    summary=self.aggregator.summarize(day, metrics),
                ))
                detailed_hours.extend(metrics)
            elif metrics:
                extended.append(self.aggregator.summarize(day, metrics))

        best = self.aggregator.best_window(detailed_hours)
        best_window = best.time.strftime(BEST_WINDOW_FORMAT) if best is not None else ""

        return SiteForecast(
            site=site,
            generated=self._to_local(generated) if generated else datetime.now(self.tz),
            units=self.units,
            detailed_days=detailed,
            extended_days=extended,
            best_window=best_window,
        )
