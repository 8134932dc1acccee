"""Service bridging API payloads and the forecast engine."""
import logging
from typing import Any, Dict, List, Optional

from pgforecast.models.site import Site
from pgforecast.models.tuning import TuningConfig
from pgforecast.models.weather import HourlyObservation, PressureLevel
from pgforecast.services.forecast_builder import ForecastBuilder
from pgforecast.services.hourly_metrics import compute_hourly_metrics
from pgforecast_api.config import Settings, settings as default_settings
from pgforecast_api.schemas.weather import (
    ForecastRequest,
    HourlyObservationSchema,
    MetricsRequest,
    SiteSchema,
)

logger = logging.getLogger(__name__)


def to_site(schema: SiteSchema) -> Site:
    """Convert a request site into the engine model."""
    return Site.from_dict(schema.model_dump())


def to_observation(schema: HourlyObservationSchema) -> HourlyObservation:
    """Convert a provider-named observation into the engine model."""
    return HourlyObservation(
        time=schema.time,
        temperature=schema.temperature_2m,
        relative_humidity=schema.relative_humidity_2m,
        dew_point=schema.dew_point_2m,
        wind_speed=schema.wind_speed_10m,
        wind_direction=schema.wind_direction_10m,
        wind_gusts=schema.wind_gusts_10m,
        cloud_cover=schema.cloud_cover,
        cloud_cover_low=schema.cloud_cover_low,
        cloud_cover_mid=schema.cloud_cover_mid,
        cloud_cover_high=schema.cloud_cover_high,
        cape=schema.cape,
        shortwave_radiation=schema.shortwave_radiation,
        precipitation=schema.precipitation,
        precipitation_probability=schema.precipitation_probability,
        freezing_level_height=schema.freezing_level_height,
        is_day=schema.is_day,
        weather_code=schema.weather_code,
        pressure_msl=schema.pressure_msl,
        visibility=schema.visibility,
        pressure_levels=[
            PressureLevel(
                pressure=level.pressure_hpa,
                wind_speed=level.wind_speed,
                wind_direction=level.wind_direction,
                temperature=level.temperature,
                geopotential_height=level.geopotential_height,
            )
            for level in schema.pressure_levels
        ],
    )


class ForecastService:
    """Service for metric and forecast computations."""

    def __init__(self, app_settings: Optional[Settings] = None):
        self.settings = app_settings or default_settings

    def tuning_for(self, overrides: Optional[Dict[str, Any]]) -> TuningConfig:
        """
        Build a tuning snapshot for one request.

        Raises:
            pydantic.ValidationError: If the overrides are malformed
        """
        return TuningConfig.from_overrides(overrides)

    def default_tuning(self) -> Dict[str, Any]:
        """Default tuning snapshot as a plain dict."""
        return TuningConfig.from_overrides().model_dump()

    def compute_metrics(self, request: MetricsRequest) -> Dict[str, Any]:
        """
        Score every observation of a request, without daylight filtering.

        Returns:
            Dict with 'metrics', 'display' and 'wind_thresholds'
        """
        tuning = self.tuning_for(request.tuning)
        site = to_site(request.site)
        metrics: List[dict] = [
            compute_hourly_metrics(to_observation(obs), site, tuning).to_dict()
            for obs in request.observations
        ]
        return {
            "metrics": metrics,
            "display": tuning.display.model_dump(),
            "wind_thresholds": tuning.wind_thresholds(),
        }

    def build_forecast(self, request: ForecastRequest) -> Dict[str, Any]:
        """
        Build a full site forecast from a request.

        Raises:
            ValueError: On malformed tuning overrides or unsupported units
        """
        tuning = self.tuning_for(request.tuning)
        builder = ForecastBuilder(
            tuning=tuning,
            detailed_days=request.detailed_days or self.settings.default_detailed_days,
            timezone_name=request.timezone or self.settings.default_timezone,
            units=request.units or self.settings.default_units,
        )
        site = to_site(request.site)
        logger.info(
            "Building forecast for %s from %d observations",
            site.name, len(request.observations),
        )
        observations = [to_observation(obs) for obs in request.observations]
        return builder.build(site, observations).to_dict()
