"""Pydantic schemas for request payloads: site and provider observations."""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class SiteSchema(BaseModel):
    """Launch site."""

    name: str
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    elevation: int = 0
    wind_min: int = Field(default=0, ge=0, le=360)
    wind_max: int = Field(default=360, ge=0, le=360)
    best_dir: int = 0
    aspect: int = 0


class PressureLevelSchema(BaseModel):
    """One pressure-level sample."""

    pressure_hpa: int
    wind_speed: float = 0.0
    wind_direction: float = 0.0
    temperature: float = 0.0
    geopotential_height: float = 0.0

    @field_validator(
        "wind_speed", "wind_direction", "temperature", "geopotential_height", mode="before"
    )
    @classmethod
    def _null_as_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value


class HourlyObservationSchema(BaseModel):
    """One hour of provider data, using the provider's field names."""

    time: datetime
    temperature_2m: float = 0.0
    relative_humidity_2m: float = 0.0
    dew_point_2m: float = 0.0
    wind_speed_10m: float = 0.0
    wind_direction_10m: float = 0.0
    wind_gusts_10m: float = 0.0
    cloud_cover: float = 0.0
    cloud_cover_low: float = 0.0
    cloud_cover_mid: float = 0.0
    cloud_cover_high: float = 0.0
    cape: float = 0.0
    shortwave_radiation: float = 0.0
    precipitation: float = 0.0
    precipitation_probability: float = 0.0
    freezing_level_height: float = 0.0
    is_day: int = 0
    weather_code: int = 0
    pressure_msl: float = 0.0
    visibility: float = 0.0
    pressure_levels: List[PressureLevelSchema] = []

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any, info: ValidationInfo) -> Any:
        """Read provider nulls (common for CAPE late in the horizon) as zero."""
        if value is not None or info.field_name == "time":
            return value
        return [] if info.field_name == "pressure_levels" else 0


class MetricsRequest(BaseModel):
    """Observations to score for a site, with optional tuning overrides."""

    site: SiteSchema
    observations: List[HourlyObservationSchema]
    tuning: Optional[Dict[str, Any]] = Field(
        default=None, description="Partial tuning merged over the defaults"
    )


class ForecastRequest(MetricsRequest):
    """Observations to turn into a full site forecast."""

    units: Optional[str] = Field(default=None, description="mph, kph, knots or ms")
    detailed_days: Optional[int] = Field(default=None, ge=1, le=16)
    timezone: Optional[str] = Field(default=None, description="IANA timezone name")
