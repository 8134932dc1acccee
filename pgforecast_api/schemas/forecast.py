"""Pydantic schemas for computed metrics and forecasts."""
from pydantic import BaseModel
from typing import Any, Dict, List

from pgforecast_api.schemas.weather import PressureLevelSchema, SiteSchema


class HourlyMetricsResponse(BaseModel):
    """Paragliding metrics for one hour."""

    time: str  # ISO-8601
    wind_speed: float
    wind_direction: float
    wind_dir_str: str
    wind_gusts: float
    wind_gradient: str  # Low/Medium/High
    wind_gradient_diff: float
    thermal_rating: str  # None/Weak/Moderate/Strong/Extreme
    cape: float
    cape_rating: str
    cloudbase_ft: int
    cloud_cover: float
    precipitation: float
    precip_probability: float
    orographic_lift: str  # None/Weak/Moderate/Strong
    flyability_score: int  # 1-5
    xc_potential: str  # Low/Medium/High/Epic
    freezing_level_ft: float
    is_day: bool
    pressure_levels: List[PressureLevelSchema]


class DaySummaryResponse(BaseModel):
    """Aggregated metrics for one day."""

    date: str  # "YYYY-MM-DD"
    avg_wind_speed: float
    avg_wind_direction: float
    wind_dir_str: str
    max_gusts: float
    thermal_rating: str
    max_precip_prob: float
    avg_cloudbase_ft: int
    best_score: int
    xc_potential: str


class DayForecastResponse(BaseModel):
    """Hourly metrics and summary for one detailed day."""

    date: str
    hours: List[HourlyMetricsResponse]
    summary: DaySummaryResponse


class SiteForecastResponse(BaseModel):
    """Complete forecast for one site."""

    site: SiteSchema
    generated: str
    units: str
    detailed_days: List[DayForecastResponse]
    extended_days: List[DaySummaryResponse]
    best_window: str


class MetricsResponse(BaseModel):
    """Per-hour metrics plus the display hints a client needs to render them."""

    metrics: List[HourlyMetricsResponse]
    display: Dict[str, Any]
    wind_thresholds: Dict[str, float]


class CompassResponse(BaseModel):
    degrees: float
    compass: str
