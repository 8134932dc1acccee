"""Derived forecast records and their JSON wire shape."""
from datetime import date, datetime
from typing import Optional, Tuple

from attrs import frozen, field

from pgforecast.models.ratings import (
    CAPERating,
    GradientRating,
    OrographicLift,
    ThermalRating,
    XCPotential,
)
from pgforecast.models.site import Site
from pgforecast.models.weather import PressureLevel


@frozen
class HourlyMetrics:
    """Paragliding metrics computed for one forecast hour."""

    time: datetime
    wind_speed: float
    wind_direction: float
    wind_dir_str: str
    wind_gusts: float
    wind_gradient: GradientRating
    wind_gradient_diff: float
    thermal_rating: ThermalRating
    cape: float
    cape_rating: CAPERating
    cloudbase_ft: int
    cloud_cover: float
    precipitation: float
    precip_probability: float
    orographic_lift: OrographicLift
    flyability_score: int  # 1-5
    xc_potential: XCPotential
    freezing_level_ft: float
    is_day: bool
    pressure_levels: Tuple[PressureLevel, ...] = field(default=(), converter=tuple)

    def to_dict(self) -> dict:
        """Convert to the stable JSON wire shape."""
        return {
            "time": self.time.isoformat(),
            "wind_speed": self.wind_speed,
            "wind_direction": self.wind_direction,
            "wind_dir_str": self.wind_dir_str,
            "wind_gusts": self.wind_gusts,
            "wind_gradient": self.wind_gradient.value,
            "wind_gradient_diff": self.wind_gradient_diff,
            "thermal_rating": self.thermal_rating.value,
            "cape": self.cape,
            "cape_rating": self.cape_rating.value,
            "cloudbase_ft": self.cloudbase_ft,
            "cloud_cover": self.cloud_cover,
            "precipitation": self.precipitation,
            "precip_probability": self.precip_probability,
            "orographic_lift": self.orographic_lift.value,
            "flyability_score": self.flyability_score,
            "xc_potential": self.xc_potential.value,
            "freezing_level_ft": self.freezing_level_ft,
            "is_day": self.is_day,
            "pressure_levels": [level.to_dict() for level in self.pressure_levels],
        }


@frozen
class DaySummary:
    """Aggregated metrics for one calendar day."""

    date: date
    avg_wind_speed: float = 0.0
    avg_wind_direction: float = 0.0
    wind_dir_str: str = ""
    max_gusts: float = 0.0
    thermal_rating: ThermalRating = ThermalRating.NONE
    max_precip_prob: float = 0.0
    avg_cloudbase_ft: int = 0
    best_score: int = 0
    xc_potential: XCPotential = XCPotential.LOW

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "date": self.date.isoformat(),
            "avg_wind_speed": self.avg_wind_speed,
            "avg_wind_direction": self.avg_wind_direction,
            "wind_dir_str": self.wind_dir_str,
            "max_gusts": self.max_gusts,
            "thermal_rating": self.thermal_rating.value,
            "max_precip_prob": self.max_precip_prob,
            "avg_cloudbase_ft": self.avg_cloudbase_ft,
            "best_score": self.best_score,
            "xc_potential": self.xc_potential.value,
        }


@frozen
class DayForecast:
    """Hourly metrics plus summary for one of the detailed days."""

    date: date
    hours: Tuple[HourlyMetrics, ...] = field(converter=tuple)
    summary: DaySummary

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "date": self.date.isoformat(),
            "hours": [hour.to_dict() for hour in self.hours],
            "summary": self.summary.to_dict(),
        }


@frozen
class SiteForecast:
    """Complete forecast for one site."""

    site: Site
    generated: datetime
    units: str
    detailed_days: Tuple[DayForecast, ...] = field(default=(), converter=tuple)
    extended_days: Tuple[DaySummary, ...] = field(default=(), converter=tuple)
    best_window: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "site": self.site.to_dict(),
            "generated": self.generated.isoformat(),
            "units": self.units,
            "detailed_days": [day.to_dict() for day in self.detailed_days],
            "extended_days": [summary.to_dict() for summary in self.extended_days],
            "best_window": self.best_window or "",
        }
