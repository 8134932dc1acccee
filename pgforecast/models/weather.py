"""Raw atmospheric observations supplied by the weather provider."""
from datetime import datetime
from typing import Tuple

from attrs import frozen, field


@frozen
class PressureLevel:
    """One vertical-profile sample at a fixed pressure level."""

    pressure: int  # hPa
    wind_speed: float = 0.0
    wind_direction: float = 0.0
    temperature: float = 0.0  # °C
    geopotential_height: float = 0.0  # meters

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "pressure_hpa": self.pressure,
            "wind_speed": self.wind_speed,
            "wind_direction": self.wind_direction,
            "temperature": self.temperature,
            "geopotential_height": self.geopotential_height,
        }


@frozen
class HourlyObservation:
    """All surface and profile data for one forecast hour.

    Every numeric field defaults to zero; the provider fills missing values
    with zero rather than leaving them absent.
    """

    time: datetime
    temperature: float = 0.0
    relative_humidity: float = 0.0
    dew_point: float = 0.0
    wind_speed: float = 0.0
    wind_direction: float = 0.0
    wind_gusts: float = 0.0
    cloud_cover: float = 0.0
    cloud_cover_low: float = 0.0
    cloud_cover_mid: float = 0.0
    cloud_cover_high: float = 0.0
    cape: float = 0.0
    shortwave_radiation: float = 0.0
    precipitation: float = 0.0
    precipitation_probability: float = 0.0
    freezing_level_height: float = 0.0  # meters
    is_day: int = 0
    weather_code: int = 0
    pressure_msl: float = 0.0
    visibility: float = 0.0
    pressure_levels: Tuple[PressureLevel, ...] = field(default=(), converter=tuple)
