"""Tunable thresholds, bonuses and penalties for the forecast engine.

A ``TuningConfig`` is an immutable snapshot. Partial overrides are merged over
the defaults with :meth:`TuningConfig.from_overrides`; replacing parameters
means building a new snapshot, never mutating one in place.
"""
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pgforecast.models.ratings import GradientRating


class _Group(BaseModel):
    """Base for one named group of tuning values."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class WindTuning(_Group):
    """Wind speed bands (site units) and gust factors."""

    ideal_min: float = 8
    ideal_max: float = 18
    acceptable_min: float = 5
    acceptable_max: float = 22
    dangerous_max: float = 25
    max_gust_factor: float = 1.5
    dangerous_gust_factor: float = 2.0

    @model_validator(mode="after")
    def _check_order(self) -> "WindTuning":
        if not self.ideal_min < self.ideal_max < self.acceptable_max < self.dangerous_max:
            raise ValueError(
                "wind bands must satisfy ideal_min < ideal_max < acceptable_max < dangerous_max"
            )
        if not self.max_gust_factor < self.dangerous_gust_factor:
            raise ValueError("max_gust_factor must be below dangerous_gust_factor")
        return self


class GradientTuning(_Group):
    """Wind gradient thresholds (speed difference) and penalties."""

    low_threshold: float = 10
    high_threshold: float = 20
    high_penalty: float = -2.0
    medium_penalty: float = -1.0

    @model_validator(mode="after")
    def _check_order(self) -> "GradientTuning":
        if not self.low_threshold < self.high_threshold:
            raise ValueError("gradient low_threshold must be below high_threshold")
        return self


class ThermalTuning(_Group):
    """CAPE brackets (J/kg) and the lapse-rate bonus threshold (°C/km)."""

    cape_weak: float = 100
    cape_moderate: float = 300
    cape_strong: float = 1000
    cape_extreme: float = 2500
    lapse_rate_bonus: float = 8.0

    @model_validator(mode="after")
    def _check_order(self) -> "ThermalTuning":
        if not self.cape_weak < self.cape_moderate < self.cape_strong < self.cape_extreme:
            raise ValueError(
                "CAPE brackets must satisfy cape_weak < cape_moderate < cape_strong < cape_extreme"
            )
        return self


class OrographicTuning(_Group):
    """Minimum wind speed and angle brackets for ridge lift."""

    min_wind_speed: float = 8
    strong_angle: float = 15
    moderate_angle: float = 30
    weak_angle: float = 45

    @model_validator(mode="after")
    def _check_order(self) -> "OrographicTuning":
        if not self.strong_angle < self.moderate_angle < self.weak_angle:
            raise ValueError(
                "orographic angles must satisfy strong_angle < moderate_angle < weak_angle"
            )
        return self


class CloudbaseTuning(_Group):
    """Lowest cloudbase treated as realistic; anything at or below is fog."""

    min_realistic_ft: int = Field(default=200, gt=0)


class ScoringTuning(_Group):
    """Base score and the signed adjustments of the flyability score."""

    base_score: float = 2.5
    wind_ideal_bonus: float = 1.0
    wind_acceptable_bonus: float = 0.5
    wind_danger_penalty: float = -2.0
    wind_high_penalty: float = -1.0
    dir_on_bonus: float = 1.5
    dir_off_penalty: float = -2.0
    gust_high_penalty: float = -1.5
    gust_med_penalty: float = -0.5
    rain_penalty: float = -2.5
    rain_prob_penalty: float = -0.5
    gradient_high_penalty: float = -1.5
    gradient_med_penalty: float = -0.5
    cape_bonus: float = 0.5
    thermal_strong_bonus: float = 0.5


class XCTuning(_Group):
    """Cross-country thresholds."""

    min_cloudbase_ft: int = 3000
    good_cloudbase_ft: int = 4000
    max_wind_speed: float = 20
    min_wind_speed: float = 8
    epic_threshold: int = 7
    high_threshold: int = 5
    medium_threshold: int = 3

    @model_validator(mode="after")
    def _check_order(self) -> "XCTuning":
        if self.min_cloudbase_ft > self.good_cloudbase_ft:
            raise ValueError("xc min_cloudbase_ft must not exceed good_cloudbase_ft")
        if self.min_wind_speed > self.max_wind_speed:
            raise ValueError("xc min_wind_speed must not exceed max_wind_speed")
        if not self.medium_threshold < self.high_threshold < self.epic_threshold:
            raise ValueError(
                "xc thresholds must satisfy medium_threshold < high_threshold < epic_threshold"
            )
        return self


class DisplayStyle(_Group):
    """Colour and icon hint for one display tier."""

    label: str = ""
    rgb: str
    icon: str


class WindStrengthDisplay(_Group):
    light: DisplayStyle = DisplayStyle(label="Light", rgb="#4fd1c5", icon="💤")
    moderate: DisplayStyle = DisplayStyle(label="Moderate", rgb="#48bb78", icon="✅")
    fresh: DisplayStyle = DisplayStyle(label="Fresh", rgb="#ecc94b", icon="⚠️")
    strong: DisplayStyle = DisplayStyle(label="Strong", rgb="#ed8936", icon="🟠")
    very_strong: DisplayStyle = DisplayStyle(label="Very Strong", rgb="#f56565", icon="🔴")


class GradientDisplay(_Group):
    low: DisplayStyle = DisplayStyle(label="Low", rgb="#48bb78", icon="✅")
    medium: DisplayStyle = DisplayStyle(label="Medium", rgb="#ecc94b", icon="⚠️")
    high: DisplayStyle = DisplayStyle(label="High", rgb="#f56565", icon="🔴")


class DisplayConfig(_Group):
    """Presentation hints. Never used as scoring input."""

    wind_strength: WindStrengthDisplay = WindStrengthDisplay()
    gradient: GradientDisplay = GradientDisplay()


class TuningConfig(_Group):
    """All tunable parameters of the forecast engine."""

    wind: WindTuning = WindTuning()
    gradient: GradientTuning = GradientTuning()
    thermal: ThermalTuning = ThermalTuning()
    orographic: OrographicTuning = OrographicTuning()
    cloudbase: CloudbaseTuning = CloudbaseTuning()
    scoring: ScoringTuning = ScoringTuning()
    xc: XCTuning = XCTuning()
    display: DisplayConfig = DisplayConfig()

    @classmethod
    def from_overrides(cls, overrides: Optional[Mapping[str, Any]] = None) -> "TuningConfig":
        """
        Build a snapshot from a partial nested mapping merged over the defaults.

        Args:
            overrides: e.g. ``{"wind": {"ideal_max": 16}}``; groups and keys
                not mentioned keep their default values.

        Raises:
            pydantic.ValidationError: unknown keys, bad types, or thresholds
                out of order.
        """
        return DEFAULT_TUNING.with_overrides(overrides)

    def with_overrides(self, overrides: Optional[Mapping[str, Any]] = None) -> "TuningConfig":
        """Return a new snapshot with ``overrides`` merged over this one."""
        if not overrides:
            return self
        merged = _deep_merge(self.model_dump(), overrides)
        return type(self).model_validate(merged)

    def tier_for(self, speed: float) -> DisplayStyle:
        """Display tier for a wind speed, banded by the wind thresholds."""
        tiers = self.display.wind_strength
        if speed < self.wind.ideal_min:
            return tiers.light
        if speed <= self.wind.ideal_max:
            return tiers.moderate
        if speed <= self.wind.acceptable_max:
            return tiers.fresh
        if speed <= self.wind.dangerous_max:
            return tiers.strong
        return tiers.very_strong

    def icon_for(self, rating: GradientRating) -> str:
        """Display icon for a wind gradient rating."""
        levels = self.display.gradient
        if rating == GradientRating.LOW:
            return levels.low.icon
        if rating == GradientRating.MEDIUM:
            return levels.medium.icon
        return levels.high.icon

    def wind_thresholds(self) -> Dict[str, float]:
        """Wind band values a client needs to colour speeds itself."""
        return {
            "ideal_min": self.wind.ideal_min,
            "ideal_max": self.wind.ideal_max,
            "acceptable_max": self.wind.acceptable_max,
            "dangerous_max": self.wind.dangerous_max,
        }


def _deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


DEFAULT_TUNING = TuningConfig()


def default_tuning() -> TuningConfig:
    """The fixed default snapshot."""
    return DEFAULT_TUNING
