"""Rating enumerations produced by the estimators.

Values are the strings used on the JSON wire, so ``rating.value`` can be
serialized directly.
"""
from enum import Enum


class GradientRating(str, Enum):
    """Wind shear between the surface and flyable altitudes."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ThermalRating(str, Enum):
    """Thermal strength estimated from CAPE and lapse rate."""

    NONE = "None"
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"
    EXTREME = "Extreme"

    @property
    def rank(self) -> int:
        """Ordinal used to pick the best rating of a day."""
        return _THERMAL_RANKS[self]


_THERMAL_RANKS = {
    ThermalRating.NONE: 0,
    ThermalRating.WEAK: 1,
    ThermalRating.MODERATE: 2,
    ThermalRating.STRONG: 3,
    ThermalRating.EXTREME: 4,
}


class CAPERating(str, Enum):
    """Display-only bracket of raw CAPE."""

    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"
    OVERDEVELOPMENT = "Overdevelopment"


class OrographicLift(str, Enum):
    """Ridge lift from wind striking the launch slope."""

    NONE = "None"
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"


class XCPotential(str, Enum):
    """Cross-country flying potential."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    EPIC = "Epic"
