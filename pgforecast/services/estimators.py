"""Per-metric estimators.

Each estimator is a pure function of raw observation fields and a
``TuningConfig`` snapshot.
"""
from typing import Iterable, Tuple

from pgforecast.config import (
    CLOUDBASE_SPREAD_PER_1000FT,
    FLYABLE_PRESSURE_MAX,
    FLYABLE_PRESSURE_MIN,
    LAPSE_RATE_LOWER_LEVEL,
    LAPSE_RATE_UPPER_LEVEL,
    STANDARD_LAPSE_RATE,
    STRONG_LAPSE_RATE,
)
from pgforecast.models.ratings import (
    CAPERating,
    GradientRating,
    OrographicLift,
    ThermalRating,
    XCPotential,
)
from pgforecast.models.tuning import TuningConfig
from pgforecast.models.weather import PressureLevel
from pgforecast.utils.angles import angle_diff


def calc_wind_gradient(
    surface_speed: float,
    levels: Iterable[PressureLevel],
    tuning: TuningConfig,
) -> Tuple[float, GradientRating]:
    """
    Rate wind shear between the surface and the altitudes a pilot can reach.

    Only levels between 850 and 1000 hPa (roughly 0-1500m) are considered;
    700 hPa always carries strong upper winds and would swamp the metric.

    Args:
        surface_speed: 10m wind speed
        levels: Pressure-level samples for the same hour
        tuning: Tuning snapshot

    Returns:
        Tuple of (speed difference, never negative; rating)
    """
    max_upper = surface_speed
    for level in levels:
        if FLYABLE_PRESSURE_MIN <= level.pressure <= FLYABLE_PRESSURE_MAX:
            max_upper = max(max_upper, level.wind_speed)
    diff = max(0.0, max_upper - surface_speed)

    if diff < tuning.gradient.low_threshold:
        return diff, GradientRating.LOW
    if diff < tuning.gradient.high_threshold:
        return diff, GradientRating.MEDIUM
    return diff, GradientRating.HIGH


def calc_lapse_rate(levels: Iterable[PressureLevel]) -> float:
    """
    Temperature lapse rate (°C/km) between 925 and 700 hPa.

    Falls back to the standard atmosphere rate when either level is missing
    or the geopotential heights are not increasing.
    """
    lower = upper = None
    for level in levels:
        if level.pressure == LAPSE_RATE_LOWER_LEVEL:
            lower = level
        elif level.pressure == LAPSE_RATE_UPPER_LEVEL:
            upper = level
    if lower is None or upper is None:
        return STANDARD_LAPSE_RATE
    if upper.geopotential_height <= lower.geopotential_height:
        return STANDARD_LAPSE_RATE
    depth_km = (upper.geopotential_height - lower.geopotential_height) / 1000.0
    return (lower.temperature - upper.temperature) / depth_km


def calc_thermal_rating(
    cape: float,
    levels: Iterable[PressureLevel],
    tuning: TuningConfig,
) -> ThermalRating:
    """Estimate thermal strength from CAPE brackets plus lapse-rate bonuses."""
    thermal = tuning.thermal
    lapse_rate = calc_lapse_rate(levels)

    score = 0
    if cape > thermal.cape_extreme:
        score += 4
    elif cape > thermal.cape_strong:
        score += 3
    elif cape > thermal.cape_moderate:
        score += 2
    elif cape > thermal.cape_weak:
        score += 1
    if lapse_rate > thermal.lapse_rate_bonus:
        score += 1
    if lapse_rate > STRONG_LAPSE_RATE:
        score += 1

    if score >= 5:
        return ThermalRating.EXTREME
    if score >= 4:
        return ThermalRating.STRONG
    if score >= 3:
        return ThermalRating.MODERATE
    if score >= 1:
        return ThermalRating.WEAK
    return ThermalRating.NONE


def calc_cape_rating(cape: float, tuning: TuningConfig) -> CAPERating:
    """Bracket raw CAPE for display."""
    thermal = tuning.thermal
    if cape >= thermal.cape_extreme:
        return CAPERating.OVERDEVELOPMENT
    if cape >= thermal.cape_strong:
        return CAPERating.STRONG
    if cape >= thermal.cape_moderate:
        return CAPERating.MODERATE
    return CAPERating.WEAK


def calc_cloudbase_ft(temperature: float, dew_point: float, tuning: TuningConfig) -> int:
    """Estimate cloudbase in feet above the surface from the dewpoint spread."""
    spread = max(0.0, temperature - dew_point)
    feet = int(spread / CLOUDBASE_SPREAD_PER_1000FT * 1000)
    return max(feet, tuning.cloudbase.min_realistic_ft)


def cloudbase_str(feet: int, tuning: TuningConfig) -> str:
    """Display label for a cloudbase; "Fog" at or below the realistic floor."""
    if feet <= tuning.cloudbase.min_realistic_ft:
        return "Fog"
    return f"{feet}ft"


def calc_orographic_lift(
    wind_direction: float,
    wind_speed: float,
    site_aspect: int,
    tuning: TuningConfig,
) -> OrographicLift:
    """Rate ridge lift by how squarely the wind strikes the slope."""
    orographic = tuning.orographic
    if wind_speed < orographic.min_wind_speed:
        return OrographicLift.NONE

    diff = angle_diff(wind_direction, site_aspect)
    if diff <= orographic.strong_angle:
        return OrographicLift.STRONG
    if diff <= orographic.moderate_angle:
        return OrographicLift.MODERATE
    if diff <= orographic.weak_angle:
        return OrographicLift.WEAK
    return OrographicLift.NONE


# Extreme scores below Strong; whether that is intended is unresolved.
_XC_THERMAL_POINTS = {
    ThermalRating.NONE: 0,
    ThermalRating.WEAK: 0,
    ThermalRating.MODERATE: 1,
    ThermalRating.STRONG: 2,
    ThermalRating.EXTREME: 1,
}


def calc_xc_potential(
    cape: float,
    cloudbase_ft: int,
    wind_speed: float,
    thermal_rating: ThermalRating,
    tuning: TuningConfig,
) -> XCPotential:
    """
    Rate cross-country potential by accumulating points.

    Args:
        cape: CAPE in J/kg
        cloudbase_ft: Estimated cloudbase in feet
        wind_speed: Surface wind speed
        thermal_rating: Output of calc_thermal_rating
        tuning: Tuning snapshot

    Returns:
        XC potential rating
    """
    xc = tuning.xc
    score = 0
    if cape >= tuning.thermal.cape_strong:
        score += 2
    elif cape >= tuning.thermal.cape_moderate:
        score += 1
    if cloudbase_ft >= xc.good_cloudbase_ft:
        score += 2
    elif cloudbase_ft >= xc.min_cloudbase_ft:
        score += 1
    if xc.min_wind_speed <= wind_speed <= xc.max_wind_speed:
        score += 1
    score += _XC_THERMAL_POINTS[thermal_rating]

    if score >= xc.epic_threshold:
        return XCPotential.EPIC
    if score >= xc.high_threshold:
        return XCPotential.HIGH
    if score >= xc.medium_threshold:
        return XCPotential.MEDIUM
    return XCPotential.LOW
