"""Composite 1-5 flyability score."""
from pgforecast.config import MAX_SCORE, MIN_SCORE
from pgforecast.models.ratings import GradientRating, ThermalRating
from pgforecast.models.site import Site
from pgforecast.models.tuning import TuningConfig
from pgforecast.models.weather import HourlyObservation
from pgforecast.utils.angles import distance_from_range, in_range
from pgforecast.utils.numbers import round_half_away


def _wind_speed_adjustment(speed: float, tuning: TuningConfig) -> float:
    wind, scoring = tuning.wind, tuning.scoring
    if wind.ideal_min <= speed <= wind.ideal_max:
        return scoring.wind_ideal_bonus
    if wind.acceptable_min <= speed <= wind.acceptable_max:
        return scoring.wind_acceptable_bonus
    if speed > wind.dangerous_max:
        return scoring.wind_danger_penalty
    if speed > wind.acceptable_max:
        return scoring.wind_high_penalty
    # Below acceptable_min: neutral
    return 0.0


def _direction_adjustment(direction: float, site: Site, tuning: TuningConfig) -> float:
    if in_range(direction, site.wind_min, site.wind_max):
        return tuning.scoring.dir_on_bonus

    distance = distance_from_range(direction, site.wind_min, site.wind_max)
    if distance > 90:
        return tuning.scoring.dir_off_penalty
    if distance > 45:
        return -1.0
    if distance > 20:
        return -0.5
    # Within 20° of the range edge: marginal, no penalty
    return 0.0


def _gust_adjustment(speed: float, gusts: float, tuning: TuningConfig) -> float:
    if speed <= 0:
        return 0.0
    gust_factor = gusts / speed
    if gust_factor > tuning.wind.dangerous_gust_factor:
        return tuning.scoring.gust_high_penalty
    if gust_factor > tuning.wind.max_gust_factor:
        return tuning.scoring.gust_med_penalty
    return 0.0


def _gradient_adjustment(rating: GradientRating, tuning: TuningConfig) -> float:
    if rating == GradientRating.HIGH:
        return tuning.scoring.gradient_high_penalty
    if rating == GradientRating.MEDIUM:
        return tuning.scoring.gradient_med_penalty
    return 0.0


def _rain_adjustment(precipitation: float, probability: float, tuning: TuningConfig) -> float:
    if precipitation > 0:
        return tuning.scoring.rain_penalty
    if probability > 50:
        return tuning.scoring.rain_prob_penalty
    if probability > 30:
        return -0.25
    return 0.0


def _thermal_adjustment(cape: float, rating: ThermalRating, tuning: TuningConfig) -> float:
    bonus = 0.0
    if tuning.thermal.cape_moderate <= cape < tuning.thermal.cape_extreme:
        bonus += tuning.scoring.cape_bonus
    if rating in (ThermalRating.STRONG, ThermalRating.MODERATE):
        bonus += tuning.scoring.thermal_strong_bonus
    return bonus


def calc_flyability_score(
    observation: HourlyObservation,
    site: Site,
    gradient_rating: GradientRating,
    thermal_rating: ThermalRating,
    tuning: TuningConfig,
) -> int:
    """
    Score how flyable an hour is, from 1 (stay home) to 5 (go now).

    Starts from the configured base score and sums signed adjustments for
    wind speed, wind direction relative to the site, gust factor, wind
    gradient, rain and thermals. The sum is rounded and clamped, so extreme
    inputs simply saturate at 1 or 5.

    Args:
        observation: Raw hourly observation
        site: Launch site (supplies the acceptable wind range)
        gradient_rating: Output of calc_wind_gradient
        thermal_rating: Output of calc_thermal_rating
        tuning: Tuning snapshot

    Returns:
        Integer score in [1, 5]
    """
    score = tuning.scoring.base_score
    score += _wind_speed_adjustment(observation.wind_speed, tuning)
    score += _direction_adjustment(observation.wind_direction, site, tuning)
    score += _gust_adjustment(observation.wind_speed, observation.wind_gusts, tuning)
    score += _gradient_adjustment(gradient_rating, tuning)
    score += _rain_adjustment(
        observation.precipitation, observation.precipitation_probability, tuning
    )
    score += _thermal_adjustment(observation.cape, thermal_rating, tuning)

    result = round_half_away(score)
    return max(MIN_SCORE, min(MAX_SCORE, result))
