"""Per-hour orchestration of the estimators and the flyability scorer."""
from pgforecast.config import M_TO_FT
from pgforecast.models.forecast import HourlyMetrics
from pgforecast.models.site import Site
from pgforecast.models.tuning import TuningConfig
from pgforecast.models.weather import HourlyObservation
from pgforecast.services.estimators import (
    calc_cape_rating,
    calc_cloudbase_ft,
    calc_orographic_lift,
    calc_thermal_rating,
    calc_wind_gradient,
    calc_xc_potential,
)
from pgforecast.services.flyability import calc_flyability_score
from pgforecast.utils.angles import degrees_to_compass


def compute_hourly_metrics(
    observation: HourlyObservation,
    site: Site,
    tuning: TuningConfig,
) -> HourlyMetrics:
    """
    Compute all paragliding metrics for one hour.

    The thermal rating feeds both the flyability score and the XC
    potential; the gradient rating feeds only the flyability score.
    """
    gradient_diff, gradient_rating = calc_wind_gradient(
        observation.wind_speed, observation.pressure_levels, tuning
    )
    thermal_rating = calc_thermal_rating(observation.cape, observation.pressure_levels, tuning)
    cloudbase = calc_cloudbase_ft(observation.temperature, observation.dew_point, tuning)

    return HourlyMetrics(
        time=observation.time,
        wind_speed=observation.wind_speed,
        wind_direction=observation.wind_direction,
        wind_dir_str=degrees_to_compass(observation.wind_direction),
        wind_gusts=observation.wind_gusts,
        wind_gradient=gradient_rating,
        wind_gradient_diff=gradient_diff,
        thermal_rating=thermal_rating,
        cape=observation.cape,
        cape_rating=calc_cape_rating(observation.cape, tuning),
        cloudbase_ft=cloudbase,
        cloud_cover=observation.cloud_cover,
        precipitation=observation.precipitation,
        precip_probability=observation.precipitation_probability,
        orographic_lift=calc_orographic_lift(
            observation.wind_direction, observation.wind_speed, site.aspect, tuning
        ),
        flyability_score=calc_flyability_score(
            observation, site, gradient_rating, thermal_rating, tuning
        ),
        xc_potential=calc_xc_potential(
            observation.cape, cloudbase, observation.wind_speed, thermal_rating, tuning
        ),
        freezing_level_ft=observation.freezing_level_height * M_TO_FT,
        is_day=observation.is_day == 1,
        pressure_levels=observation.pressure_levels,
    )
