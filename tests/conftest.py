"""Shared fixtures for forecast engine tests."""
from datetime import datetime

import pytest

from pgforecast.models.forecast import HourlyMetrics
from pgforecast.models.ratings import (
    CAPERating,
    GradientRating,
    OrographicLift,
    ThermalRating,
    XCPotential,
)
from pgforecast.models.site import Site
from pgforecast.models.tuning import TuningConfig
from pgforecast.models.weather import HourlyObservation, PressureLevel


@pytest.fixture
def tuning() -> TuningConfig:
    """Default tuning snapshot."""
    return TuningConfig.from_overrides()


@pytest.fixture
def ringstead() -> Site:
    """South-west facing coastal site with a 210-260° wind range."""
    return Site(
        name="Ringstead", lat=50.63, lon=-2.35, elevation=147,
        wind_min=210, wind_max=260, best_dir=225, aspect=225,
    )


@pytest.fixture
def make_observation():
    """Factory for observations; defaults describe a perfect soaring hour."""

    def _make(time: datetime = datetime(2024, 6, 21, 12, 0), **overrides) -> HourlyObservation:
        values = dict(
            time=time,
            temperature=18.0,
            dew_point=10.0,
            wind_speed=14.0,
            wind_direction=225.0,
            wind_gusts=18.0,
            cloud_cover=30.0,
            cape=0.0,
            precipitation=0.0,
            precipitation_probability=0.0,
            freezing_level_height=2000.0,
            is_day=1,
            pressure_levels=[
                PressureLevel(pressure=1000, wind_speed=14, temperature=17, geopotential_height=100),
                PressureLevel(pressure=950, wind_speed=16, temperature=13, geopotential_height=500),
                PressureLevel(pressure=925, wind_speed=16, temperature=11, geopotential_height=750),
                PressureLevel(pressure=900, wind_speed=17, temperature=9, geopotential_height=1000),
                PressureLevel(pressure=850, wind_speed=18, temperature=6, geopotential_height=1500),
                PressureLevel(pressure=700, wind_speed=40, temperature=-4, geopotential_height=3000),
            ],
        )
        values.update(overrides)
        return HourlyObservation(**values)

    return _make


@pytest.fixture
def make_metrics():
    """Factory for hourly metrics with only the aggregated fields varied."""

    def _make(
        time: datetime = datetime(2024, 6, 21, 12, 0),
        score: int = 3,
        wind_speed: float = 10.0,
        wind_direction: float = 225.0,
        wind_gusts: float = 15.0,
        precip_probability: float = 0.0,
        cape: float = 0.0,
        cloudbase_ft: int = 1000,
        thermal: ThermalRating = ThermalRating.NONE,
    ) -> HourlyMetrics:
        return HourlyMetrics(
            time=time,
            wind_speed=wind_speed,
            wind_direction=wind_direction,
            wind_dir_str="SW",
            wind_gusts=wind_gusts,
            wind_gradient=GradientRating.LOW,
            wind_gradient_diff=0.0,
            thermal_rating=thermal,
            cape=cape,
            cape_rating=CAPERating.WEAK,
            cloudbase_ft=cloudbase_ft,
            cloud_cover=0.0,
            precipitation=0.0,
            precip_probability=precip_probability,
            orographic_lift=OrographicLift.NONE,
            flyability_score=score,
            xc_potential=XCPotential.LOW,
            freezing_level_ft=0.0,
            is_day=True,
        )

    return _make
