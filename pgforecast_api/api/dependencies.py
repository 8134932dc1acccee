"""FastAPI dependencies for dependency injection."""
from functools import lru_cache

from pgforecast_api.services.forecast_service import ForecastService


@lru_cache()
def get_forecast_service() -> ForecastService:
    """Get cached forecast service instance."""
    return ForecastService()
