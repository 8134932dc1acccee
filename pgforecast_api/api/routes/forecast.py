"""API routes for hourly metrics and site forecasts."""
from fastapi import APIRouter, Depends, HTTPException

from pgforecast_api.api.dependencies import get_forecast_service
from pgforecast_api.schemas.forecast import MetricsResponse, SiteForecastResponse
from pgforecast_api.schemas.weather import ForecastRequest, MetricsRequest
from pgforecast_api.services.forecast_service import ForecastService

router = APIRouter(tags=["forecast"])


@router.post("/metrics", response_model=MetricsResponse)
async def compute_metrics(
    request: MetricsRequest,
    forecast_service: ForecastService = Depends(get_forecast_service),
) -> MetricsResponse:
    """
    Compute paragliding metrics for every observation.

    Returns one metrics record per observation, in order, with the display
    hints and wind thresholds of the tuning used.
    """
    try:
        return forecast_service.compute_metrics(request)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/forecast", response_model=SiteForecastResponse)
async def build_forecast(
    request: ForecastRequest,
    forecast_service: ForecastService = Depends(get_forecast_service),
) -> SiteForecastResponse:
    """
    Build a site forecast: detailed hourly days, extended outlook and the
    best flying window.
    """
    try:
        return forecast_service.build_forecast(request)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
