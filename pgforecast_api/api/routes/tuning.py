"""API routes for tuning defaults and direction helpers."""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from pgforecast.utils.angles import degrees_to_compass
from pgforecast_api.api.dependencies import get_forecast_service
from pgforecast_api.schemas.forecast import CompassResponse
from pgforecast_api.services.forecast_service import ForecastService

router = APIRouter(tags=["tuning"])


@router.get("/tuning/default", response_model=Dict[str, Any])
async def get_default_tuning(
    forecast_service: ForecastService = Depends(get_forecast_service),
) -> Dict[str, Any]:
    """Get the default tuning parameters."""
    return forecast_service.default_tuning()


@router.get("/compass/{degrees}", response_model=CompassResponse)
async def get_compass(degrees: float) -> CompassResponse:
    """Convert a direction in degrees to a 16-point compass label."""
    return CompassResponse(degrees=degrees, compass=degrees_to_compass(degrees))
