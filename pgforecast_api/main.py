"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from pgforecast_api.api.dependencies import get_forecast_service
from pgforecast_api.api.routes import forecast, tuning
from pgforecast_api.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the shared forecast service before the first request."""
    service = get_forecast_service()
    logger.info(
        "Forecast service ready (units=%s, detailed_days=%d, timezone=%s)",
        service.settings.default_units,
        service.settings.default_detailed_days,
        service.settings.default_timezone,
    )
    yield


app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    lifespan=lifespan,
    redirect_slashes=False,
    default_response_class=ORJSONResponse,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(forecast.router)
app.include_router(tuning.router)


@app.get("/")
async def root():
    """Service name, version and the main endpoints."""
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "docs": "/docs",
        "endpoints": ["/metrics", "/forecast", "/tuning/default", "/compass/{degrees}"],
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("pgforecast_api.main:app", host="0.0.0.0", port=8001)
