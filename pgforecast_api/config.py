"""API configuration."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_prefix="PGFORECAST_")

    # API settings
    api_title: str = "Paragliding Forecast API"
    api_version: str = "1.0.0"
    cors_origins: list = ["http://localhost:5173", "http://localhost:3000"]

    # Forecast defaults
    default_units: str = "mph"
    default_detailed_days: int = 3
    default_timezone: str = "Europe/London"


settings = Settings()
