"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

US_SYSTEM = "US"
EU_SYSTEM = "EU"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    timezone: str = "UTC"
    measurement_system: str = EU_SYSTEM
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_measurement_system(raw: str | None) -> str:
    """Normalize a measurement system name to EU or US."""
    if raw is None:
        return EU_SYSTEM
    cleaned = raw.strip().upper()
    if cleaned in {"US", "IMPERIAL"}:
        return US_SYSTEM
    return EU_SYSTEM


def preferred_water_unit(measurement_system: str | None) -> str:
    """Return the default water unit for a measurement system."""
    if parse_measurement_system(measurement_system) == US_SYSTEM:
        return "oz"
    return "ml"
