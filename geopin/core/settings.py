from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEOPIN_",
        case_sensitive=False,
    )

    service_name: str = "GeoPin API"
    service_version: str = "1.0.0"

    # Logging level for the "geopin" logger tree.
    log_level: str = "INFO"

    # Public free service: any origin, no cookies.
    cors_allow_origin: str = "*"
    cors_allow_credentials: bool = False

    # Batch endpoint guard.
    batch_max_items: int = 1000

    # Decimal places for degrees in responses (1e-8 deg ~ 1mm).
    coordinate_decimals: int = 8


@lru_cache
def get_settings() -> Settings:
    return Settings()
