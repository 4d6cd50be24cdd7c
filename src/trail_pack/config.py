"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
Every setting has a default, so the application runs without any
environment at all; a `.env` file is picked up when present.

## Optional Environment Variables

- CATALOG_PATH: Equipment catalog JSON file (default: bundled sample catalog)
- LOG_LEVEL: Logging level for the CLI and server (default: INFO)
- CLIMATE_COLD_MAX_C / CLIMATE_HOT_MIN_C: Temperature category thresholds
- CLIMATE_HEAVY_RAIN_MM_PER_DAY: Mean daily precipitation for "rainy"
- CLIMATE_HEAVY_SNOW_TOTAL: Cumulative snowfall for "snow possible"
- AUTONOMY_TRIP_PACK_RESTRICTION: Restrict autonomy trips to Base/Autonomie packs
- DEBUG: Enable debug mode (default: false)

## Example .env file

```
CATALOG_PATH=/srv/trail-pack/materiel_enriched.json
CLIMATE_COLD_MAX_C=8
LOG_LEVEL=DEBUG
```
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from trail_pack.models.climate import ClimateThresholds

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "catalog.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Trail Pack"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="CORS allowed origins",
    )

    # Catalog
    catalog_path: Path = Field(
        default=DEFAULT_CATALOG_PATH,
        description="Equipment catalog JSON document",
    )

    # Climate classification
    climate_cold_max_c: float = 10.0
    climate_hot_min_c: float = 22.0
    climate_heavy_rain_mm_per_day: float = Field(default=3.0, ge=0)
    climate_heavy_snow_total: float = Field(default=0.4, ge=0)

    # Selection
    autonomy_trip_pack_restriction: bool = False
    default_trip_duration_days: int = Field(default=7, ge=1, le=365)

    # External collaborators
    nominatim_url: str = "https://nominatim.openstreetmap.org/search"
    open_meteo_archive_url: str = "https://archive-api.open-meteo.com/v1/archive"
    user_agent: str = Field(
        default="trail-pack/0.1.0",
        description="User-Agent for outgoing requests (required by Nominatim)",
    )
    request_timeout_seconds: float = Field(default=30.0, gt=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        return str(v).upper()

    @field_validator("climate_hot_min_c")
    @classmethod
    def validate_hot_above_cold(cls, v: float, info) -> float:
        """Ensure the hot threshold sits above the cold one."""
        cold = info.data.get("climate_cold_max_c")
        if cold is not None and v <= cold:
            raise ValueError("climate_hot_min_c must be greater than climate_cold_max_c")
        return v

    @property
    def climate_thresholds(self) -> ClimateThresholds:
        """Climate classification thresholds as a single value."""
        return ClimateThresholds(
            cold_max_c=self.climate_cold_max_c,
            hot_min_c=self.climate_hot_min_c,
            heavy_rain_mm_per_day=self.climate_heavy_rain_mm_per_day,
            heavy_snow_total=self.climate_heavy_snow_total,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()
