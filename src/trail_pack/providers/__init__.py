"""External data providers (geocoding, weather archive)."""

from trail_pack.providers.base import (
    DataUnavailableError,
    HttpProvider,
    ProviderError,
    RateLimitError,
)
from trail_pack.providers.nominatim import NominatimGeocoder
from trail_pack.providers.open_meteo import OpenMeteoArchiveProvider, month_window

__all__ = [
    "DataUnavailableError",
    "HttpProvider",
    "ProviderError",
    "RateLimitError",
    "NominatimGeocoder",
    "OpenMeteoArchiveProvider",
    "month_window",
]
