"""Open-Meteo historical weather archive provider.

## API Documentation Summary
Source: https://open-meteo.com/en/docs/historical-weather-api

## Request
```
GET /v1/archive?latitude=..&longitude=..&start_date=YYYY-MM-DD&end_date=YYYY-MM-DD
    &daily=temperature_2m_mean,precipitation_sum,snowfall_sum&timezone=auto
```

## Response Format
```json
{
  "daily": {
    "time": ["2024-07-01", "2024-07-02", ...],
    "temperature_2m_mean": [14.2, null, ...],
    "precipitation_sum": [0.0, 3.4, ...],
    "snowfall_sum": [0.0, 0.0, ...]
  }
}
```

## Variable Translation (Open-Meteo -> Canonical)
| Open-Meteo Field | Canonical Field | Unit |
|------------------|-----------------|------|
| temperature_2m_mean | temperature_mean_c | °C |
| precipitation_sum | precipitation_sum_mm | mm |
| snowfall_sum | snowfall_sum | cm |

Missing values are null. Series shorter than `time` are padded with None.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date
from typing import Any

from trail_pack.models.climate import ClimateSample
from trail_pack.models.location import Coordinates
from trail_pack.providers.base import DataUnavailableError, HttpProvider

logger = logging.getLogger(__name__)

DAILY_VARIABLES = ("temperature_2m_mean", "precipitation_sum", "snowfall_sum")


def month_window(year: int, month: int) -> tuple[date, date]:
    """First and last day of a calendar month."""
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def _series(daily: dict[str, Any], key: str, length: int) -> list[float | None]:
    values = daily.get(key) or []
    if not isinstance(values, list):
        values = []
    padded = [v if isinstance(v, (int, float)) and not isinstance(v, bool) else None
              for v in values[:length]]
    padded.extend([None] * (length - len(padded)))
    return padded


class OpenMeteoArchiveProvider(HttpProvider):
    """Daily weather history from the Open-Meteo archive.

    Example:
        ```python
        async with OpenMeteoArchiveProvider() as weather:
            sample = await weather.get_month_sample(coordinates, month=7)
        ```
    """

    name = "open_meteo"
    base_url = "https://archive-api.open-meteo.com/v1/archive"

    async def get_climate_sample(
        self,
        coordinates: Coordinates,
        start: date,
        end: date,
    ) -> ClimateSample:
        """Fetch daily observations for a date window.

        Raises:
            DataUnavailableError: If the archive has no data for the window
            ProviderError: If the request fails
        """
        params = {
            "latitude": round(coordinates.latitude, 4),
            "longitude": round(coordinates.longitude, 4),
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
            "daily": ",".join(DAILY_VARIABLES),
            "timezone": "auto",
        }
        data = await self._fetch_json(self.base_url, params=params)
        sample = self._translate_response(data)
        logger.debug(f"Fetched {len(sample)} days of weather for {coordinates}")
        return sample

    async def get_month_sample(
        self,
        coordinates: Coordinates,
        month: int,
        year: int | None = None,
    ) -> ClimateSample:
        """Fetch one calendar month of observations.

        Args:
            coordinates: Location
            month: Month number (1-12)
            year: Year to sample; defaults to last year, the latest complete one
        """
        if year is None:
            year = date.today().year - 1
        start, end = month_window(year, month)
        return await self.get_climate_sample(coordinates, start, end)

    def _translate_response(self, response_data: Any) -> ClimateSample:
        """Translate an archive response to a ClimateSample."""
        daily = response_data.get("daily") if isinstance(response_data, dict) else None
        days = daily.get("time") if isinstance(daily, dict) else None
        if not days:
            raise DataUnavailableError(
                "Weather data unavailable for the requested window",
                provider=self.name,
            )

        length = len(days)
        return ClimateSample(
            temperature_mean_c=_series(daily, "temperature_2m_mean", length),
            precipitation_sum_mm=_series(daily, "precipitation_sum", length),
            snowfall_sum=_series(daily, "snowfall_sum", length),
        )
