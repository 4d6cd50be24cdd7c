"""OpenStreetMap Nominatim geocoder.

## API Documentation Summary
Source: https://nominatim.org/release-docs/latest/api/Search/

## Request
`GET /search?format=json&limit=1&q=<free text>`

A User-Agent identifying the application is mandatory; requests without
one are rejected.

## Response Format
```json
[
  {
    "lat": "42.1497",
    "lon": "9.1100",
    "display_name": "Corse, France métropolitaine, France",
    ...
  }
]
```

An empty array means the address was not found. Coordinates are strings.
"""

from __future__ import annotations

import logging
from typing import Any

from trail_pack.models.location import Coordinates, GeocodedPlace
from trail_pack.providers.base import HttpProvider, ProviderError

logger = logging.getLogger(__name__)


class NominatimGeocoder(HttpProvider):
    """Resolve free-text addresses to coordinates.

    Example:
        ```python
        async with NominatimGeocoder(user_agent="my-app/1.0") as geocoder:
            place = await geocoder.geocode("Refuge du Goûter")
        ```
    """

    name = "nominatim"
    base_url = "https://nominatim.openstreetmap.org/search"

    def __init__(self, *args: Any, language: str = "fr", **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.language = language

    async def geocode(self, address: str) -> GeocodedPlace | None:
        """Resolve an address.

        Args:
            address: Free-text address or place name

        Returns:
            The best match, or None if the address is unknown

        Raises:
            ProviderError: If the request fails or the response is malformed
        """
        address = address.strip()
        if not address:
            return None

        data = await self._fetch_json(
            self.base_url,
            params={"format": "json", "limit": 1, "q": address},
            headers={"Accept-Language": self.language},
        )
        place = self._translate_response(data)
        if place is None:
            logger.info(f"Address not found: {address!r}")
        return place

    def _translate_response(self, response_data: Any) -> GeocodedPlace | None:
        """Translate a Nominatim search response to a GeocodedPlace."""
        if not isinstance(response_data, list) or not response_data:
            return None

        first = response_data[0]
        try:
            coordinates = Coordinates(
                latitude=float(first["lat"]),
                longitude=float(first["lon"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(
                f"Unexpected geocoding result: {e}",
                provider=self.name,
                response_body=str(first),
            ) from e

        return GeocodedPlace(
            coordinates=coordinates,
            display_name=first.get("display_name") or str(coordinates),
        )
