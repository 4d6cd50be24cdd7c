"""Location models for place-based trip planning."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    """Geographic coordinates in decimal degrees.

    Latitude is positive north of the equator, longitude positive east
    of the prime meridian.
    """

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"


class GeocodedPlace(BaseModel):
    """A place resolved from a free-text address."""

    coordinates: Coordinates
    display_name: str = Field(..., description="Full place name returned by the geocoder")

    @property
    def latitude(self) -> float:
        return self.coordinates.latitude

    @property
    def longitude(self) -> float:
        return self.coordinates.longitude
