"""Trip planning from a place and a month.

Derives selection criteria from where and when the trip happens:

1. Geocode the address.
2. Fetch last year's daily weather for the trip month.
3. Classify the climate and fold it into the criteria.

The temperature category only fills a climate the user left unset.
Heavy snow or heavy rain always override it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from trail_pack.climate.classifier import classify
from trail_pack.models.climate import (
    ClimateAssessment,
    ClimateCategory,
    ClimateThresholds,
)
from trail_pack.models.location import GeocodedPlace
from trail_pack.models.selection import SelectionCriteria
from trail_pack.providers.nominatim import NominatimGeocoder
from trail_pack.providers.open_meteo import OpenMeteoArchiveProvider

logger = logging.getLogger(__name__)

# Activity assumed when planning from a place without one
DEFAULT_ACTIVITY = "Randonnée"


class PlaceNotFoundError(Exception):
    """Raised when the geocoder does not know the address."""

    def __init__(self, address: str):
        super().__init__(f"Address not found: {address}")
        self.address = address


@dataclass
class PlaceClimate:
    """Criteria derived from a place, with the data they came from."""

    criteria: SelectionCriteria
    place: GeocodedPlace
    assessment: ClimateAssessment


def apply_assessment(
    criteria: SelectionCriteria, assessment: ClimateAssessment
) -> SelectionCriteria:
    """Fold a climate assessment into criteria."""
    climate = criteria.climate or assessment.category.value
    if assessment.heavy_snow:
        climate = ClimateCategory.SNOW.value
    elif assessment.heavy_rain:
        climate = ClimateCategory.RAIN.value

    return criteria.model_copy(
        update={
            "climate": climate,
            "climate_narrative": assessment.narrative,
        }
    )


async def plan_criteria_from_place(
    criteria: SelectionCriteria,
    address: str,
    month: int,
    geocoder: NominatimGeocoder,
    weather: OpenMeteoArchiveProvider,
    thresholds: ClimateThresholds | None = None,
    year: int | None = None,
) -> PlaceClimate:
    """Derive criteria from a trip address and month.

    Args:
        criteria: User criteria; unset fields are filled in
        address: Free-text trip location
        month: Trip month (1-12)
        geocoder: Address resolver
        weather: Weather archive provider
        thresholds: Climate thresholds (defaults to configured values)
        year: Year to sample weather from (defaults to last year)

    Returns:
        PlaceClimate with the completed criteria

    Raises:
        PlaceNotFoundError: If the address is unknown
        InsufficientDataError: If the weather sample cannot be classified
        ProviderError: If a provider request fails
    """
    place = await geocoder.geocode(address)
    if place is None:
        raise PlaceNotFoundError(address)

    sample = await weather.get_month_sample(place.coordinates, month, year=year)
    assessment = classify(sample, thresholds)
    logger.info(
        f"Climate for {place.display_name} in month {month:02d}: "
        f"{assessment.filter_label.value} ({assessment.narrative})"
    )

    updated = apply_assessment(criteria, assessment)
    updated = updated.model_copy(
        update={
            "activity": criteria.activity or DEFAULT_ACTIVITY,
            "place": place.display_name,
            "month": month,
            "destination": None,
        }
    )
    return PlaceClimate(criteria=updated, place=place, assessment=assessment)
