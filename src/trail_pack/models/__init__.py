"""Domain models for trip equipment selection."""

from trail_pack.models.location import Coordinates, GeocodedPlace
from trail_pack.models.equipment import (
    AUTONOMY_PACK,
    BASE_PACK,
    EquipmentItem,
    is_autonomy_pack,
)
from trail_pack.models.climate import (
    ClimateAssessment,
    ClimateCategory,
    ClimateSample,
    ClimateThresholds,
)
from trail_pack.models.selection import (
    DestinationPreset,
    SelectedItem,
    SelectionCriteria,
    SelectionResult,
)

__all__ = [
    # Location
    "Coordinates",
    "GeocodedPlace",
    # Equipment
    "AUTONOMY_PACK",
    "BASE_PACK",
    "EquipmentItem",
    "is_autonomy_pack",
    # Climate
    "ClimateAssessment",
    "ClimateCategory",
    "ClimateSample",
    "ClimateThresholds",
    # Selection
    "DestinationPreset",
    "SelectedItem",
    "SelectionCriteria",
    "SelectionResult",
]
