"""Climate sample and classification models."""

from __future__ import annotations

from enum import Enum
from typing import Self

from pydantic import BaseModel, Field, model_validator


class ClimateCategory(str, Enum):
    """Coarse climate labels used to restrict weather-dependent gear.

    Values are the labels used in the equipment catalog's `meteo` lists.
    """

    COLD = "Froid"
    TEMPERATE = "Tempéré"
    HOT = "Chaud"
    RAIN = "Pluie"  # Heavy-rain override
    SNOW = "Neige"  # Heavy-snow override


class ClimateThresholds(BaseModel):
    """Tunable thresholds for climate classification."""

    cold_max_c: float = Field(default=10.0, description="Mean temperature at or below = cold")
    hot_min_c: float = Field(default=22.0, description="Mean temperature at or above = hot")
    heavy_rain_mm_per_day: float = Field(
        default=3.0, ge=0, description="Mean daily precipitation at or above = rainy"
    )
    heavy_snow_total: float = Field(
        default=0.4, ge=0, description="Cumulative snowfall above = snow possible"
    )


class ClimateSample(BaseModel):
    """Daily weather observations over a window.

    The three series are parallel: index i of each refers to the same day.
    Missing observations are None.
    """

    temperature_mean_c: list[float | None] = Field(default_factory=list)
    precipitation_sum_mm: list[float | None] = Field(default_factory=list)
    snowfall_sum: list[float | None] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_parallel_series(self) -> Self:
        """Ensure all series have the same length."""
        lengths = {
            len(self.temperature_mean_c),
            len(self.precipitation_sum_mm),
            len(self.snowfall_sum),
        }
        if len(lengths) > 1:
            raise ValueError(
                "Climate series must have the same length "
                f"(temperature={len(self.temperature_mean_c)}, "
                f"precipitation={len(self.precipitation_sum_mm)}, "
                f"snowfall={len(self.snowfall_sum)})"
            )
        return self

    def __len__(self) -> int:
        return len(self.temperature_mean_c)

    @property
    def is_empty(self) -> bool:
        return len(self) == 0


class ClimateAssessment(BaseModel):
    """Result of classifying a climate sample."""

    category: ClimateCategory = Field(..., description="Temperature category")
    heavy_rain: bool = False
    heavy_snow: bool = False
    narrative: str = Field(..., description="Human-readable description, display only")

    mean_temperature_c: float
    mean_precipitation_mm: float
    total_snowfall: float

    @property
    def filter_label(self) -> ClimateCategory:
        """Climate label to filter the catalog with.

        Heavy snow wins over heavy rain, which wins over the temperature
        category.
        """
        if self.heavy_snow:
            return ClimateCategory.SNOW
        if self.heavy_rain:
            return ClimateCategory.RAIN
        return self.category
