"""Climate classification from daily weather observations.

A window of daily observations (typically one month of last year's
archive for the trip location) is reduced to a coarse category plus two
flags:

- mean daily temperature -> Cold (<= cold_max_c), Hot (>= hot_min_c),
  otherwise Temperate
- mean daily precipitation over the whole window >= heavy_rain_mm_per_day
  -> heavy rain
- cumulative snowfall > heavy_snow_total -> heavy snow

Missing observations (None, NaN, infinite) are left out of the
temperature mean. A day without a precipitation reading counts as a dry day.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from trail_pack.config import get_settings
from trail_pack.models.climate import (
    ClimateAssessment,
    ClimateCategory,
    ClimateSample,
    ClimateThresholds,
)


class InsufficientDataError(Exception):
    """Raised when a sample cannot produce a climate label."""

    def __init__(self, message: str, sample_size: int = 0):
        super().__init__(message)
        self.sample_size = sample_size


def _numeric(values: Iterable[float | None]) -> list[float]:
    return [
        float(v)
        for v in values
        if isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v)
    ]


def categorize_temperature(
    mean_temperature_c: float, thresholds: ClimateThresholds
) -> ClimateCategory:
    """Map a mean temperature to Cold / Temperate / Hot."""
    if mean_temperature_c >= thresholds.hot_min_c:
        return ClimateCategory.HOT
    if mean_temperature_c <= thresholds.cold_max_c:
        return ClimateCategory.COLD
    return ClimateCategory.TEMPERATE


def _build_narrative(mean_temperature_c: float, heavy_rain: bool, heavy_snow: bool) -> str:
    parts = [f"mean temp ≈ {mean_temperature_c:.1f} °C"]
    if heavy_rain:
        parts.append("rainy")
    if heavy_snow:
        parts.append("snow possible")
    return ", ".join(parts)


def classify(
    sample: ClimateSample,
    thresholds: ClimateThresholds | None = None,
) -> ClimateAssessment:
    """Classify a climate sample.

    Args:
        sample: Daily observations
        thresholds: Classification thresholds (defaults to configured values)

    Returns:
        ClimateAssessment; use `filter_label` to filter the catalog

    Raises:
        InsufficientDataError: If the sample is empty or has no temperature data
    """
    if thresholds is None:
        thresholds = get_settings().climate_thresholds

    if sample.is_empty:
        raise InsufficientDataError("Climate sample is empty", sample_size=0)

    temperatures = _numeric(sample.temperature_mean_c)
    if not temperatures:
        raise InsufficientDataError(
            "Climate sample has no temperature observations", sample_size=len(sample)
        )
    precipitation = _numeric(sample.precipitation_sum_mm)
    snowfall = _numeric(sample.snowfall_sum)

    mean_temperature = sum(temperatures) / len(temperatures)
    mean_precipitation = sum(precipitation) / len(sample)
    total_snowfall = sum(snowfall)

    heavy_rain = mean_precipitation >= thresholds.heavy_rain_mm_per_day
    heavy_snow = total_snowfall > thresholds.heavy_snow_total

    return ClimateAssessment(
        category=categorize_temperature(mean_temperature, thresholds),
        heavy_rain=heavy_rain,
        heavy_snow=heavy_snow,
        narrative=_build_narrative(mean_temperature, heavy_rain, heavy_snow),
        mean_temperature_c=mean_temperature,
        mean_precipitation_mm=mean_precipitation,
        total_snowfall=total_snowfall,
    )
