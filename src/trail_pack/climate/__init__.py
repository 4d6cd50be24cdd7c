"""Climate classification from weather samples."""

from trail_pack.climate.classifier import (
    InsufficientDataError,
    categorize_temperature,
    classify,
)

__all__ = [
    "InsufficientDataError",
    "categorize_temperature",
    "classify",
]
