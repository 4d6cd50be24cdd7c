"""Equipment selection: filtering, quantities, presets and summaries."""

from trail_pack.selection.engine import (
    GENERIC_FAMILIES,
    SKI_KEYWORDS,
    first_failed_filter,
    is_generic_family,
    item_passes,
    item_quantity,
    select,
)
from trail_pack.selection.presets import DEFAULT_PRESETS, apply_preset, get_preset
from trail_pack.selection.summary import NO_FILTER_TEXT, SEPARATOR, summarize

__all__ = [
    "GENERIC_FAMILIES",
    "SKI_KEYWORDS",
    "first_failed_filter",
    "is_generic_family",
    "item_passes",
    "item_quantity",
    "select",
    "DEFAULT_PRESETS",
    "apply_preset",
    "get_preset",
    "NO_FILTER_TEXT",
    "SEPARATOR",
    "summarize",
]
