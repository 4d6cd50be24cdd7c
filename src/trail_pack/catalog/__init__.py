"""Equipment catalog loading and normalization."""

from trail_pack.catalog.normalizer import (
    normalize,
    normalize_item,
    normalize_list_field,
    parse_raw_list,
)
from trail_pack.catalog.loader import CatalogError, load_catalog

__all__ = [
    "normalize",
    "normalize_item",
    "normalize_list_field",
    "parse_raw_list",
    "CatalogError",
    "load_catalog",
]
