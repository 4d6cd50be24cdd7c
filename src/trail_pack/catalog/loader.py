"""Equipment catalog loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from trail_pack.catalog.normalizer import normalize
from trail_pack.models.equipment import EquipmentItem

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when the catalog document cannot be read."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = path


def load_catalog(path: Path | str) -> list[EquipmentItem]:
    """Load and normalize the equipment catalog from a JSON file.

    The document must be a JSON array of item objects. Individual items
    are normalized leniently; only an unreadable document is an error.

    Args:
        path: Path to the catalog JSON document

    Returns:
        Normalized catalog items

    Raises:
        CatalogError: If the file is missing, not UTF-8 text, not JSON, or not
            a JSON array
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}", path=path) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog {path} is not valid JSON: {e}", path=path) from e

    if not isinstance(data, list):
        raise CatalogError(
            f"Catalog {path} must be a JSON array, got {type(data).__name__}",
            path=path,
        )

    items = normalize(data)
    logger.info(f"Loaded {len(items)} catalog items from {path}")
    return items
