"""Catalog normalization.

Raw catalog records come from a hand-maintained JSON document and are
loosely typed. The same list field may arrive as:

- a real JSON list: `["Trek", "Randonnée"]`
- a comma-separated string: `"Trek, Randonnée"`
- a serialized list in a string: `"['Trek', 'Randonnée']"`
- a single scalar: `3`
- nothing at all: `null` or absent

Each raw list value is first parsed into one of the variants below, and
each variant knows how to turn itself into tokens. Every token is then
trimmed, stripped of surrounding quotes, and dropped if empty.

Normalization never raises. Malformed values degrade to empty lists or
defaults, and the degradation is logged at WARNING level.

Example:
    ```python
    items = normalize([
        {"category": "Frontale", "activities": "Trek, Randonnée", "tech_level": "2"},
    ])
    assert items[0].activities == ["Trek", "Randonnée"]
    assert items[0].tech_level == 2
    ```
"""

from __future__ import annotations

import ast
import logging
import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from trail_pack.models.equipment import EquipmentItem, is_autonomy_pack

logger = logging.getLogger(__name__)

LIST_FIELDS = ("activities", "packs", "meteo")
TEXT_FIELDS = ("category", "family", "brand", "model", "details")

# Whitespace and quote characters at either end of a token
_TOKEN_EDGES = re.compile(r"^[\s'\"]+|[\s'\"]+$")

_FALSE_STRINGS = frozenset({"", "0", "false", "no", "non", "none", "null"})


def _clean_tokens(tokens: Iterable[str]) -> list[str]:
    """Trim tokens, strip surrounding quotes, drop empty ones."""
    cleaned = (_TOKEN_EDGES.sub("", token) for token in tokens)
    return [token for token in cleaned if token]


@dataclass(frozen=True)
class Missing:
    """Absent or blank value."""

    def tokens(self) -> list[str]:
        return []


@dataclass(frozen=True)
class Scalar:
    """A single non-list, non-string value."""

    value: Any

    def tokens(self) -> list[str]:
        return _clean_tokens([str(self.value)])


@dataclass(frozen=True)
class DelimitedString:
    """A comma-separated string."""

    text: str

    def tokens(self) -> list[str]:
        return _clean_tokens(self.text.split(","))


@dataclass(frozen=True)
class BracketedString:
    """A string that looks like a serialized list, e.g. `"['a', 'b']"`."""

    text: str

    def tokens(self) -> list[str]:
        try:
            parsed = ast.literal_eval(self.text)
        except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError):
            # Not a valid literal: split the bracket interior instead
            return _clean_tokens(self.text[1:-1].split(","))
        return parse_raw_list(parsed).tokens()


@dataclass(frozen=True)
class NativeList:
    """An actual list (or tuple) of values."""

    values: tuple[Any, ...]

    def tokens(self) -> list[str]:
        return _clean_tokens(str(v) for v in self.values if v is not None)


RawList = Missing | Scalar | DelimitedString | BracketedString | NativeList


def parse_raw_list(value: Any) -> RawList:
    """Classify a raw list-field value into its variant."""
    if value is None:
        return Missing()
    if isinstance(value, (list, tuple)):
        return NativeList(tuple(value))
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return Missing()
        if text.startswith("[") and text.endswith("]"):
            return BracketedString(text)
        return DelimitedString(text)
    return Scalar(value)


def normalize_list_field(value: Any) -> list[str]:
    """Normalize a raw list-field value into a list of clean strings."""
    return parse_raw_list(value).tokens()


def _coerce_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _coerce_flag(value: Any) -> bool:
    """Truthiness coercion that also understands textual booleans."""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


def _coerce_tech_level(value: Any) -> int:
    """Technical level, defaulting to 1 when absent, zero, or not a number."""
    if value is None:
        return 1
    if isinstance(value, bool):
        logger.warning(f"Ignoring boolean tech_level {value!r}, using 1")
        return 1
    try:
        level = int(float(value))
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Ignoring non-numeric tech_level {value!r}, using 1")
        return 1
    return level if level >= 1 else 1


def _coerce_weight(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        weight = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric weight {value!r}")
        return None
    if math.isnan(weight) or math.isinf(weight) or weight < 0:
        logger.warning(f"Ignoring invalid weight {value!r}")
        return None
    return weight


def normalize_item(raw: Any) -> EquipmentItem:
    """Normalize one raw catalog record.

    Accepts a mapping (raw JSON object) or an already-normalized
    `EquipmentItem`, in which case the result equals the input.
    """
    if isinstance(raw, EquipmentItem):
        raw = raw.model_dump()
    if not isinstance(raw, Mapping):
        logger.warning(f"Catalog record is not an object ({type(raw).__name__}), using defaults")
        raw = {}

    texts = {name: _coerce_text(raw.get(name)) for name in TEXT_FIELDS}
    lists = {name: normalize_list_field(raw.get(name)) for name in LIST_FIELDS}

    autonomy_flag = _coerce_flag(raw.get("autonomy_only")) or _coerce_flag(raw.get("autonomy"))
    autonomy_only = autonomy_flag or any(is_autonomy_pack(p) for p in lists["packs"])

    tech_raw = raw.get("tech_level", raw.get("techLevel"))

    return EquipmentItem(
        **texts,
        **lists,
        tech_level=_coerce_tech_level(tech_raw),
        autonomy_only=autonomy_only,
        days_dependent=_coerce_flag(raw.get("days_dependent")),
        weight_g=_coerce_weight(raw.get("weight_g")),
    )


def normalize(raw_items: Iterable[Any] | None) -> list[EquipmentItem]:
    """Normalize a sequence of raw catalog records.

    Args:
        raw_items: Loosely-typed records (or already-normalized items)

    Returns:
        Canonical items, in input order
    """
    if raw_items is None:
        return []
    return [normalize_item(raw) for raw in raw_items]
