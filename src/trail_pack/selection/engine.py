"""Equipment selection engine.

Filters a normalized catalog against trip criteria and computes how many
units of each retained item to pack.

## Filters

Each item goes through the filters below in order. The first failing
filter rejects the item; later filters rely on earlier ones having
removed irrelevant items.

1. activity: the item declares the activity, or its category contains
   it. Items that declare no activity at all and belong to a generic
   family (lighting, hydration, hygiene...) are kept for any activity.
2. seasonal: on a plain hiking trip, ski-touring and avalanche gear is
   removed even if it matched the activity.
3. climate: items restricted to some climates must list the trip's.
4. autonomy: when the trip is not self-sufficient, autonomy-only items
   are removed.
5. tech_level: items above the trip's technical ceiling are removed.

## Quantities

Items flagged `days_dependent` (food rations, socks...) are packed once
per trip day; everything else once.

Example:
    ```python
    result = select(catalog, SelectionCriteria(
        activity="Trek",
        climate="Froid",
        autonomy_required=True,
        tech_level_ceiling=2,
        trip_duration_days=10,
    ))
    for line in result.items:
        print(f"{line.quantity} x {line.item.display_name}")
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from trail_pack.models.equipment import BASE_PACK, EquipmentItem, is_autonomy_pack
from trail_pack.models.selection import SelectedItem, SelectionCriteria, SelectionResult

logger = logging.getLogger(__name__)

# Families useful whatever the activity, matched as substrings of the item family
GENERIC_FAMILIES = (
    "électronique",
    "cuisine / hydratation",
    "soin / hygiène / divers",
    "sacs / organisation",
    "accessoires tête/mains/pieds",
    "couchage",
)

# The catalog's base trekking activity
HIKING_ACTIVITY = "randonnée"
SKI_TOURING_ACTIVITY = "ski rando"

# Ski and avalanche gear, matched as substrings of model + details
SKI_KEYWORDS = (
    "ski",
    "backland",
    "maestrale",
    "dva",
    "arva",
    "pelle avalanche",
    "sonde avalanche",
    "peaux",
    "couteaux de ski",
)


@dataclass(frozen=True)
class _FilterContext:
    """Criteria prepared once per selection call."""

    criteria: SelectionCriteria
    activity: str | None
    climate: str | None
    restrict_autonomy_packs: bool = False

    @classmethod
    def build(
        cls, criteria: SelectionCriteria, restrict_autonomy_packs: bool = False
    ) -> _FilterContext:
        return cls(
            criteria=criteria,
            activity=criteria.activity.lower() if criteria.activity else None,
            climate=criteria.climate.lower() if criteria.climate else None,
            restrict_autonomy_packs=restrict_autonomy_packs,
        )


def _activities(item: EquipmentItem) -> list[str]:
    return [a.lower() for a in item.activities]


def is_generic_family(family: str) -> bool:
    """Check if a family is useful across all activities."""
    family = family.lower()
    return any(generic in family for generic in GENERIC_FAMILIES)


def _matches_activity(item: EquipmentItem, ctx: _FilterContext) -> bool:
    if ctx.activity is None:
        return True
    activities = _activities(item)
    if ctx.activity in activities or ctx.activity in item.category.lower():
        return True
    # An item that declares other activities is never generic
    return not activities and is_generic_family(item.family)


def _is_ski_gear(item: EquipmentItem) -> bool:
    if SKI_TOURING_ACTIVITY in _activities(item):
        return True
    text = f"{item.model} {item.details}".lower()
    return any(keyword in text for keyword in SKI_KEYWORDS)


def _passes_seasonal_exclusion(item: EquipmentItem, ctx: _FilterContext) -> bool:
    if ctx.activity != HIKING_ACTIVITY:
        return True
    return not _is_ski_gear(item)


def _matches_climate(item: EquipmentItem, ctx: _FilterContext) -> bool:
    if ctx.climate is None or not item.meteo:
        return True
    return ctx.climate in (m.lower() for m in item.meteo)


def _matches_autonomy(item: EquipmentItem, ctx: _FilterContext) -> bool:
    required = ctx.criteria.autonomy_required
    if required is False:
        return not (item.autonomy_only or item.in_autonomy_pack())
    if required is True and ctx.restrict_autonomy_packs:
        return any(p.lower() == BASE_PACK.lower() or is_autonomy_pack(p) for p in item.packs)
    return True


def _within_tech_level(item: EquipmentItem, ctx: _FilterContext) -> bool:
    return item.tech_level <= ctx.criteria.tech_level_ceiling


ITEM_FILTERS: tuple[tuple[str, Callable[[EquipmentItem, _FilterContext], bool]], ...] = (
    ("activity", _matches_activity),
    ("seasonal", _passes_seasonal_exclusion),
    ("climate", _matches_climate),
    ("autonomy", _matches_autonomy),
    ("tech_level", _within_tech_level),
)


def _first_failure(item: EquipmentItem, ctx: _FilterContext) -> str | None:
    for name, check in ITEM_FILTERS:
        if not check(item, ctx):
            return name
    return None


def first_failed_filter(
    item: EquipmentItem,
    criteria: SelectionCriteria,
    *,
    restrict_autonomy_packs: bool = False,
) -> str | None:
    """Name of the first filter rejecting the item, or None if it passes."""
    return _first_failure(item, _FilterContext.build(criteria, restrict_autonomy_packs))


def item_passes(
    item: EquipmentItem,
    criteria: SelectionCriteria,
    *,
    restrict_autonomy_packs: bool = False,
) -> bool:
    """Check if an item passes every filter."""
    return (
        first_failed_filter(item, criteria, restrict_autonomy_packs=restrict_autonomy_packs)
        is None
    )


def item_quantity(item: EquipmentItem, criteria: SelectionCriteria) -> int:
    """Number of units to pack for the trip."""
    return criteria.trip_duration_days if item.days_dependent else 1


def select(
    catalog: Iterable[EquipmentItem],
    criteria: SelectionCriteria,
    *,
    restrict_autonomy_packs: bool = False,
) -> SelectionResult:
    """Select the items to pack for a trip.

    Args:
        catalog: Normalized catalog items (not modified)
        criteria: Trip criteria
        restrict_autonomy_packs: On autonomy trips, keep only items from the
            Base pack or an autonomy pack

    Returns:
        SelectionResult with items in catalog order and aggregate totals
    """
    ctx = _FilterContext.build(criteria, restrict_autonomy_packs)

    selected: list[SelectedItem] = []
    total_quantity = 0
    total_weight = 0.0
    unknown_weight = 0

    for item in catalog:
        failed = _first_failure(item, ctx)
        if failed is not None:
            logger.debug(f"Rejected {item.display_name or item.category!r}: {failed}")
            continue

        line = SelectedItem(item=item, quantity=item_quantity(item, criteria))
        selected.append(line)
        total_quantity += line.quantity
        if line.line_weight_g is None:
            unknown_weight += 1
        else:
            total_weight += line.line_weight_g

    logger.debug(f"Selected {len(selected)} items ({total_quantity} units)")

    return SelectionResult(
        items=selected,
        total_quantity=total_quantity,
        total_weight_g=total_weight,
        unknown_weight_count=unknown_weight,
    )
