"""Destination presets.

A preset pre-fills trip criteria for a well-known destination. Presets
only fill in what the user left unset, except the technical level which
always follows the destination.
"""

from __future__ import annotations

from trail_pack.models.climate import ClimateCategory
from trail_pack.models.selection import DestinationPreset, SelectionCriteria


def _preset(key: str, label: str, activity: str, climate: ClimateCategory,
            autonomy: bool, tech_level: int) -> DestinationPreset:
    return DestinationPreset(
        key=key,
        label=label,
        activity=activity,
        climate=climate.value,
        autonomy=autonomy,
        tech_level=tech_level,
    )


DEFAULT_PRESETS: dict[str, DestinationPreset] = {
    p.key: p
    for p in (
        _preset("gr20", "GR20 autonomie", "Trek", ClimateCategory.COLD, True, 2),
        _preset("compostelle", "Compostelle", "Randonnée", ClimateCategory.TEMPERATE, False, 1),
        _preset("thailande", "Thaïlande", "Tropical", ClimateCategory.HOT, False, 1),
        _preset("alpes", "Alpes (rando)", "Randonnée", ClimateCategory.COLD, False, 2),
        _preset("alpinisme", "Chamonix (alpinisme)", "Alpinisme", ClimateCategory.COLD, False, 3),
        _preset("ski", "Ski de rando", "Ski rando", ClimateCategory.SNOW, False, 3),
    )
}


def get_preset(
    key: str, presets: dict[str, DestinationPreset] | None = None
) -> DestinationPreset | None:
    """Look up a preset by key (case-insensitive)."""
    presets = DEFAULT_PRESETS if presets is None else presets
    return presets.get(key.strip().lower())


def apply_preset(criteria: SelectionCriteria, preset: DestinationPreset) -> SelectionCriteria:
    """Return criteria pre-filled from a destination preset.

    Activity, climate and autonomy are only taken from the preset when the
    criteria leave them unset. The technical level always comes from the
    preset.
    """
    updates: dict = {
        "destination": preset.key,
        "tech_level_ceiling": preset.tech_level,
    }
    if not criteria.activity and preset.activity:
        updates["activity"] = preset.activity
    if not criteria.climate and preset.climate:
        updates["climate"] = preset.climate
    if criteria.autonomy_required is None and preset.autonomy is not None:
        updates["autonomy_required"] = preset.autonomy
    return criteria.model_copy(update=updates)
