"""Criteria summary builder."""

from __future__ import annotations

from trail_pack.models.selection import (
    DestinationPreset,
    SelectionCriteria,
    SelectionResult,
)
from trail_pack.selection.presets import DEFAULT_PRESETS

SEPARATOR = " · "
NO_FILTER_TEXT = "No filter applied."


def _format_months(criteria: SelectionCriteria) -> str | None:
    if criteria.month is None:
        return None
    text = f"{criteria.month:02d}"
    if criteria.month_end is not None and criteria.month_end != criteria.month:
        text += f"–{criteria.month_end:02d}"
    return text


def summarize(
    criteria: SelectionCriteria | None,
    result: SelectionResult | None = None,
    presets: dict[str, DestinationPreset] | None = None,
) -> str:
    """Build a one-line digest of the active criteria and the result size.

    Args:
        criteria: Criteria used for the selection, or None if nothing was selected
        result: Selection result; its total quantity is reported as the item count
        presets: Presets used to resolve the destination label

    Returns:
        Summary parts joined with " · "
    """
    if criteria is None:
        return NO_FILTER_TEXT
    presets = DEFAULT_PRESETS if presets is None else presets

    parts: list[str] = []
    if criteria.place:
        parts.append(f"Place: {criteria.place}")
    if criteria.destination and criteria.destination in presets:
        parts.append(presets[criteria.destination].label)
    if criteria.activity:
        parts.append(f"Activity: {criteria.activity}")
    if criteria.climate:
        parts.append(f"Climate: {criteria.climate}")
    months = _format_months(criteria)
    if months:
        parts.append(f"Month: {months}")
    if criteria.autonomy_required is not None:
        parts.append(f"Autonomy: {'yes' if criteria.autonomy_required else 'no'}")
    parts.append(f"Tech ≤ {criteria.tech_level_ceiling}")
    parts.append(f"Duration: {criteria.trip_duration_days} days")
    if criteria.climate_narrative:
        parts.append(f"Conditions: {criteria.climate_narrative}")
    parts.append(f"Items: {result.total_quantity if result is not None else 0}")

    return SEPARATOR.join(parts)
