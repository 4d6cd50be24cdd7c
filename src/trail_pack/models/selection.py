"""Selection criteria and result models."""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from trail_pack.models.equipment import EquipmentItem


class SelectionCriteria(BaseModel):
    """Criteria for one selection request.

    Only activity, climate, autonomy, tech level and duration drive the
    filtering. The remaining fields record where the criteria came from
    and are used for display only.
    """

    activity: str | None = Field(default=None, description="Activity label (e.g., 'Trek')")
    climate: str | None = Field(default=None, description="Climate label (e.g., 'Froid')")
    autonomy_required: bool | None = Field(
        default=None, description="Self-sufficiency trip: None = unspecified"
    )
    tech_level_ceiling: int = Field(default=1, ge=1, description="Highest technical tier")
    trip_duration_days: int = Field(default=1, ge=1, description="Trip length in days")

    # Provenance (display only)
    place: str | None = Field(default=None, description="Resolved place name")
    destination: str | None = Field(default=None, description="Destination preset key")
    month: int | None = Field(default=None, ge=1, le=12, description="Trip month")
    month_end: int | None = Field(
        default=None, ge=1, le=12, description="Last month when the trip spans several"
    )
    climate_narrative: str | None = Field(
        default=None, description="Climate description derived from weather data"
    )


class SelectedItem(BaseModel):
    """A catalog item retained by the selection, with its pack quantity."""

    item: EquipmentItem
    quantity: int = Field(..., ge=1)

    @computed_field
    @property
    def line_weight_g(self) -> float | None:
        """Weight of all units, or None when the item weight is unknown."""
        if self.item.weight_g is None:
            return None
        return self.item.weight_g * self.quantity


class SelectionResult(BaseModel):
    """Filtered, quantity-annotated items for one selection request."""

    items: list[SelectedItem] = Field(default_factory=list)
    total_quantity: int = Field(default=0, description="Sum of quantities")
    total_weight_g: float = Field(
        default=0.0, description="Sum of known line weights in grams"
    )
    unknown_weight_count: int = Field(
        default=0, description="Items with no declared weight (excluded from total)"
    )

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items


class DestinationPreset(BaseModel):
    """Named default criteria for a well-known destination."""

    key: str
    label: str = Field(..., description="Display label (e.g., 'GR20 autonomie')")
    activity: str | None = None
    climate: str | None = None
    autonomy: bool | None = None
    tech_level: int = Field(default=1, ge=1)
