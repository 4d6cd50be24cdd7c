"""Equipment catalog models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Pack labels as they appear in the catalog
BASE_PACK = "Base"
AUTONOMY_PACK = "Autonomie"


def is_autonomy_pack(label: str) -> bool:
    """Check if a pack label designates a self-sufficiency pack."""
    return AUTONOMY_PACK.lower() in label.lower()


class EquipmentItem(BaseModel):
    """A canonical catalog item.

    Instances are produced by `trail_pack.catalog.normalizer` and are
    immutable. List-valued fields always hold trimmed, non-empty strings.
    """

    model_config = ConfigDict(frozen=True)

    category: str = Field(default="", description="Catalog category (e.g., 'Frontale')")
    family: str = Field(default="", description="Equipment family (e.g., 'Électronique')")
    brand: str = ""
    model: str = ""
    details: str = ""

    activities: list[str] = Field(
        default_factory=list, description="Activities this item is meant for; empty = generic"
    )
    packs: list[str] = Field(
        default_factory=list, description="Pack groups (e.g., 'Base', 'Autonomie')"
    )
    meteo: list[str] = Field(
        default_factory=list, description="Climate labels this item is restricted to; empty = any"
    )

    tech_level: int = Field(
        default=1, ge=1, description="Minimum technical tier that needs this item"
    )
    autonomy_only: bool = Field(
        default=False, description="Only relevant on self-sufficiency trips"
    )
    days_dependent: bool = Field(
        default=False, description="Quantity scales with trip duration"
    )
    weight_g: float | None = Field(default=None, ge=0, description="Unit weight in grams")

    @property
    def display_name(self) -> str:
        """Brand and model as shown on a checklist."""
        return f"{self.brand} {self.model}".strip()

    def in_autonomy_pack(self) -> bool:
        """Check if the item belongs to an autonomy-labelled pack."""
        return any(is_autonomy_pack(p) for p in self.packs)
