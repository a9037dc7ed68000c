"""
Armor module for the armor calculator.

Defines the ProtectiveLayer model, one garment slot with per-category
resistances, and ArmorSet, a named collection of layers worn together.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from armorsim.core.constants import ApparelLayer, BodyPart, DamageType


class ProtectiveLayer(BaseModel):
    """
    Represents one piece of apparel standing between an attack and the body.

    Resistances are fractions (1.0 is 100%) on a nominal 0-2 scale. Several
    entries may share an ``item_name`` when one garment fills more than one
    slot; the engine rolls such an item only once.
    """

    model_config = ConfigDict(frozen=True)

    item_name: str = Field(
        description="The name of the garment, used to detect duplicated entries.",
    )
    layer_name: str = Field(
        default="",
        description="A display label for the slot this entry represents.",
    )
    resistance_piercing: float = Field(
        default=0.0,
        description="Resistance against piercing damage (fraction, 0-2).",
    )
    resistance_blunt: float = Field(
        default=0.0,
        description="Resistance against blunt damage (fraction, 0-2).",
    )
    resistance_thermal: float = Field(
        default=0.0,
        description="Resistance against thermal damage (fraction, 0-2).",
    )
    coverage: frozenset[BodyPart] = Field(
        default_factory=frozenset,
        description="The body regions this layer covers.",
    )
    apparel_layers: tuple[ApparelLayer, ...] = Field(
        default=(),
        description="The apparel tiers this garment occupies.",
    )

    def model_post_init(self, _: Any) -> None:
        """
        Validate the layer's properties.

        Raises:
            AssertionError: If the layer has no item name.

        """
        assert self.item_name and isinstance(
            self.item_name, str
        ), "Layer item name must not be empty."

    @property
    def tier(self) -> ApparelLayer:
        """The outermost tier occupied by this layer (SHELL when unspecified)."""
        if not self.apparel_layers:
            return ApparelLayer.SHELL
        return max(self.apparel_layers, key=lambda layer: layer.tier)

    @property
    def display_name(self) -> str:
        if self.layer_name:
            return f"{self.item_name} ({self.layer_name})"
        return self.item_name

    def resistance_for(self, category: DamageType) -> float:
        """
        Returns the resistance this layer applies against a damage category.

        Args:
            category (DamageType): The category currently carried by the attack.

        Returns:
            float: The resistance fraction for that category.

        """
        if category is DamageType.PIERCING:
            return self.resistance_piercing
        if category is DamageType.BLUNT:
            return self.resistance_blunt
        if category is DamageType.THERMAL:
            return self.resistance_thermal
        raise ValueError(f"Unknown damage category: {category!r}")

    def covers(self, region: BodyPart) -> bool:
        return region in self.coverage


class ArmorSet(BaseModel):
    """A named collection of protective layers worn together."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The name of the armor set.",
    )
    description: str = Field(
        default="",
        description="A brief description of the armor set.",
    )
    layers: tuple[ProtectiveLayer, ...] = Field(
        default=(),
        description="The layers of the set, in any order.",
    )

    @property
    def item_names(self) -> list[str]:
        """Distinct item names, in the order they first appear."""
        return list(dict.fromkeys(layer.item_name for layer in self.layers))
