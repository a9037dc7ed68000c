"""
Per-layer outcome resolution.

A layer rolls a number in [0, 100) against its effective resistance (the
resistance left after penetration, in percent):

- below half the effective resistance the hit is deflected (no damage passes);
- between half and the full effective resistance the hit is partially
  deflected (half the damage passes, piercing damage turns blunt);
- otherwise the hit goes through untouched.
"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

from armorsim.core.constants import (
    MAX_EFFECTIVE_RESISTANCE,
    PARTIAL_DAMAGE_FACTOR,
    DamageType,
    NiceEnum,
)
from armorsim.core.utils import clamp


class LayerOutcome(NiceEnum):
    """The three randomized outcomes of a single layer check."""

    DEFLECT = "DEFLECT"
    PARTIAL = "PARTIAL"
    THROUGH = "THROUGH"

    @property
    def multiplier(self) -> float:
        """Fraction of the carried damage that passes this outcome."""
        return {
            LayerOutcome.DEFLECT: 0.0,
            LayerOutcome.PARTIAL: PARTIAL_DAMAGE_FACTOR,
            LayerOutcome.THROUGH: 1.0,
        }[self]


def effective_resistance(resistance: float, penetration: float) -> float:
    """
    Computes the effective resistance of a layer, in percent.

    Args:
        resistance (float):
            The layer's resistance for the carried category (fraction).
            Negative values count as no resistance.
        penetration (float):
            The attack's penetration (fraction), clamped to [0, 1].

    Returns:
        float:
            The effective resistance in [0, 100].

    """
    penetration = clamp(penetration, 0.0, 1.0)
    effective = max(resistance - penetration, 0.0) * 100
    return clamp(effective, 0.0, MAX_EFFECTIVE_RESISTANCE)


def convert_category(category: DamageType, outcome: LayerOutcome) -> DamageType:
    """
    Returns the category carried past a layer after the given outcome.

    Only a partially deflected piercing hit changes category: it continues as
    blunt damage. The conversion applies to the layers that follow, never to
    the check that produced it.
    """
    if outcome is LayerOutcome.PARTIAL and category is DamageType.PIERCING:
        return DamageType.BLUNT
    return category


class LayerResolution(BaseModel):
    """Outcome probabilities of one layer check, given the hit reached it."""

    model_config = ConfigDict(frozen=True)

    category: DamageType = Field(
        description="The category used for this check.",
    )
    effective_resistance: float = Field(
        description="Effective resistance in percent (0-100).",
    )
    deflect: float = Field(
        description="Probability that the hit is fully deflected.",
    )
    partial: float = Field(
        description="Probability that the hit is partially deflected.",
    )
    through: float = Field(
        description="Probability that the hit passes untouched.",
    )

    @property
    def total(self) -> float:
        return self.deflect + self.partial + self.through

    def probability(self, outcome: LayerOutcome) -> float:
        if outcome is LayerOutcome.DEFLECT:
            return self.deflect
        if outcome is LayerOutcome.PARTIAL:
            return self.partial
        if outcome is LayerOutcome.THROUGH:
            return self.through
        raise ValueError(f"Unknown layer outcome: {outcome!r}")

    def branches(self) -> Iterator[tuple[LayerOutcome, float, DamageType]]:
        """
        Yields (outcome, probability, next category) for every outcome that
        can actually happen.
        """
        for outcome in LayerOutcome:
            probability = self.probability(outcome)
            if probability > 0.0:
                yield outcome, probability, convert_category(self.category, outcome)


def resolve_layer(
    resistance: float,
    penetration: float,
    category: DamageType,
) -> LayerResolution:
    """
    Resolves a single layer check.

    Args:
        resistance (float):
            The layer's resistance for ``category``.
        penetration (float):
            The attack's penetration; not consumed by the layer.
        category (DamageType):
            The category carried by the hit when it reaches this layer.

    Returns:
        LayerResolution:
            The deflect, partial and through probabilities.

    """
    effective = effective_resistance(resistance, penetration)
    deflect = effective / 200
    partial = effective / 200
    through = (MAX_EFFECTIVE_RESISTANCE - effective) / 100
    return LayerResolution(
        category=category,
        effective_resistance=effective,
        deflect=deflect,
        partial=partial,
        through=through,
    )
