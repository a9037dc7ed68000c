"""
Damage module for the armor calculator.

Defines the attack parameters fed to the engine and the distribution it
produces: the final damage states, per-layer details and derived totals.
"""

from pydantic import BaseModel, ConfigDict, Field

from armorsim.core.constants import DamageType


class AttackSpec(BaseModel):
    """Describes one hit: its base damage, penetration and damage category.

    Penetration is a weapon property. It applies unchanged at every layer and
    is clamped to [0, 1] by the resolver rather than rejected here.
    """

    model_config = ConfigDict(frozen=True)

    penetration: float = Field(
        default=0.0,
        description="Armor penetration as a fraction (0-1).",
    )
    damage: float = Field(
        description="Base damage of a single hit.",
    )
    category: DamageType = Field(
        description="The damage category of the hit (e.g., PIERCING, BLUNT).",
    )

    def __str__(self) -> str:
        return (
            f"{self.category.colorize(f'{self.damage:g}')} "
            f"{self.category.emoji} {self.category.colored_name} "
            f"(AP {self.penetration * 100:.0f}%)"
        )


class DamageState(BaseModel):
    """One possible outcome of a hit: a damage multiplier and its probability."""

    model_config = ConfigDict(frozen=True)

    multiplier: float = Field(
        description="Fraction of the base damage that reaches the body.",
    )
    probability: float = Field(
        description="Probability of this outcome.",
    )


class LayerDetail(BaseModel):
    """Trace of the distribution right after one layer was processed."""

    model_config = ConfigDict(frozen=True)

    item_name: str = Field(
        description="The layer's item name.",
    )
    effective_resistance: float = Field(
        description="Effective resistance in percent for the attack's original category.",
    )
    expected_damage: float = Field(
        description="Expected damage still carried after this layer.",
    )


class DamageDistribution(BaseModel):
    """The full outcome distribution of an attack against a layer stack."""

    model_config = ConfigDict(frozen=True)

    states: tuple[DamageState, ...] = Field(
        description="Final states, one per distinct multiplier, most likely first.",
    )
    base_damage: float = Field(
        description="Base damage of the attack that produced this distribution.",
    )
    layer_details: tuple[LayerDetail, ...] = Field(
        default=(),
        description="Per-layer trace, outermost layer first.",
    )

    @property
    def total_probability(self) -> float:
        return sum(state.probability for state in self.states)

    @property
    def expected_multiplier(self) -> float:
        return sum(state.multiplier * state.probability for state in self.states)

    @property
    def expected_damage(self) -> float:
        return self.base_damage * self.expected_multiplier

    def probability_of(self, multiplier: float) -> float:
        """Returns the probability of a given multiplier (0.0 if unreachable)."""
        return sum(
            state.probability
            for state in self.states
            if abs(state.multiplier - multiplier) < 1e-12
        )

    def as_dict(self) -> dict[float, float]:
        """Maps each reachable multiplier to its probability."""
        return {state.multiplier: state.probability for state in self.states}
