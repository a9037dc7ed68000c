"""
Sampling helpers for charts.

Builds the expected-damage surface over (penetration, damage per hit) and the
probability / cumulative-probability curve of a single distribution.
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from armorsim.core.constants import (
    DEFAULT_MAX_DAMAGE,
    DEFAULT_PENETRATION_STEP,
    BodyPart,
    DamageType,
)
from armorsim.items.armor import ProtectiveLayer

from .damage import AttackSpec, DamageDistribution
from .layering import prepare_layers
from .propagation import compute_damage_distribution


class DamageSurface(BaseModel):
    """Expected damage sampled over penetration (rows) and damage (columns)."""

    model_config = ConfigDict(frozen=True)

    category: DamageType = Field(
        description="The damage category used for every sample.",
    )
    penetration_values: tuple[int, ...] = Field(
        description="Penetration of each row, in percent.",
    )
    damage_values: tuple[int, ...] = Field(
        description="Damage per hit of each column.",
    )
    expected_damage: tuple[tuple[float, ...], ...] = Field(
        description="Expected damage, indexed [penetration][damage].",
    )

    def at(self, penetration: int, damage: int) -> float:
        """Returns the sample at a given penetration percent and damage."""
        row = self.penetration_values.index(penetration)
        column = self.damage_values.index(damage)
        return self.expected_damage[row][column]


class CumulativePoint(BaseModel):
    """One bar of the probability chart with its running total."""

    model_config = ConfigDict(frozen=True)

    multiplier: float
    probability: float
    cumulative: float


def sample_damage_surface(
    layers: Iterable[ProtectiveLayer],
    category: DamageType,
    penetration_step: int = DEFAULT_PENETRATION_STEP,
    max_damage: int = DEFAULT_MAX_DAMAGE,
    region: BodyPart | None = None,
) -> DamageSurface:
    """
    Samples expected damage over a grid of penetration and damage values.

    Penetration runs from 0% to 100% in ``penetration_step`` increments and
    damage from 1 to ``max_damage``. Every cell is an independent engine run.

    Args:
        layers (Iterable[ProtectiveLayer]):
            The layer stack.
        category (DamageType):
            The damage category of every sampled hit.
        penetration_step (int):
            Step between penetration rows, in percent.
        max_damage (int):
            Largest sampled damage per hit.
        region (BodyPart | None):
            The region being hit, if the stack should be filtered.

    Returns:
        DamageSurface:
            The sampled grid.

    Raises:
        ValueError: If ``penetration_step`` or ``max_damage`` is not positive.

    """
    if penetration_step <= 0:
        raise ValueError(f"Penetration step must be positive, got {penetration_step}")
    if max_damage < 1:
        raise ValueError(f"Maximum damage must be at least 1, got {max_damage}")
    # Filtering and ordering do not depend on the attack, do them once.
    prepared = prepare_layers(layers, region)
    penetration_values = tuple(range(0, 101, penetration_step))
    damage_values = tuple(range(1, max_damage + 1))
    grid = tuple(
        tuple(
            compute_damage_distribution(
                prepared,
                AttackSpec(penetration=penetration / 100, damage=damage, category=category),
            ).expected_damage
            for damage in damage_values
        )
        for penetration in penetration_values
    )
    return DamageSurface(
        category=category,
        penetration_values=penetration_values,
        damage_values=damage_values,
        expected_damage=grid,
    )


def cumulative_curve(distribution: DamageDistribution) -> list[CumulativePoint]:
    """
    Lists the outcomes of a distribution from least to most damage, with the
    cumulative probability of taking at most that much damage.
    """
    points: list[CumulativePoint] = []
    running = 0.0
    for state in sorted(distribution.states, key=lambda s: s.multiplier):
        running += state.probability
        points.append(
            CumulativePoint(
                multiplier=state.multiplier,
                probability=state.probability,
                cumulative=running,
            )
        )
    return points
