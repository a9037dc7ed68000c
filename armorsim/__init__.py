"""
Armor damage calculator.

Computes the probability distribution of the damage that gets through a stack
of protective layers, one hit at a time.
"""

from armorsim.combat import (
    AttackSpec,
    DamageDistribution,
    DamageState,
    DistributionCache,
    compute_damage_distribution,
    expected_damage,
    sample_damage_surface,
)
from armorsim.core.constants import ApparelLayer, BodyPart, DamageType
from armorsim.items import ArmorSet, ProtectiveLayer

__version__ = "0.1.0"

__all__ = [
    "ApparelLayer",
    "ArmorSet",
    "AttackSpec",
    "BodyPart",
    "DamageDistribution",
    "DamageState",
    "DamageType",
    "DistributionCache",
    "ProtectiveLayer",
    "compute_damage_distribution",
    "expected_damage",
    "sample_damage_surface",
]
