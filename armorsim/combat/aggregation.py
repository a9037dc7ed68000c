"""
Distribution aggregation.

Reduces a damage distribution to the scalars shown to the user and checks
that its probabilities still add up to one.
"""

from collections.abc import Iterable
from typing import Any

from catchery import log_warning

from armorsim.core.constants import PROBABILITY_TOLERANCE

from .damage import DamageDistribution, DamageState


def expected_multiplier(states: Iterable[DamageState]) -> float:
    """Returns the probability-weighted mean multiplier of the states."""
    return sum(state.multiplier * state.probability for state in states)


def expected_damage(distribution: DamageDistribution) -> float:
    """Returns base damage times the expected multiplier."""
    return distribution.base_damage * expected_multiplier(distribution.states)


def validate_distribution(
    distribution: DamageDistribution,
    tolerance: float = PROBABILITY_TOLERANCE,
) -> bool:
    """
    Checks that the probabilities of a distribution sum to one.

    A violation means the engine has a defect, not that the input is bad, so
    it is logged and reported but never raised.

    Args:
        distribution (DamageDistribution):
            The distribution to check.
        tolerance (float):
            Maximum allowed deviation from 1.

    Returns:
        bool:
            True if the total probability is within tolerance.

    """
    total = distribution.total_probability
    if abs(total - 1.0) > tolerance:
        log_warning(
            f"Damage distribution probabilities sum to {total:.6f}, expected 1",
            {
                "total": total,
                "tolerance": tolerance,
                "states": len(distribution.states),
                "layers": len(distribution.layer_details),
            },
        )
        return False
    return True


def summarize(distribution: DamageDistribution) -> dict[str, Any]:
    """
    Builds a flat summary of a distribution for display.

    Returns:
        dict[str, Any]:
            ``expected_damage``, ``expected_multiplier``,
            ``total_probability``, and the probability that no, reduced or
            full damage gets through (``blocked``, ``reduced``, ``full``).

    """
    blocked = sum(s.probability for s in distribution.states if s.multiplier == 0.0)
    full = sum(s.probability for s in distribution.states if s.multiplier == 1.0)
    reduced = sum(
        s.probability for s in distribution.states if 0.0 < s.multiplier < 1.0
    )
    return {
        "expected_damage": expected_damage(distribution),
        "expected_multiplier": expected_multiplier(distribution.states),
        "total_probability": distribution.total_probability,
        "blocked": blocked,
        "reduced": reduced,
        "full": full,
    }
