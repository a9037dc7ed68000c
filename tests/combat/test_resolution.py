"""
Tests for the per-layer outcome resolver.
"""

import pytest
from armorsim.combat.resolution import (
    LayerOutcome,
    convert_category,
    effective_resistance,
    resolve_layer,
)
from armorsim.core.constants import DamageType


@pytest.mark.parametrize(
    ("resistance", "penetration"),
    [
        (1.0, 0.35),
        (0.55, 0.15),
        (0.36, 0.0),
        (1.0, 1.0),
        (0.0, 0.0),
        (0.73, 0.21),
    ],
)
def test_branch_probabilities_sum_to_one(resistance, penetration):
    """
    Test that deflect, partial and through always add up to one.
    """
    resolution = resolve_layer(resistance, penetration, DamageType.PIERCING)
    assert resolution.total == pytest.approx(1.0, abs=1e-12)


def test_single_layer_reference_values():
    """
    Test the 100% armor / 35% penetration reference case.
    """
    resolution = resolve_layer(1.0, 0.35, DamageType.PIERCING)
    assert resolution.effective_resistance == pytest.approx(65.0)
    assert resolution.deflect == pytest.approx(0.325)
    assert resolution.partial == pytest.approx(0.325)
    assert resolution.through == pytest.approx(0.35)


def test_deflect_and_partial_have_same_width():
    resolution = resolve_layer(0.8, 0.1, DamageType.BLUNT)
    assert resolution.deflect == pytest.approx(resolution.partial)


def test_penetration_above_resistance_goes_through():
    """
    Test that penetration at or above the resistance leaves no armor.
    """
    resolution = resolve_layer(0.4, 0.6, DamageType.PIERCING)
    assert resolution.effective_resistance == 0.0
    assert resolution.through == pytest.approx(1.0)
    assert [outcome for outcome, _, _ in resolution.branches()] == [LayerOutcome.THROUGH]


@pytest.mark.parametrize(
    ("resistance", "penetration", "expected"),
    [
        (2.0, 0.0, 100.0),
        (1.5, 0.2, 100.0),
        (-0.5, 0.0, 0.0),
        (0.5, -1.0, 50.0),
        (0.5, 2.0, 0.0),
    ],
)
def test_effective_resistance_is_clamped(resistance, penetration, expected):
    """
    Test that out-of-range resistance and penetration are clamped, not rejected.
    """
    assert effective_resistance(resistance, penetration) == pytest.approx(expected)


def test_full_effective_resistance_never_goes_through():
    resolution = resolve_layer(2.0, 0.0, DamageType.THERMAL)
    outcomes = {outcome for outcome, _, _ in resolution.branches()}
    assert outcomes == {LayerOutcome.DEFLECT, LayerOutcome.PARTIAL}


def test_partial_piercing_converts_to_blunt():
    """
    Test that only a partial deflection of piercing damage changes category.
    """
    assert convert_category(DamageType.PIERCING, LayerOutcome.PARTIAL) is DamageType.BLUNT
    assert convert_category(DamageType.PIERCING, LayerOutcome.THROUGH) is DamageType.PIERCING
    assert convert_category(DamageType.PIERCING, LayerOutcome.DEFLECT) is DamageType.PIERCING
    assert convert_category(DamageType.THERMAL, LayerOutcome.PARTIAL) is DamageType.THERMAL
    assert convert_category(DamageType.BLUNT, LayerOutcome.PARTIAL) is DamageType.BLUNT


def test_branches_report_next_category_but_roll_with_current():
    """
    Test that the resolution keeps the category used for its own check.
    """
    resolution = resolve_layer(0.55, 0.15, DamageType.PIERCING)
    assert resolution.category is DamageType.PIERCING
    next_categories = {outcome: category for outcome, _, category in resolution.branches()}
    assert next_categories[LayerOutcome.PARTIAL] is DamageType.BLUNT
    assert next_categories[LayerOutcome.THROUGH] is DamageType.PIERCING


def test_outcome_multipliers():
    assert LayerOutcome.DEFLECT.multiplier == 0.0
    assert LayerOutcome.PARTIAL.multiplier == 0.5
    assert LayerOutcome.THROUGH.multiplier == 1.0
