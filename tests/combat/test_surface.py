"""
Tests for surface sampling and the cumulative curve.
"""

import pytest
from armorsim.combat.damage import AttackSpec
from armorsim.combat.propagation import compute_damage_distribution
from armorsim.combat.surface import cumulative_curve, sample_damage_surface
from armorsim.core.constants import ApparelLayer, BodyPart, DamageType
from armorsim.items.armor import ProtectiveLayer


@pytest.fixture
def layers():
    return [
        ProtectiveLayer(
            item_name="Duster",
            resistance_piercing=0.55,
            resistance_blunt=0.08,
            coverage=frozenset({BodyPart.TORSO}),
            apparel_layers=(ApparelLayer.SHELL,),
        ),
        ProtectiveLayer(
            item_name="Flak vest",
            resistance_piercing=1.0,
            resistance_blunt=0.36,
            coverage=frozenset({BodyPart.TORSO}),
            apparel_layers=(ApparelLayer.MIDDLE,),
        ),
    ]


def test_surface_shape(layers):
    surface = sample_damage_surface(layers, DamageType.PIERCING, penetration_step=25, max_damage=4)
    assert surface.penetration_values == (0, 25, 50, 75, 100)
    assert surface.damage_values == (1, 2, 3, 4)
    assert len(surface.expected_damage) == 5
    assert all(len(row) == 4 for row in surface.expected_damage)


def test_surface_matches_engine(layers):
    """
    Test that a surface cell equals a direct engine call.
    """
    surface = sample_damage_surface(layers, DamageType.PIERCING, penetration_step=5, max_damage=10)
    direct = compute_damage_distribution(
        layers, AttackSpec(penetration=0.15, damage=10, category=DamageType.PIERCING)
    )
    assert surface.at(15, 10) == pytest.approx(direct.expected_damage)
    assert surface.at(15, 10) == pytest.approx(3.0175)


def test_surface_grows_with_penetration_and_damage(layers):
    surface = sample_damage_surface(layers, DamageType.PIERCING, penetration_step=10, max_damage=5)
    for row in surface.expected_damage:
        assert list(row) == sorted(row)
    for column in range(len(surface.damage_values)):
        values = [row[column] for row in surface.expected_damage]
        assert values == sorted(values)
    # Full penetration leaves every layer useless.
    assert surface.at(100, 5) == pytest.approx(5)


def test_surface_respects_region(layers):
    surface = sample_damage_surface(
        layers, DamageType.PIERCING, penetration_step=50, max_damage=3, region=BodyPart.HEAD
    )
    assert surface.at(0, 3) == pytest.approx(3)


@pytest.mark.parametrize(
    "options",
    [
        {"penetration_step": 0},
        {"penetration_step": -5},
        {"max_damage": 0},
    ],
)
def test_surface_rejects_empty_grid(layers, options):
    """
    Test that a grid with no rows or no columns is refused up front.
    """
    with pytest.raises(ValueError):
        sample_damage_surface(layers, DamageType.PIERCING, **options)


def test_cumulative_curve_runs_from_least_damage(layers):
    """
    Test that the cumulative curve is ordered by multiplier and ends at one.
    """
    distribution = compute_damage_distribution(
        layers, AttackSpec(penetration=0.15, damage=10, category=DamageType.PIERCING)
    )
    curve = cumulative_curve(distribution)
    assert [point.multiplier for point in curve] == [0.0, 0.25, 0.5, 1.0]
    assert curve[0].cumulative == pytest.approx(0.476)
    assert curve[1].cumulative == pytest.approx(0.497)
    assert curve[-1].cumulative == pytest.approx(1.0)
