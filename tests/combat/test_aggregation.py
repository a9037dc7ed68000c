"""
Tests for the distribution aggregator.
"""

import pytest
from armorsim.combat import aggregation
from armorsim.combat.aggregation import (
    expected_damage,
    expected_multiplier,
    summarize,
    validate_distribution,
)
from armorsim.combat.damage import DamageDistribution, DamageState


@pytest.fixture
def distribution():
    return DamageDistribution(
        states=(
            DamageState(multiplier=1.0, probability=0.35),
            DamageState(multiplier=0.0, probability=0.325),
            DamageState(multiplier=0.5, probability=0.325),
        ),
        base_damage=15,
    )


def test_expected_damage(distribution):
    """
    Test that expected damage is base damage times the mean multiplier.
    """
    assert expected_multiplier(distribution.states) == pytest.approx(0.5125)
    assert expected_damage(distribution) == pytest.approx(7.6875)
    assert distribution.expected_damage == pytest.approx(7.6875)


def test_valid_distribution_passes(distribution):
    assert validate_distribution(distribution)


def test_invalid_distribution_is_reported_not_raised(monkeypatch):
    """
    Test that a distribution not summing to one logs a diagnostic.
    """
    reported = []
    monkeypatch.setattr(
        aggregation, "log_warning", lambda message, context=None: reported.append(context)
    )
    broken = DamageDistribution(
        states=(DamageState(multiplier=1.0, probability=0.9),),
        base_damage=10,
    )
    assert not validate_distribution(broken)
    assert len(reported) == 1
    assert reported[0]["total"] == pytest.approx(0.9)


def test_tolerance_is_respected():
    slightly_off = DamageDistribution(
        states=(DamageState(multiplier=1.0, probability=1.0005),),
        base_damage=10,
    )
    assert validate_distribution(slightly_off)
    assert not validate_distribution(slightly_off, tolerance=1e-4)


def test_summarize(distribution):
    summary = summarize(distribution)
    assert summary["expected_damage"] == pytest.approx(7.6875)
    assert summary["total_probability"] == pytest.approx(1.0)
    assert summary["blocked"] == pytest.approx(0.325)
    assert summary["reduced"] == pytest.approx(0.325)
    assert summary["full"] == pytest.approx(0.35)
