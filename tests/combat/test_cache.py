"""
Tests for the distribution cache.
"""

import pytest
from armorsim.combat.cache import DistributionCache
from armorsim.combat.damage import AttackSpec
from armorsim.core.constants import ApparelLayer, BodyPart, DamageType
from armorsim.items.armor import ProtectiveLayer


@pytest.fixture
def layers():
    return [
        ProtectiveLayer(
            item_name="Vest",
            resistance_piercing=0.8,
            coverage=frozenset({BodyPart.TORSO}),
            apparel_layers=(ApparelLayer.MIDDLE,),
        )
    ]


def test_cache_hits_on_identical_inputs(layers):
    cache = DistributionCache()
    attack = AttackSpec(penetration=0.2, damage=10, category=DamageType.PIERCING)

    first = cache.get_or_compute(layers, attack)
    second = cache.get_or_compute(list(layers), AttackSpec(**attack.model_dump()))

    assert second is first
    assert (cache.hits, cache.misses) == (1, 1)
    assert len(cache) == 1


def test_cache_distinguishes_inputs(layers):
    cache = DistributionCache()
    attack = AttackSpec(penetration=0.2, damage=10, category=DamageType.PIERCING)

    cache.get_or_compute(layers, attack)
    cache.get_or_compute(layers, attack.model_copy(update={"penetration": 0.3}))
    cache.get_or_compute(layers, attack, BodyPart.TORSO)

    assert cache.misses == 3
    assert cache.hits == 0


def test_cache_evicts_oldest_entry(layers):
    cache = DistributionCache(max_entries=2)
    attacks = [
        AttackSpec(penetration=p, damage=10, category=DamageType.BLUNT) for p in (0.1, 0.2, 0.3)
    ]
    for attack in attacks:
        cache.get_or_compute(layers, attack)
    assert len(cache) == 2

    cache.get_or_compute(layers, attacks[0])
    assert cache.misses == 4


def test_cache_clear(layers):
    cache = DistributionCache()
    cache.get_or_compute(layers, AttackSpec(damage=5, category=DamageType.THERMAL))
    cache.clear()
    assert len(cache) == 0
    assert (cache.hits, cache.misses) == (0, 0)
