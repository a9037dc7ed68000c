"""
Caller-owned memoization of damage distributions.

The engine is a pure function of its inputs, and every input model is frozen
and hashable, so a distribution can be cached on (attack, layers, region).
"""

from collections.abc import Iterable

from armorsim.core.constants import BodyPart
from armorsim.items.armor import ProtectiveLayer

from .damage import AttackSpec, DamageDistribution
from .propagation import compute_damage_distribution

CacheKey = tuple[AttackSpec, tuple[ProtectiveLayer, ...], BodyPart | None]


class DistributionCache:
    """Remembers distributions already computed for identical inputs."""

    def __init__(self, max_entries: int | None = None) -> None:
        """
        Initialize an empty cache.

        Args:
            max_entries (int | None):
                Entries kept before the oldest one is evicted. None means
                unbounded.

        """
        self.max_entries = max_entries
        self.hits = 0
        self.misses = 0
        self._entries: dict[CacheKey, DamageDistribution] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_compute(
        self,
        layers: Iterable[ProtectiveLayer],
        attack: AttackSpec,
        region: BodyPart | None = None,
    ) -> DamageDistribution:
        """Returns the cached distribution, computing and storing it if needed."""
        key: CacheKey = (attack, tuple(layers), region)
        cached = self._entries.get(key)
        if cached is not None:
            self.hits += 1
            return cached
        self.misses += 1
        distribution = compute_damage_distribution(key[1], attack, region)
        if self.max_entries is not None:
            if self.max_entries <= 0:
                return distribution
            if len(self._entries) >= self.max_entries:
                # Dicts keep insertion order, the first key is the oldest.
                del self._entries[next(iter(self._entries))]
        self._entries[key] = distribution
        return distribution

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0
