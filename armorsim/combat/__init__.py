"""
Combat module for the armor calculator.

This module resolves an attack against a stack of protective layers: coverage
filtering, deduplication and ordering of layers, the per-layer outcome
resolver, the multi-layer propagation engine and the distribution aggregator.
"""

from .aggregation import (
    expected_damage,
    expected_multiplier,
    summarize,
    validate_distribution,
)
from .cache import DistributionCache
from .coverage import (
    build_coverage_map,
    filter_layers_by_region,
    find_coverage_conflicts,
    format_conflicts,
)
from .damage import AttackSpec, DamageDistribution, DamageState, LayerDetail
from .layering import deduplicate_layers, order_layers, prepare_layers
from .propagation import (
    OutcomeState,
    collapse_states,
    compute_damage_distribution,
    propagate_states,
    step_layer,
)
from .resolution import (
    LayerOutcome,
    LayerResolution,
    convert_category,
    effective_resistance,
    resolve_layer,
)
from .surface import (
    CumulativePoint,
    DamageSurface,
    cumulative_curve,
    sample_damage_surface,
)

__all__ = [
    # Import from aggregation.py
    "expected_damage",
    "expected_multiplier",
    "summarize",
    "validate_distribution",
    # Import from cache.py
    "DistributionCache",
    # Import from coverage.py
    "build_coverage_map",
    "filter_layers_by_region",
    "find_coverage_conflicts",
    "format_conflicts",
    # Import from damage.py
    "AttackSpec",
    "DamageDistribution",
    "DamageState",
    "LayerDetail",
    # Import from layering.py
    "deduplicate_layers",
    "order_layers",
    "prepare_layers",
    # Import from propagation.py
    "OutcomeState",
    "collapse_states",
    "compute_damage_distribution",
    "propagate_states",
    "step_layer",
    # Import from resolution.py
    "LayerOutcome",
    "LayerResolution",
    "convert_category",
    "effective_resistance",
    "resolve_layer",
    # Import from surface.py
    "CumulativePoint",
    "DamageSurface",
    "cumulative_curve",
    "sample_damage_surface",
]
