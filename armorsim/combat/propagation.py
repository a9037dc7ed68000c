"""
Multi-layer propagation engine.

Drives the per-layer resolver across an ordered layer stack while keeping a
probability-weighted set of (carried multiplier, carried category) states.
Children that land on the same state are merged by summing probability, so
the number of live states stays bounded by the number of distinct multipliers
times the number of categories, instead of growing as 3^N.
"""

from collections.abc import Iterable
from typing import NamedTuple

from catchery import log_warning

from armorsim.core.constants import PARTIAL_DAMAGE_FACTOR, BodyPart, DamageType
from armorsim.core.logging import log_debug
from armorsim.items.armor import ProtectiveLayer

from .aggregation import validate_distribution
from .damage import AttackSpec, DamageDistribution, DamageState, LayerDetail
from .layering import prepare_layers
from .resolution import LayerOutcome, effective_resistance, resolve_layer


def halvings_to_multiplier(halvings: int | None) -> float:
    """Converts a count of partial deflections to a damage multiplier."""
    if halvings is None:
        return 0.0
    return PARTIAL_DAMAGE_FACTOR**halvings


class OutcomeState(NamedTuple):
    """
    A carried state between layers.

    The multiplier is stored as the number of partial deflections suffered so
    far (``None`` once the hit is fully deflected), which keeps merging exact.
    """

    halvings: int | None
    category: DamageType

    @property
    def multiplier(self) -> float:
        return halvings_to_multiplier(self.halvings)

    @property
    def is_deflected(self) -> bool:
        return self.halvings is None

    def advance(self, outcome: LayerOutcome, category: DamageType) -> "OutcomeState":
        """Returns the state carried past a layer after the given outcome."""
        if self.halvings is None or outcome is LayerOutcome.DEFLECT:
            return OutcomeState(None, category)
        if outcome is LayerOutcome.PARTIAL:
            return OutcomeState(self.halvings + 1, category)
        return OutcomeState(self.halvings, category)


StateMap = dict[OutcomeState, float]


def initial_states(attack: AttackSpec) -> StateMap:
    """The single state of a hit that has not met any layer yet."""
    return {OutcomeState(0, attack.category): 1.0}


def step_layer(states: StateMap, layer: ProtectiveLayer, penetration: float) -> StateMap:
    """
    Propagates every carried state through one layer.

    Each state rolls against the layer's resistance for the category it
    currently carries. A fully deflected state has nothing left to roll and is
    carried over unchanged.

    Args:
        states (StateMap):
            The states reaching this layer.
        layer (ProtectiveLayer):
            The layer being checked.
        penetration (float):
            The attack's penetration, identical for every layer.

    Returns:
        StateMap:
            The merged states leaving this layer.

    """
    next_states: StateMap = {}
    for state, probability in states.items():
        if state.is_deflected:
            next_states[state] = next_states.get(state, 0.0) + probability
            continue
        resolution = resolve_layer(
            layer.resistance_for(state.category),
            penetration,
            state.category,
        )
        for outcome, branch_probability, next_category in resolution.branches():
            child = state.advance(outcome, next_category)
            next_states[child] = (
                next_states.get(child, 0.0) + probability * branch_probability
            )
    return next_states


def _expected_multiplier(states: StateMap) -> float:
    return sum(state.multiplier * probability for state, probability in states.items())


def _propagate(
    layers: list[ProtectiveLayer],
    attack: AttackSpec,
) -> tuple[StateMap, list[LayerDetail]]:
    states = initial_states(attack)
    details: list[LayerDetail] = []
    for layer in layers:
        states = step_layer(states, layer, attack.penetration)
        detail = LayerDetail(
            item_name=layer.item_name,
            effective_resistance=effective_resistance(
                layer.resistance_for(attack.category), attack.penetration
            ),
            expected_damage=_expected_multiplier(states) * attack.damage,
        )
        details.append(detail)
        log_debug(
            f"Resolved layer {layer.item_name}",
            {
                "states": len(states),
                "effective": f"{detail.effective_resistance:.2f}",
                "expected": f"{detail.expected_damage:.4f}",
            },
        )
    return states, details


def propagate_states(
    layers: Iterable[ProtectiveLayer],
    attack: AttackSpec,
) -> StateMap:
    """
    Runs the engine over already prepared layers and returns the raw states.

    Unlike :func:`compute_damage_distribution`, the states still carry their
    damage category, which shows whether a conversion happened on the way.

    Args:
        layers (Iterable[ProtectiveLayer]):
            The layers to check, outermost first.
        attack (AttackSpec):
            The incoming hit.

    Returns:
        StateMap:
            Probability of every (multiplier, category) state after the
            innermost layer.

    """
    states, _ = _propagate(list(layers), attack)
    return states


def collapse_states(states: StateMap) -> tuple[DamageState, ...]:
    """
    Merges states by multiplier only, dropping the carried category.

    Returns:
        tuple[DamageState, ...]:
            One state per multiplier, most likely first (ties: larger
            multiplier first).

    """
    by_halvings: dict[int | None, float] = {}
    for state, probability in states.items():
        by_halvings[state.halvings] = by_halvings.get(state.halvings, 0.0) + probability
    collapsed = [
        DamageState(
            multiplier=halvings_to_multiplier(halvings),
            probability=probability,
        )
        for halvings, probability in by_halvings.items()
    ]
    collapsed.sort(key=lambda s: (-s.probability, -s.multiplier))
    return tuple(collapsed)


def compute_damage_distribution(
    layers: Iterable[ProtectiveLayer],
    attack: AttackSpec,
    region: BodyPart | None = None,
) -> DamageDistribution:
    """
    Computes the distribution of damage multipliers of a hit against a stack.

    The stack is filtered to ``region`` (when given), deduplicated by item
    name and sorted outer to inner before propagation. Out-of-range inputs
    are clamped; a distribution that does not sum to 1 is reported as a
    diagnostic and still returned.

    Args:
        layers (Iterable[ProtectiveLayer]):
            The full layer stack, in any order.
        attack (AttackSpec):
            The incoming hit.
        region (BodyPart | None):
            The body region being hit.

    Returns:
        DamageDistribution:
            Final multipliers with their probabilities and a per-layer trace.

    """
    if not 0.0 <= attack.penetration <= 1.0:
        log_warning(
            f"Penetration {attack.penetration} outside [0, 1], clamping",
            {"penetration": attack.penetration, "category": attack.category.name},
        )
    prepared = prepare_layers(layers, region)
    states, details = _propagate(prepared, attack)
    distribution = DamageDistribution(
        states=collapse_states(states),
        base_damage=attack.damage,
        layer_details=tuple(details),
    )
    validate_distribution(distribution)
    return distribution
