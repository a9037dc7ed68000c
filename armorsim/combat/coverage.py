"""
Coverage helpers for layer stacks.

Selects the layers standing over a body region and reports which apparel
tiers already cover each region of a stack.
"""

from collections.abc import Iterable

from armorsim.core.constants import ApparelLayer, BodyPart
from armorsim.items.armor import ProtectiveLayer


def filter_layers_by_region(
    layers: Iterable[ProtectiveLayer],
    region: BodyPart,
) -> list[ProtectiveLayer]:
    """
    Keeps only the layers whose coverage includes the given region.

    Args:
        layers (Iterable[ProtectiveLayer]):
            The full layer stack.
        region (BodyPart):
            The body region being hit.

    Returns:
        list[ProtectiveLayer]:
            The covering layers, in their input order. May be empty.

    """
    return [layer for layer in layers if layer.covers(region)]


def build_coverage_map(
    layers: Iterable[ProtectiveLayer],
) -> dict[BodyPart, set[ApparelLayer]]:
    """Maps every covered region to the set of apparel tiers covering it."""
    coverage_map: dict[BodyPart, set[ApparelLayer]] = {}
    for layer in layers:
        for region in layer.coverage:
            coverage_map.setdefault(region, set()).update(layer.apparel_layers)
    return coverage_map


def find_coverage_conflicts(
    existing: Iterable[ProtectiveLayer],
    coverage: Iterable[BodyPart],
    apparel_layers: Iterable[ApparelLayer],
) -> list[tuple[BodyPart, ApparelLayer]]:
    """
    Finds the (region, tier) slots a new garment would share with worn ones.

    Two garments cannot occupy the same tier over the same region.

    Args:
        existing (Iterable[ProtectiveLayer]):
            The layers already worn.
        coverage (Iterable[BodyPart]):
            The regions the new garment covers.
        apparel_layers (Iterable[ApparelLayer]):
            The tiers the new garment occupies.

    Returns:
        list[tuple[BodyPart, ApparelLayer]]:
            The conflicting slots, sorted by region then tier.

    """
    coverage_map = build_coverage_map(existing)
    new_tiers = set(apparel_layers)
    conflicts = [
        (region, tier)
        for region in set(coverage)
        for tier in coverage_map.get(region, set()) & new_tiers
    ]
    body_order = list(BodyPart)
    return sorted(conflicts, key=lambda c: (body_order.index(c[0]), c[1].tier))


def format_conflicts(conflicts: list[tuple[BodyPart, ApparelLayer]]) -> str:
    """Formats coverage conflicts as a readable sentence (empty if none)."""
    if not conflicts:
        return ""
    slots = ", ".join(
        f"{region.display_name} ({tier.display_name.lower()} layer)"
        for region, tier in conflicts
    )
    return f"Already covered: {slots}"
