"""
Layer preparation for the propagation engine.

An attack meets the outermost garment first. Before propagation, the stack is
filtered to the region being hit, garments that fill several slots are
collapsed to one roll, and the remainder is sorted outer to inner.
"""

from collections.abc import Iterable

from armorsim.core.constants import BodyPart
from armorsim.core.logging import log_debug
from armorsim.items.armor import ProtectiveLayer

from .coverage import filter_layers_by_region


def order_layers(layers: Iterable[ProtectiveLayer]) -> list[ProtectiveLayer]:
    """
    Sorts layers from outermost to innermost tier.

    The sort is stable, so layers on the same tier keep their input order.

    Args:
        layers (Iterable[ProtectiveLayer]): The layers to sort.

    Returns:
        list[ProtectiveLayer]: A new, sorted list.

    """
    return sorted(layers, key=lambda layer: layer.tier.tier, reverse=True)


def deduplicate_layers(layers: Iterable[ProtectiveLayer]) -> list[ProtectiveLayer]:
    """
    Keeps a single entry per item name.

    When a garment appears more than once, the entry met first in processing
    order (outermost tier first, then input order) survives; the surviving
    entries keep their relative input order.

    Args:
        layers (Iterable[ProtectiveLayer]): The layers to deduplicate.

    Returns:
        list[ProtectiveLayer]: At most one layer per distinct item name.

    """
    layers = list(layers)
    kept: dict[str, int] = {}
    for index, layer in sorted(
        enumerate(layers), key=lambda pair: pair[1].tier.tier, reverse=True
    ):
        if layer.item_name in kept:
            log_debug(
                f"Skipping duplicated layer of {layer.item_name}",
                {"item": layer.item_name, "tier": layer.tier},
            )
            continue
        kept[layer.item_name] = index
    return [layers[index] for index in sorted(kept.values())]


def prepare_layers(
    layers: Iterable[ProtectiveLayer],
    region: BodyPart | None = None,
) -> list[ProtectiveLayer]:
    """
    Filters, deduplicates and orders a stack for propagation.

    Args:
        layers (Iterable[ProtectiveLayer]):
            The full layer stack.
        region (BodyPart | None):
            The region being hit. When None, every layer is assumed to cover it.

    Returns:
        list[ProtectiveLayer]:
            The layers to roll against, outermost first.

    """
    if region is not None:
        layers = filter_layers_by_region(layers, region)
    return order_layers(deduplicate_layers(layers))
