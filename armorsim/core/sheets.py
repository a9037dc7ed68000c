"""
Console sheets for armor sets and damage distributions.

Renders layers, distributions and sampled surfaces with rich markup.
"""

from rich.padding import Padding
from rich.table import Table

from armorsim.combat.aggregation import summarize
from armorsim.combat.damage import AttackSpec, DamageDistribution
from armorsim.combat.surface import DamageSurface, cumulative_curve
from armorsim.core.constants import DamageType
from armorsim.core.utils import cprint, format_percent, make_bar
from armorsim.items.armor import ArmorSet, ProtectiveLayer


def print_layer_sheet(layer: ProtectiveLayer, padding: int = 2) -> None:
    """Prints the details of a protective layer in a formatted way."""
    sheet: str = f"[blue]{layer.display_name}[/], "
    sheet += f"{layer.tier.colored_name}, "
    sheet += ", ".join(
        f"{category.emoji} {format_percent(layer.resistance_for(category), 0)}"
        for category in DamageType
    )
    cprint(Padding(sheet, (0, padding)))
    if layer.coverage:
        regions = sorted(region.display_name for region in layer.coverage)
        cprint(Padding(f"[dim]Covers: {', '.join(regions)}[/]", (0, padding + 2)))


def print_armor_set_sheet(armor_set: ArmorSet, padding: int = 2) -> None:
    """
    Prints an armor set and each of its layers.

    Args:
        armor_set (ArmorSet): The armor set to display.
        padding (int): Left padding for the output. Defaults to 2.

    """
    sheet = f"[bold]{armor_set.name}[/]"
    if armor_set.description:
        sheet += f', [italic]"{armor_set.description}"[/]'
    cprint(Padding(sheet, (0, padding)))
    for layer in armor_set.layers:
        print_layer_sheet(layer, padding + 2)


def print_distribution_sheet(
    distribution: DamageDistribution,
    attack: AttackSpec | None = None,
) -> None:
    """
    Prints the outcome table and the per-layer trace of a distribution.

    Args:
        distribution (DamageDistribution): The distribution to display.
        attack (AttackSpec | None): The attack that produced it, if known.

    """
    if attack is not None:
        cprint(f"Attack: {attack}")

    table = Table(title="Damage outcomes", show_lines=False)
    table.add_column("Multiplier", justify="right")
    table.add_column("Damage", justify="right")
    table.add_column("Probability", justify="right")
    table.add_column("Cumulative", justify="right")
    table.add_column("")
    for point in cumulative_curve(distribution):
        table.add_row(
            format_percent(point.multiplier),
            f"{point.multiplier * distribution.base_damage:.3f}",
            format_percent(point.probability),
            format_percent(point.cumulative),
            make_bar(point.probability, 1.0, length=20, color="green"),
        )
    cprint(table)

    if distribution.layer_details:
        trace = Table(title="Per-layer trace")
        trace.add_column("Layer")
        trace.add_column("Effective resistance", justify="right")
        trace.add_column("Expected damage after", justify="right")
        for detail in distribution.layer_details:
            trace.add_row(
                detail.item_name,
                f"{detail.effective_resistance:.1f}%",
                f"{detail.expected_damage:.4f}",
            )
        cprint(trace)

    summary = summarize(distribution)
    cprint(
        f"Expected damage: [bold]{summary['expected_damage']:.4f}[/] "
        f"(blocked {format_percent(summary['blocked'])}, "
        f"reduced {format_percent(summary['reduced'])}, "
        f"full {format_percent(summary['full'])})"
    )


def print_surface_sheet(surface: DamageSurface, columns: int = 10) -> None:
    """
    Prints a sampled damage surface as a table.

    Only ``columns`` evenly spaced damage values are shown to fit the console.
    """
    stride = max(1, len(surface.damage_values) // columns)
    shown = list(range(0, len(surface.damage_values), stride))
    table = Table(title=f"Expected damage, {surface.category.display_name}")
    table.add_column("AP", justify="right")
    for column in shown:
        table.add_column(str(surface.damage_values[column]), justify="right")
    for row, penetration in enumerate(surface.penetration_values):
        table.add_row(
            f"{penetration}%",
            *(f"{surface.expected_damage[row][column]:.2f}" for column in shown),
        )
    cprint(table)
