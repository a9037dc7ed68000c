"""
Command line entry point for the armor calculator.

Loads an armor set from a JSON file and prints the damage distribution of a
hit against it, optionally with the expected-damage surface over penetration
and damage per hit.

Example:
    python -m armorsim data/armor_sets.json --set "Marine" --region TORSO \
        --penetration 0.35 --damage 15 --category PIERCING
"""

import argparse
import logging
from pathlib import Path

from armorsim.combat.damage import AttackSpec
from armorsim.combat.propagation import compute_damage_distribution
from armorsim.combat.surface import sample_damage_surface
from armorsim.core.constants import BodyPart, DamageType
from armorsim.core.content import load_armor_set
from armorsim.core.logging import setup_logging
from armorsim.core.sheets import (
    print_armor_set_sheet,
    print_distribution_sheet,
    print_surface_sheet,
)
from armorsim.core.utils import cprint, crule


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="armorsim",
        description="Compute the damage distribution of a hit against an armor set",
    )
    parser.add_argument("armor_file", type=Path, help="JSON file with armor sets")
    parser.add_argument("--set", dest="set_name", default=None, help="armor set to use")
    parser.add_argument(
        "--region",
        choices=[part.name for part in BodyPart],
        default=None,
        help="body region hit (default: every layer applies)",
    )
    parser.add_argument("--penetration", type=float, default=0.0)
    parser.add_argument("--damage", type=float, default=10.0)
    parser.add_argument(
        "--category",
        type=DamageType,
        default=DamageType.PIERCING,
        help="PIERCING, BLUNT or THERMAL",
    )
    parser.add_argument("--surface", action="store_true", help="print the damage surface")
    parser.add_argument("--verbose", action="store_true", help="trace every layer")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        armor_set = load_armor_set(args.armor_file, args.set_name)
    except ValueError as e:
        cprint(f"[bold red]{e}[/]")
        return 1

    region = BodyPart[args.region] if args.region else None
    attack = AttackSpec(
        penetration=args.penetration,
        damage=args.damage,
        category=args.category,
    )

    crule("Armor", style="bold green")
    print_armor_set_sheet(armor_set)

    crule("Damage distribution", style="bold green")
    distribution = compute_damage_distribution(armor_set.layers, attack, region)
    print_distribution_sheet(distribution, attack)

    if args.surface:
        crule("Damage surface", style="bold green")
        surface = sample_damage_surface(armor_set.layers, attack.category, region=region)
        print_surface_sheet(surface)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
