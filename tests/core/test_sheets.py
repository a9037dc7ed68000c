"""
Tests for console rendering and the command line entry point.
"""

from pathlib import Path

from armorsim.__main__ import main
from armorsim.combat.damage import AttackSpec
from armorsim.combat.propagation import compute_damage_distribution
from armorsim.core.constants import DamageType
from armorsim.core.sheets import print_distribution_sheet
from armorsim.items.armor import ProtectiveLayer

DATA_FILE = Path(__file__).resolve().parents[2] / "data" / "armor_sets.json"


def test_print_distribution_sheet(capsys):
    layer = ProtectiveLayer(item_name="Plate", resistance_piercing=1.0)
    attack = AttackSpec(penetration=0.35, damage=15, category=DamageType.PIERCING)
    print_distribution_sheet(compute_damage_distribution([layer], attack), attack)
    out = capsys.readouterr().out
    assert "Damage outcomes" in out
    assert "7.6875" in out


def test_cli_runs_on_bundled_data(capsys):
    code = main(
        [
            str(DATA_FILE),
            "--set",
            "Flak",
            "--region",
            "TORSO",
            "--penetration",
            "0.15",
            "--damage",
            "10",
            "--category",
            "sharp",
        ]
    )
    assert code == 0
    out = capsys.readouterr().out
    assert "3.0175" in out


def test_cli_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1
