"""
Content loading for armor sets.

Armor sets are stored as JSON: a list of objects, each with a ``name``, an
optional ``description`` and a list of ``layers``. A layer may give its
resistances either as flat fields (``resistance_piercing`` ...) or as a
``resistances`` mapping keyed by damage category name.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_warning
from pydantic import ValidationError

from armorsim.core.constants import DamageType
from armorsim.items.armor import ArmorSet, ProtectiveLayer

from .logging import log_info

_RESISTANCE_FIELDS = {
    DamageType.PIERCING: "resistance_piercing",
    DamageType.BLUNT: "resistance_blunt",
    DamageType.THERMAL: "resistance_thermal",
}


def _normalize_layer(data: dict[str, Any]) -> dict[str, Any]:
    """Expands a ``resistances`` mapping into the flat resistance fields."""
    data = dict(data)
    resistances = data.pop("resistances", None) or {}
    converted: dict[DamageType, Any] = {}
    for key, value in resistances.items():
        # Aliases ("sharp", "heat") resolve through DamageType._missing_.
        category = DamageType(key.strip())
        if category in converted:
            log_warning(
                f"Resistance {key!r} repeats {category.name}, keeping the first value",
                {"item_name": data.get("item_name"), "category": category.name},
            )
            continue
        converted[category] = value
    for category, value in converted.items():
        data.setdefault(_RESISTANCE_FIELDS[category], value)
    return data


def parse_layer(data: dict[str, Any]) -> ProtectiveLayer:
    """
    Builds a ProtectiveLayer from its JSON representation.

    Raises:
        ValueError: If the data does not describe a valid layer.

    """
    try:
        return ProtectiveLayer.model_validate(_normalize_layer(data))
    except (ValidationError, AssertionError) as e:
        raise ValueError(f"Invalid layer {data.get('item_name', '?')!r}: {e}") from e


def parse_armor_set(data: dict[str, Any]) -> ArmorSet:
    """
    Builds an ArmorSet from its JSON representation.

    Raises:
        ValueError: If the set or one of its layers is invalid.

    """
    layers = data.get("layers", [])
    if not layers:
        log_warning(
            f"Armor set {data.get('name', '?')!r} has no layers",
            {"armor_set": data.get("name")},
        )
    try:
        return ArmorSet(
            name=data["name"],
            description=data.get("description", ""),
            layers=tuple(parse_layer(layer) for layer in layers),
        )
    except KeyError as e:
        raise ValueError(f"Armor set is missing required field {e}") from e
    except ValidationError as e:
        raise ValueError(f"Invalid armor set {data.get('name', '?')!r}: {e}") from e


def _load_armor_sets(data: list[dict]) -> dict[str, ArmorSet]:
    armor_sets: dict[str, ArmorSet] = {}
    for entry in data:
        armor_set = parse_armor_set(entry)
        if armor_set.name in armor_sets:
            log_warning(
                f"Duplicated armor set {armor_set.name!r}, keeping the last one",
                {"armor_set": armor_set.name},
            )
        armor_sets[armor_set.name] = armor_set
    return armor_sets


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], dict[str, Any]],
    description: str,
) -> dict[str, Any]:
    """Helper to load and validate JSON files"""
    try:
        log_info(f"Loading {description} using {loader_func.__name__}", {"path": filepath})
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not data:
            raise ValueError(f"Empty data list in {filepath}")
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e


def load_armor_sets(filepath: Path) -> dict[str, ArmorSet]:
    """
    Loads every armor set stored in a JSON file.

    Args:
        filepath (Path):
            A JSON file holding one armor set object or a list of them.

    Returns:
        dict[str, ArmorSet]:
            The armor sets, by name.

    Raises:
        ValueError: If the file is missing, malformed or holds invalid data.

    """
    return _load_json_file(Path(filepath), _load_armor_sets, "armor sets")


def load_armor_set(filepath: Path, name: str | None = None) -> ArmorSet:
    """
    Loads a single armor set from a JSON file.

    Args:
        filepath (Path):
            The JSON file to read.
        name (str | None):
            The set to pick. Defaults to the first set in the file.

    Raises:
        ValueError: If the file cannot be loaded or the set does not exist.

    """
    armor_sets = load_armor_sets(filepath)
    if name is None:
        return next(iter(armor_sets.values()))
    if name not in armor_sets:
        raise ValueError(
            f"Armor set {name!r} not found in {filepath}, "
            f"available: {', '.join(armor_sets)}"
        )
    return armor_sets[name]
