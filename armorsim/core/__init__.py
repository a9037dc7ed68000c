"""
Core module for the armor calculator.

This module contains the enumerations and constants shared by the engine,
logging setup and console helpers. Content loading and console sheets live in
``armorsim.core.content`` and ``armorsim.core.sheets``.
"""

from .constants import (
    DEFAULT_MAX_DAMAGE,
    DEFAULT_PENETRATION_STEP,
    MAX_EFFECTIVE_RESISTANCE,
    PARTIAL_DAMAGE_FACTOR,
    PROBABILITY_TOLERANCE,
    ApparelLayer,
    BodyPart,
    DamageType,
    NiceEnum,
)
from .logging import get_logger, setup_logging
from .utils import clamp, cprint, crule, format_percent, make_bar

__all__ = [
    # Import from constants.py
    "DEFAULT_MAX_DAMAGE",
    "DEFAULT_PENETRATION_STEP",
    "MAX_EFFECTIVE_RESISTANCE",
    "PARTIAL_DAMAGE_FACTOR",
    "PROBABILITY_TOLERANCE",
    "ApparelLayer",
    "BodyPart",
    "DamageType",
    "NiceEnum",
    # Import from logging.py
    "get_logger",
    "setup_logging",
    # Import from utils.py
    "clamp",
    "cprint",
    "crule",
    "format_percent",
    "make_bar",
]
