"""
Constants and enumerations for the armor calculator.

Defines the damage categories, apparel tiers, body regions and the numeric
constants shared by the resolution engine and its display helpers.
"""

from enum import Enum
from typing import Any

# Tolerance used when checking that a distribution sums to 1.
PROBABILITY_TOLERANCE = 0.001

# Effective resistance is expressed in percent and capped at 100.
MAX_EFFECTIVE_RESISTANCE = 100.0

# Fraction of the carried damage that passes a partial deflection.
PARTIAL_DAMAGE_FACTOR = 0.5

# Surface sampling defaults (penetration in percent, damage per hit).
DEFAULT_PENETRATION_STEP = 5
DEFAULT_MAX_DAMAGE = 50


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().replace("_", " ").capitalize()


class DamageType(NiceEnum):
    """Defines the damage categories an armor layer can resist."""

    PIERCING = "PIERCING"
    BLUNT = "BLUNT"
    THERMAL = "THERMAL"

    @classmethod
    def _missing_(cls, value: Any) -> "DamageType | None":
        # Accept lowercase values and the game's own names for the categories.
        if isinstance(value, str):
            key = value.strip().upper()
            key = {"SHARP": "PIERCING", "HEAT": "THERMAL"}.get(key, key)
            if key in cls.__members__:
                return cls[key]
        return None

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this damage type."""
        return {
            DamageType.PIERCING: "🗡️",
            DamageType.BLUNT: "🔨",
            DamageType.THERMAL: "🔥",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this damage type."""
        return {
            DamageType.PIERCING: "bold magenta",
            DamageType.BLUNT: "bold yellow",
            DamageType.THERMAL: "bold red",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies damage type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class ApparelLayer(NiceEnum):
    """Defines the apparel tiers a garment can occupy, innermost first."""

    SKIN = "SKIN"
    MIDDLE = "MIDDLE"
    SHELL = "SHELL"
    BELT = "BELT"
    OVERHEAD = "OVERHEAD"
    EYES = "EYES"

    @property
    def tier(self) -> int:
        """Returns the ordinal position of this tier (0 is innermost)."""
        return {
            ApparelLayer.SKIN: 0,
            ApparelLayer.MIDDLE: 1,
            ApparelLayer.SHELL: 2,
            ApparelLayer.BELT: 3,
            ApparelLayer.OVERHEAD: 4,
            ApparelLayer.EYES: 5,
        }[self]

    @property
    def color(self) -> str:
        """Returns the color string associated with this apparel tier."""
        return {
            ApparelLayer.SKIN: "white",
            ApparelLayer.MIDDLE: "cyan",
            ApparelLayer.SHELL: "bold blue",
            ApparelLayer.BELT: "yellow",
            ApparelLayer.OVERHEAD: "bold green",
            ApparelLayer.EYES: "green",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies apparel tier color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class BodyPart(NiceEnum):
    """Defines the body regions an armor layer can cover."""

    # Core regions.
    TORSO = "TORSO"
    NECK = "NECK"
    HEAD = "HEAD"
    WAIST = "WAIST"
    # Head.
    SKULL = "SKULL"
    BRAIN = "BRAIN"
    LEFT_EYE = "LEFT_EYE"
    RIGHT_EYE = "RIGHT_EYE"
    LEFT_EAR = "LEFT_EAR"
    RIGHT_EAR = "RIGHT_EAR"
    NOSE = "NOSE"
    JAW = "JAW"
    TONGUE = "TONGUE"
    # Torso internals.
    SPINE = "SPINE"
    RIBCAGE = "RIBCAGE"
    STERNUM = "STERNUM"
    PELVIS = "PELVIS"
    HEART = "HEART"
    LEFT_LUNG = "LEFT_LUNG"
    RIGHT_LUNG = "RIGHT_LUNG"
    LIVER = "LIVER"
    STOMACH = "STOMACH"
    LEFT_KIDNEY = "LEFT_KIDNEY"
    RIGHT_KIDNEY = "RIGHT_KIDNEY"
    # Upper limbs.
    LEFT_SHOULDER = "LEFT_SHOULDER"
    RIGHT_SHOULDER = "RIGHT_SHOULDER"
    LEFT_CLAVICLE = "LEFT_CLAVICLE"
    RIGHT_CLAVICLE = "RIGHT_CLAVICLE"
    LEFT_ARM = "LEFT_ARM"
    RIGHT_ARM = "RIGHT_ARM"
    LEFT_HUMERUS = "LEFT_HUMERUS"
    RIGHT_HUMERUS = "RIGHT_HUMERUS"
    LEFT_RADIUS = "LEFT_RADIUS"
    RIGHT_RADIUS = "RIGHT_RADIUS"
    LEFT_HAND = "LEFT_HAND"
    RIGHT_HAND = "RIGHT_HAND"
    LEFT_FINGERS = "LEFT_FINGERS"
    RIGHT_FINGERS = "RIGHT_FINGERS"
    # Lower limbs.
    LEFT_LEG = "LEFT_LEG"
    RIGHT_LEG = "RIGHT_LEG"
    LEFT_FEMUR = "LEFT_FEMUR"
    RIGHT_FEMUR = "RIGHT_FEMUR"
    LEFT_TIBIA = "LEFT_TIBIA"
    RIGHT_TIBIA = "RIGHT_TIBIA"
    LEFT_FOOT = "LEFT_FOOT"
    RIGHT_FOOT = "RIGHT_FOOT"
    LEFT_TOES = "LEFT_TOES"
    RIGHT_TOES = "RIGHT_TOES"
