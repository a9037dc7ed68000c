"""
Items module for the armor calculator.

This module contains the protective layer and armor set definitions consumed
by the damage resolution engine.
"""

from .armor import ArmorSet, ProtectiveLayer

__all__ = [
    "ArmorSet",
    "ProtectiveLayer",
]
