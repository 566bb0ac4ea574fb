"""Core data definitions.

This package contains fundamental combat definitions:
- game_enums.py: Combatant kinds and display-name lookup tables
"""

from .game_enums import CombatantKind, KIND_NAMES

__all__ = [
    "CombatantKind",
    "KIND_NAMES",
]
