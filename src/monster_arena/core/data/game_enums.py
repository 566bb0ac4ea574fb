"""Centralized combat enums and constants.

This module contains the enums that are shared between the combat rules,
the narration events and the data loaders, providing a single source of truth.
"""

from enum import Enum


class CombatantKind(Enum):
    """Variant classification that selects a combatant's charge and attack policy."""
    BASE = "base"
    FIRE = "fire"
    WATER = "water"

    @classmethod
    def from_name(cls, name: str) -> "CombatantKind":
        """Resolve a kind from its YAML spelling (``fire``, ``FIRE``, ...).

        Raises:
            ValueError: If the name does not match any kind
        """
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            valid = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unknown combatant kind '{name}' (expected one of: {valid})")


# Convenience mappings for display
KIND_NAMES = {
    CombatantKind.BASE: "Monster",
    CombatantKind.FIRE: "Fire Monster",
    CombatantKind.WATER: "Water Monster",
}
