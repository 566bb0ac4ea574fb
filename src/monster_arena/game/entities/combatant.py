"""Combatant record shared by every combat operation.

A combatant is a plain mutable record. Its kind is a tag, not a subclass:
the combat strategies in :mod:`monster_arena.game.combat` read the tag and
the kind-specific fields to decide how a charge or an attack plays out.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ...core.data import CombatantKind, KIND_NAMES


@dataclass
class Combatant:
    """An entity with hit points and attack power taking part in a fight.

    ``fire_temperature`` is required for fire combatants and
    ``water_bladder_level`` for water combatants; both are ``None``
    for the other kinds. ``hit_points`` is never clamped and may go negative.
    """
    name: str
    hit_points: int
    attack_power: int
    kind: CombatantKind = CombatantKind.BASE
    fire_temperature: Optional[int] = None
    water_bladder_level: Optional[int] = None

    def __post_init__(self):
        if self.kind == CombatantKind.FIRE and self.fire_temperature is None:
            raise ValueError(f"Fire combatant {self.name!r} needs a fire_temperature")
        if self.kind == CombatantKind.WATER and self.water_bladder_level is None:
            raise ValueError(f"Water combatant {self.name!r} needs a water_bladder_level")

    @property
    def is_alive(self) -> bool:
        """Check if combatant is alive."""
        return self.hit_points > 0

    @property
    def kind_name(self) -> str:
        """Display name of this combatant's kind."""
        return KIND_NAMES[self.kind]

    def heal(self, amount: int = 1) -> int:
        """Restore hit points and return the new total."""
        self.hit_points += amount
        return self.hit_points

    def take_damage(self, amount: int) -> int:
        """Reduce hit points by ``amount`` without a floor and return the new total."""
        self.hit_points -= amount
        return self.hit_points

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (for display and YAML round trips)."""
        data: dict[str, Any] = {
            "name": self.name,
            "kind": self.kind.value,
            "hit_points": self.hit_points,
            "attack_power": self.attack_power,
            "is_alive": self.is_alive,
        }
        if self.fire_temperature is not None:
            data["fire_temperature"] = self.fire_temperature
        if self.water_bladder_level is not None:
            data["water_bladder_level"] = self.water_bladder_level
        return data

    def __str__(self) -> str:
        state = "alive" if self.is_alive else "defeated"
        extras = ""
        if self.fire_temperature is not None:
            extras = f", {self.fire_temperature} degrees"
        elif self.water_bladder_level is not None:
            extras = f", {self.water_bladder_level} L water"
        return (
            f"{self.name} ({self.kind_name}): {self.hit_points} HP, "
            f"power {self.attack_power}{extras}, {state}"
        )
