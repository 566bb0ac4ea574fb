"""Fight scenario data structures."""

from dataclasses import dataclass, field
from typing import Any, Optional

from ...core.data import CombatantKind
from ..entities.combatant import Combatant
from ..entities.combatant_templates import create_combatant


@dataclass
class CombatantData:
    """Definition of one combatant as written in a scenario file."""
    kind: CombatantKind
    name: str
    attack_power: int
    hit_points: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CombatantData":
        """Create from a scenario entry.

        Raises:
            KeyError: If ``kind``, ``name`` or ``attack_power`` is missing
            ValueError: If the kind is not recognized, the entry is not a
                mapping or a number field is not an integer
        """
        if not isinstance(data, dict):
            raise ValueError(f"Combatant entry must be a mapping, got {data!r}")

        hit_points = data.get("hit_points")
        try:
            return cls(
                kind=CombatantKind.from_name(data["kind"]),
                name=str(data["name"]),
                attack_power=int(data["attack_power"]),
                hit_points=None if hit_points is None else int(hit_points),
            )
        except TypeError as e:
            raise ValueError(f"Invalid combatant entry {data!r}: {e}") from e

    def create(self) -> Combatant:
        """Build a fresh combatant from this definition."""
        return create_combatant(self.kind, self.name, self.attack_power, self.hit_points)


@dataclass
class FightScenario:
    """One fight: an actor that charges and attacks, and its ordered enemies."""
    name: str
    actor: CombatantData
    enemies: list[CombatantData] = field(default_factory=list)
    description: str = ""
    author: str = "Unknown"

    def create_combatants(self) -> tuple[Combatant, list[Combatant]]:
        """Build fresh combatants for one run of this scenario."""
        return self.actor.create(), [enemy.create() for enemy in self.enemies]
