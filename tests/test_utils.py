"""
Test utilities and helper functions for the monster arena test suite.

Builders for combatants with exact state, and a spy that records every
event the bus delivers.
"""
from monster_arena.core.data import CombatantKind
from monster_arena.core.events import CombatEvent, EventManager, EventType
from monster_arena.game.entities import Combatant


def make_combatant(
    kind: CombatantKind = CombatantKind.BASE,
    name: str = "dummy",
    attack_power: int = 1,
    hit_points: int = 10,
    **state: int,
) -> Combatant:
    """Build a combatant directly, bypassing templates, for precise setups."""
    if kind == CombatantKind.FIRE:
        state.setdefault("fire_temperature", 32)
    elif kind == CombatantKind.WATER:
        state.setdefault("water_bladder_level", 0)
    return Combatant(name=name, hit_points=hit_points, attack_power=attack_power, kind=kind, **state)


def event_types(events: list[CombatEvent]) -> list[EventType]:
    """Event types of ``events`` in order."""
    return [event.event_type for event in events]


class EventSpy:
    """Universal subscriber that records delivered events."""

    def __init__(self, event_manager: EventManager):
        self.events: list[CombatEvent] = []
        event_manager.subscribe_all(self)

    def __call__(self, event: CombatEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: EventType) -> list[CombatEvent]:
        return [event for event in self.events if event.event_type == event_type]

    @property
    def types(self) -> list[EventType]:
        return event_types(self.events)
