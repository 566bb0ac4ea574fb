"""
Arena: runs combat operations and publishes their narration.

The combat functions are pure with respect to output: they only return
events. The arena is the seam where those events reach the event bus, so a
narration log, a renderer or a test spy can all listen in.
"""
from typing import Sequence, TYPE_CHECKING

from ..core.events import CombatEvent, FightEnded, FightStarted, LogMessage
from .combat import AttackResult, FightResult, attack, charge, fight
from .narration_log import LogLevel

if TYPE_CHECKING:
    from ..core.events import EventManager
    from .entities.combatant import Combatant


class Arena:
    """Runs charges, attacks and fights and publishes their events."""

    def __init__(self, event_manager: "EventManager"):
        self.event_manager = event_manager
        self.fights_run = 0

    def _publish(self, events: Sequence[CombatEvent]) -> None:
        self.event_manager.publish_all(events, source="Arena")
        self.event_manager.process_events()

    def _emit_log(self, message: str, category: str = "SYSTEM", level: LogLevel = LogLevel.INFO) -> None:
        """Emit a log message event."""
        self.event_manager.publish(
            LogMessage(message=message, category=category, level=level, source="Arena"),
            source="Arena"
        )

    def charge(self, combatant: "Combatant") -> list[CombatEvent]:
        """Charge ``combatant`` and publish the narration."""
        events = charge(combatant)
        self._publish(events)
        return events

    def attack(self, attacker: "Combatant", defender: "Combatant") -> AttackResult:
        """Run one attack and publish the narration."""
        result = attack(attacker, defender)
        self._publish(result.events)
        return result

    def fight(self, actor: "Combatant", enemies: Sequence["Combatant"]) -> FightResult:
        """Run a full fight, bracketed by FightStarted and FightEnded events.

        Args:
            actor: The combatant that charges and attacks
            enemies: Defenders, attacked in the given order

        Returns:
            The FightResult of the fight, unchanged
        """
        started = FightStarted(actor.name, tuple(enemy.name for enemy in enemies))

        result = fight(actor, enemies)
        self.fights_run += 1

        ended = FightEnded(
            actor.name,
            result.roster.defeated_names,
            result.roster.total_hit_points,
        )
        self._publish([started, *result.events, ended])

        if not actor.is_alive:
            self._emit_log(
                f"{actor.name} fought while defeated; no attack landed",
                category="WARNING",
                level=LogLevel.WARNING,
            )
        self._emit_log(
            f"Fight #{self.fights_run}: {result.total_damage} damage dealt in "
            f"{sum(a.strikes for a in result.attacks)} strikes",
            category="DEBUG",
            level=LogLevel.DEBUG,
        )
        self.event_manager.process_events()

        return result
