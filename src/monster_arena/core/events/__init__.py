"""Event system for combat narration.

This package contains the event-driven narration architecture:
- event_manager.py: Publisher-subscriber event routing
- events.py: Narration event definitions returned by combat operations
"""

from .event_manager import EventManager, EventPriority
from .events import (
    CombatEvent,
    EventType,
    ChargeStarted,
    CombatantHealed,
    TemperatureRaised,
    BladderFilled,
    BladderOverflowed,
    FireTaunt,
    BladderVolley,
    CombatantAttacked,
    CombatantDefeated,
    AttackFailed,
    SoakingFinished,
    FightStarted,
    FightEnded,
    LogMessage,
    LogSaveRequested,
)

__all__ = [
    "EventManager",
    "EventPriority",
    "CombatEvent",
    "EventType",
    "ChargeStarted",
    "CombatantHealed",
    "TemperatureRaised",
    "BladderFilled",
    "BladderOverflowed",
    "FireTaunt",
    "BladderVolley",
    "CombatantAttacked",
    "CombatantDefeated",
    "AttackFailed",
    "SoakingFinished",
    "FightStarted",
    "FightEnded",
    "LogMessage",
    "LogSaveRequested",
]
