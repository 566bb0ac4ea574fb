"""Combat narration events.

This module defines every event the combat simulator reports. Combat
operations return these events instead of printing, and the caller decides
whether to publish, render or discard them.

Event Design Principles:
- Events are immutable dataclasses
- Events carry snapshots (names and numbers), never live Combatant references,
  so a recorded event keeps describing the moment it was created
- Events use proper enums instead of magic strings
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
from abc import ABC
from enum import Enum, auto

if TYPE_CHECKING:
    from ...game.narration_log import LogLevel


class EventType(Enum):
    """Types of combat events that subscribers can listen for."""
    # Charge Events
    CHARGE_STARTED = auto()
    COMBATANT_HEALED = auto()
    TEMPERATURE_RAISED = auto()
    BLADDER_FILLED = auto()
    BLADDER_OVERFLOWED = auto()

    # Attack Events
    FIRE_TAUNT = auto()
    BLADDER_VOLLEY = auto()
    COMBATANT_ATTACKED = auto()
    COMBATANT_DEFEATED = auto()
    ATTACK_FAILED = auto()
    SOAKING_FINISHED = auto()

    # Fight Events
    FIGHT_STARTED = auto()
    FIGHT_ENDED = auto()

    # Logging Events
    LOG_MESSAGE = auto()
    LOG_SAVE_REQUESTED = auto()


@dataclass(frozen=True)
class CombatEvent(ABC):
    """Base class for all combat events."""
    event_type: EventType = field(init=False)


# Charge Events
@dataclass(frozen=True)
class ChargeStarted(CombatEvent):
    """Event emitted when any combatant begins charging."""
    combatant_name: str

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.CHARGE_STARTED)


@dataclass(frozen=True)
class CombatantHealed(CombatEvent):
    """Event emitted when a charge restores hit points."""
    combatant_name: str
    amount: int
    hit_points: int  # after healing

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.COMBATANT_HEALED)


@dataclass(frozen=True)
class TemperatureRaised(CombatEvent):
    """Event emitted when a fire combatant doubles its temperature."""
    combatant_name: str
    temperature: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.TEMPERATURE_RAISED)


@dataclass(frozen=True)
class BladderOverflowed(CombatEvent):
    """Event emitted when a water combatant takes in more than it can hold."""
    combatant_name: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BLADDER_OVERFLOWED)


@dataclass(frozen=True)
class BladderFilled(CombatEvent):
    """Event emitted at the end of every water charge with the resulting level."""
    combatant_name: str
    level: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BLADDER_FILLED)


# Attack Events
@dataclass(frozen=True)
class FireTaunt(CombatEvent):
    """Event emitted before every fire attack."""
    combatant_name: str
    temperature: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.FIRE_TAUNT)


@dataclass(frozen=True)
class BladderVolley(CombatEvent):
    """Event emitted when a water combatant spends its bladder on repeated strikes."""
    combatant_name: str
    strikes: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BLADDER_VOLLEY)


@dataclass(frozen=True)
class CombatantAttacked(CombatEvent):
    """Event emitted for every strike that lands on a defender."""
    attacker_name: str
    defender_name: str
    attack_power: int  # effective power used for this strike
    defender_hit_points: int  # after the strike

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.COMBATANT_ATTACKED)


@dataclass(frozen=True)
class CombatantDefeated(CombatEvent):
    """Event emitted when a strike leaves the defender at or below zero hit points."""
    combatant_name: str
    hit_points: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.COMBATANT_DEFEATED)


@dataclass(frozen=True)
class AttackFailed(CombatEvent):
    """Event emitted when a defeated combatant tries to strike."""
    combatant_name: str
    hit_points: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ATTACK_FAILED)


@dataclass(frozen=True)
class SoakingFinished(CombatEvent):
    """Event emitted after every water attack."""
    combatant_name: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.SOAKING_FINISHED)


# Fight Events
@dataclass(frozen=True)
class FightStarted(CombatEvent):
    """Event emitted before a fight's charge."""
    actor_name: str
    enemy_names: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.FIGHT_STARTED)


@dataclass(frozen=True)
class FightEnded(CombatEvent):
    """Event emitted after the last attack of a fight."""
    actor_name: str
    defeated_names: tuple[str, ...]
    remaining_hit_points: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.FIGHT_ENDED)


# Logging Events
@dataclass(frozen=True)
class LogMessage(CombatEvent):
    """Event emitted when a system component wants something logged."""
    message: str
    category: str
    level: "LogLevel"
    source: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class LogSaveRequested(CombatEvent):
    """Event emitted when the narration log should be written to a file."""
    directory: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_SAVE_REQUESTED)
