"""
Narration log for combat events and diagnostics.

This module turns combat events into readable narration, stores it with
categorization and filtering, optionally echoes it to the console, and can
save the whole buffer to a file.
"""
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Callable, Optional, TYPE_CHECKING

from ..core.events import CombatEvent, EventType, LogMessage as LogEvent, LogSaveRequested

if TYPE_CHECKING:
    from ..core.events import EventManager


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()   # System messages (loading, saving, etc.)
    CHARGE = auto()   # Charge narration
    ATTACK = auto()   # Attack narration
    DEFEAT = auto()   # Deaths and failed attacks
    FIGHT = auto()    # Fight start/end summaries
    DEBUG = auto()    # Debug messages
    WARNING = auto()  # Warning messages
    ERROR = auto()    # Error messages


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.CHARGE: "CHG",
    LogCategory.ATTACK: "ATK",
    LogCategory.DEFEAT: "DEF",
    LogCategory.FIGHT: "FGT",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}


@dataclass
class NarrationEntry:
    """A single log line with metadata."""
    text: str
    category: LogCategory
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the entry for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


# Narration text per event type
_NARRATORS: dict[EventType, tuple[LogCategory, Callable[..., str]]] = {
    EventType.CHARGE_STARTED: (
        LogCategory.CHARGE,
        lambda e: f"{e.combatant_name} charges up to attack",
    ),
    EventType.COMBATANT_HEALED: (
        LogCategory.CHARGE,
        lambda e: f"{e.combatant_name} heals {e.amount} and is back to {e.hit_points} HP",
    ),
    EventType.TEMPERATURE_RAISED: (
        LogCategory.CHARGE,
        lambda e: (
            f"{e.combatant_name} took a magma bath and increased temperature "
            f"to {e.temperature} degrees!"
        ),
    ),
    EventType.BLADDER_OVERFLOWED: (
        LogCategory.CHARGE,
        lambda e: f"{e.combatant_name} took in too much water",
    ),
    EventType.BLADDER_FILLED: (
        LogCategory.CHARGE,
        lambda e: f"{e.combatant_name} now has their bladder filled with {e.level} L water.",
    ),
    EventType.FIRE_TAUNT: (
        LogCategory.ATTACK,
        lambda e: f"And now you will burn from my fire at {e.temperature} degrees!",
    ),
    EventType.BLADDER_VOLLEY: (
        LogCategory.ATTACK,
        lambda e: f"{e.combatant_name} will use their bladder to attack multiple times",
    ),
    EventType.COMBATANT_ATTACKED: (
        LogCategory.ATTACK,
        lambda e: f"{e.attacker_name} attacks {e.defender_name} at level {e.attack_power}",
    ),
    EventType.COMBATANT_DEFEATED: (
        LogCategory.DEFEAT,
        lambda e: f"{e.combatant_name} has died.",
    ),
    EventType.ATTACK_FAILED: (
        LogCategory.DEFEAT,
        lambda e: f"{e.combatant_name} took too much damage to attack",
    ),
    EventType.SOAKING_FINISHED: (
        LogCategory.ATTACK,
        lambda e: "And now you will be soaking wet!",
    ),
    EventType.FIGHT_STARTED: (
        LogCategory.FIGHT,
        lambda e: f"{e.actor_name} enters the arena against {', '.join(e.enemy_names) or 'nobody'}",
    ),
    EventType.FIGHT_ENDED: (
        LogCategory.FIGHT,
        lambda e: (
            f"{e.actor_name} finished the fight: "
            f"{len(e.defeated_names)} defeated, {e.remaining_hit_points} enemy HP left"
        ),
    ),
}

NARRATED_EVENT_TYPES = tuple(_NARRATORS)


def narrate(event: CombatEvent) -> Optional[str]:
    """Render a combat event as a line of narration (None if it has no narration)."""
    entry = _NARRATORS.get(event.event_type)
    if entry is None:
        return None
    return entry[1](event)


def narrate_all(events: list[CombatEvent]) -> list[str]:
    """Render every narrated event of ``events``, in order."""
    return [text for text in map(narrate, events) if text is not None]


class NarrationLog:
    """Collects combat narration and diagnostics with categorization and filtering."""

    def __init__(
        self,
        event_manager: "EventManager",
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO,
        echo: bool = False,
        log_directory: str = "logs",
    ):
        """Initialize the narration log.

        Args:
            event_manager: Event manager the log subscribes to (required)
            max_messages: Maximum number of entries kept in the buffer
            default_level: Default log level for filtering
            echo: Print visible entries to the console as they arrive
            log_directory: Directory used by save_log_to_file
        """
        self.messages: deque[NarrationEntry] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)
        self.event_manager = event_manager
        self.echo = echo
        self.log_directory = log_directory
        self.last_saved_path: Optional[str] = None

        self.category_levels = {
            LogCategory.DEBUG: LogLevel.DEBUG,
            LogCategory.WARNING: LogLevel.WARNING,
            LogCategory.ERROR: LogLevel.ERROR,
            # Everything else defaults to INFO
        }

        self._setup_event_subscriptions()

    def _setup_event_subscriptions(self) -> None:
        """Set up event subscriptions for narration and logging."""
        for event_type in NARRATED_EVENT_TYPES:
            self.event_manager.subscribe(event_type, self._handle_combat_event)

        self.event_manager.subscribe(EventType.LOG_MESSAGE, self._handle_log_message_event)

        self.event_manager.subscribe(EventType.LOG_SAVE_REQUESTED, self._handle_log_save_request)

        # Route event bus diagnostics into the debug category
        self.event_manager.set_debug_callback(self.debug)

    def _handle_combat_event(self, event: CombatEvent) -> None:
        """Handle combat events by storing their narration."""
        category, narrator = _NARRATORS[event.event_type]
        self.log(narrator(event), category)

    def _handle_log_message_event(self, event: CombatEvent) -> None:
        """Handle log message events from the event system."""
        if not isinstance(event, LogEvent):
            return

        try:
            category = LogCategory[event.category.upper()]
        except (KeyError, AttributeError):
            category = LogCategory.SYSTEM

        self.log(f"[{event.source}] {event.message}", category)

    def _handle_log_save_request(self, event: CombatEvent) -> None:
        """Handle log save request events from the event system."""
        if not isinstance(event, LogSaveRequested):
            return

        if self.save_log_to_file(event.directory):
            self.system(f"Narration log saved to {self.last_saved_path}")
        else:
            self.error("Failed to save narration log")

    def _is_visible(self, entry: NarrationEntry) -> bool:
        if entry.category not in self.enabled_categories:
            return False
        message_level = self.category_levels.get(entry.category, LogLevel.INFO)
        return message_level.value >= self.log_level.value

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM) -> None:
        """Add a message to the log.

        Args:
            text: The message text
            category: The category of the message
        """
        # Always store entries so a saved log is complete
        entry = NarrationEntry(text=text, category=category)
        self.messages.append(entry)

        if self.echo and self._is_visible(entry):
            print(entry.text)

    # Convenience methods for common categories
    def system(self, text: str) -> None:
        """Log a system message."""
        self.log(text, LogCategory.SYSTEM)

    def debug(self, text: str) -> None:
        """Log a debug message."""
        self.log(text, LogCategory.DEBUG)

    def warning(self, text: str) -> None:
        """Log a warning message."""
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        """Log an error message."""
        self.log(text, LogCategory.ERROR)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[NarrationEntry]:
        """Get recent messages, optionally filtered by category.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None for all visible)

        Returns:
            List of recent messages, oldest first
        """
        if categories:
            filtered = [msg for msg in self.messages
                        if msg.category in categories and msg.category in self.enabled_categories]
        else:
            filtered = [msg for msg in self.messages if self._is_visible(msg)]

        if count is not None and count < len(filtered):
            return filtered[-count:] if count > 0 else []
        return filtered

    def get_narration(self) -> list[str]:
        """Plain text of every visible message, oldest first."""
        return [msg.text for msg in self.get_messages()]

    def clear(self) -> None:
        """Clear all messages from the log."""
        self.messages.clear()

    def enable_category(self, category: LogCategory) -> None:
        """Enable a log category."""
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        """Disable a log category."""
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        """Set the minimum log level."""
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        """Check if debug messages are currently visible."""
        return (LogCategory.DEBUG in self.enabled_categories and
                self.log_level == LogLevel.DEBUG)

    def toggle_debug(self) -> None:
        """Toggle debug message visibility (and event bus diagnostics with it)."""
        if self.is_debug_enabled():
            self.set_log_level(LogLevel.INFO)
            self.event_manager.enable_debug_logging = False
        else:
            self.enable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.DEBUG)
            self.event_manager.enable_debug_logging = True

    def save_log_to_file(self, directory: Optional[str] = None) -> bool:
        """Save all messages to a timestamped log file.

        Args:
            directory: Target directory (defaults to ``log_directory``)

        Returns:
            True if save was successful, False otherwise
        """
        log_dir = directory or self.log_directory
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        filepath = os.path.join(log_dir, f"arena_{timestamp}.log")

        try:
            os.makedirs(log_dir, exist_ok=True)

            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Monster Arena - Narration Log\n")
                f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")

                if not self.messages:
                    f.write("No messages to save.\n")
                else:
                    # Save every buffered entry regardless of current filters
                    for msg in self.messages:
                        timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                        f.write(f"[{timestamp_str}] [{msg.category.name}] {msg.text}\n")
        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return False

        self.last_saved_path = filepath
        return True
