"""
Event bus for combat narration.

Combat operations return their events; the event manager routes published
events to subscribers (the narration log, tests, a renderer) following the
publisher-subscriber pattern, so the simulator never depends on how its
narration is displayed.
"""

import heapq
from collections import defaultdict
from enum import Enum
from typing import Callable, Iterable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import CombatEvent, EventType


class EventPriority(Enum):
    """Event processing priorities (lower value is processed first)."""
    CRITICAL = 0
    HIGH = 1
    NORMAL = 2
    LOW = 3


EventSubscriber = Callable[["CombatEvent"], None]


def _subscriber_name(subscriber: EventSubscriber) -> str:
    return getattr(subscriber, '__name__', type(subscriber).__name__)


class EventManager:
    """Central event bus for combat narration.

    Published events wait in a heap keyed by ``(priority, publication order)``
    until :meth:`process_events` delivers them, so events of equal priority
    always arrive in the order they were published.
    """

    def __init__(self, enable_debug_logging: bool = False):
        self.enable_debug_logging = enable_debug_logging

        self._subscribers: dict["EventType", list[EventSubscriber]] = defaultdict(list)
        self._universal_subscribers: list[EventSubscriber] = []

        # Entries are (priority value, sequence, source, event)
        self._queue: list[tuple[int, int, str, "CombatEvent"]] = []
        self._sequence = 0

        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        """Set a callback function for debug logging."""
        self._debug_callback = callback

    def _debug_log(self, message: str) -> None:
        if self.enable_debug_logging and self._debug_callback:
            self._debug_callback(f"[EVENT] {message}")

    def subscribe(self, event_type: "EventType", subscriber: EventSubscriber) -> None:
        """Deliver events of ``event_type`` to ``subscriber``."""
        self._subscribers[event_type].append(subscriber)
        self._debug_log(f"{_subscriber_name(subscriber)} listens to {event_type.name}")

    def subscribe_all(self, subscriber: EventSubscriber) -> None:
        """Deliver every event to ``subscriber``."""
        self._universal_subscribers.append(subscriber)
        self._debug_log(f"{_subscriber_name(subscriber)} listens to every event")

    def unsubscribe(self, event_type: "EventType", subscriber: EventSubscriber) -> bool:
        """Stop delivering ``event_type`` to ``subscriber``.

        Returns:
            True if the subscriber was registered for that type
        """
        handlers = self._subscribers.get(event_type, [])
        if subscriber not in handlers:
            return False
        handlers.remove(subscriber)
        return True

    def publish(
        self,
        event: "CombatEvent",
        priority: EventPriority = EventPriority.NORMAL,
        source: str = "unknown",
    ) -> None:
        """Queue an event until the next :meth:`process_events` call."""
        heapq.heappush(self._queue, (priority.value, self._sequence, source, event))
        self._sequence += 1
        self._debug_log(f"Queued {event.event_type.name} from {source} ({priority.name})")

    def publish_all(
        self,
        events: Iterable["CombatEvent"],
        priority: EventPriority = EventPriority.NORMAL,
        source: str = "unknown",
    ) -> None:
        """Queue a sequence of events, keeping their order."""
        for event in events:
            self.publish(event, priority=priority, source=source)

    def publish_immediate(self, event: "CombatEvent", source: str = "immediate") -> None:
        """Deliver an event right away, ahead of anything still queued."""
        self._deliver(event, source)

    def process_events(self, max_events: Optional[int] = None) -> int:
        """Deliver queued events in priority order.

        Args:
            max_events: Stop after this many events and leave the rest queued
                (None for all)

        Returns:
            Number of events delivered
        """
        delivered = 0
        while self._queue and (max_events is None or delivered < max_events):
            _, _, source, event = heapq.heappop(self._queue)
            self._deliver(event, source)
            delivered += 1
        return delivered

    def _deliver(self, event: "CombatEvent", source: str) -> None:
        self._debug_log(f"Delivering {event.event_type.name} from {source}")

        handlers = list(self._subscribers.get(event.event_type, []))
        handlers.extend(self._universal_subscribers)

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                self._debug_log(f"Error in subscriber {_subscriber_name(handler)}: {e}")
