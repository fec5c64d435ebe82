"""Simulation events for tracing rounds."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of simulation events."""

    # Round flow events
    SHOE_SHUFFLED = auto()
    BET_PLACED = auto()
    ROUND_STARTED = auto()
    ROUND_ENDED = auto()
    TRIAL_COMPLETED = auto()

    # Player action events
    PLAYER_HIT = auto()
    PLAYER_STAND = auto()
    PLAYER_DOUBLE = auto()
    PLAYER_SPLIT = auto()
    PLAYER_SURRENDER = auto()
    SPLIT_ACE_STANDS = auto()

    # Dealer events
    DEALER_HITS = auto()
    DEALER_STANDS = auto()
    DEALER_BUSTS = auto()
    DEALER_BLACKJACK = auto()

    # Outcome events
    PLAYER_BLACKJACK = auto()
    PLAYER_BUSTS = auto()
    HAND_SETTLED = auto()


@dataclass(frozen=True)
class GameEvent:
    """Immutable simulation event."""

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        if not self.data:
            return self.event_type.name
        details = " ".join(f"{key}={value}" for key, value in self.data.items())
        return f"{self.event_type.name}: {details}"


# Type alias for event handlers
EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Simple event emitter for simulation events.

    Allows subscribing to specific event types or all events.
    """

    def __init__(self, keep_history: bool = True) -> None:
        """
        Initialize the event emitter.

        Args:
            keep_history: Record every emitted event (disable for long runs)
        """
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._keep_history = keep_history
        self._event_history: list[GameEvent] = []

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Unsubscribe a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        """Emit an event to all subscribers."""
        if self._keep_history:
            self._event_history.append(event)

        for handler in self._handlers.get(event.event_type, []):
            handler(event)

        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(
        self,
        event_type: EventType,
        **data: Any,
    ) -> GameEvent:
        """Create and emit a new event."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Return the event history."""
        return self._event_history.copy()

    def of_type(self, event_type: EventType) -> list[GameEvent]:
        """Return recorded events of one type."""
        return [e for e in self._event_history if e.event_type == event_type]

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()
