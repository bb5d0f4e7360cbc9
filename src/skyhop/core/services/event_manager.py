"""
event_manager.py
----------------
Event-driven system for decoupled game component communication.
The simulation engine emits these events per tick; the host routes them
to audio cues and session statistics without direct dependencies.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from skyhop.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class ScoredEvent(BaseEvent):
    """Dispatched when the avatar passes an obstacle."""
    score: int


@dataclass(frozen=True)
class LifeLostEvent(BaseEvent):
    """Dispatched when the avatar hits an obstacle or leaves the playfield."""
    lives_remaining: int
    cause: str  # "collision" or "boundary"


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """Dispatched once when the last life is lost."""
    final_score: int
    level: int


@dataclass(frozen=True)
class LevelUpEvent(BaseEvent):
    """Dispatched when the difficulty tier rises."""
    level: int


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}
        DebugLogger.init("EventManager initialized", category="event_manager")

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []

        if callback in self._subscribers[event_type]:
            return

        self._subscribers[event_type].append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Remove a callback from an event type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    def unsubscribe_all(self, callback: Callable) -> None:
        """Remove a callback from all event types."""
        for subscribers in self._subscribers.values():
            try:
                subscribers.remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and skipped so presentation faults
        never reach the simulation.

        Args:
            event: Event instance to dispatch
        """
        event_type = type(event)

        if event_type not in self._subscribers:
            return

        for callback in list(self._subscribers[event_type]):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    def dispatch_all(self, events) -> None:
        """Dispatch a tick's events in the order they happened."""
        for event in events:
            self.dispatch(event)

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers. Call on host shutdown."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """
        Get count of subscribers.

        Args:
            event_type: Specific event type, or None for total

        Returns:
            Number of subscribers
        """
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())


# ===========================================================
# Singleton Access
# ===========================================================

_EVENTS = None


def get_events() -> EventManager:
    """Get or create the event manager singleton."""
    global _EVENTS
    if _EVENTS is None:
        _EVENTS = EventManager()
    return _EVENTS


def reset_events() -> None:
    """Reset the singleton. Call on full game restart."""
    global _EVENTS
    _EVENTS = None
