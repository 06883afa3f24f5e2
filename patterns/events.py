"""
Patterns Events - Input events and the EventBus

Frontends (pygame window, console) publish input events.
Demos subscribe only to the events they care about; every other
event type is simply delivered to nobody.
"""
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, List, Any


# === Keyboard Events ===

@dataclass
class KeyPressedEvent:
    """Fired when a key goes down."""
    key: int
    name: str


@dataclass
class KeyReleasedEvent:
    """Fired when a key comes back up."""
    key: int
    name: str


@dataclass
class KeyTypedEvent:
    """Fired when a key press produced text."""
    char: str


# === Mouse Events ===

@dataclass
class MousePressedEvent:
    """Fired when a mouse button goes down."""
    button: int
    pos: tuple


@dataclass
class MouseReleasedEvent:
    """Fired when a mouse button comes back up."""
    button: int
    pos: tuple


@dataclass
class MouseClickedEvent:
    """Fired when a button is pressed and released at the same position."""
    button: int
    pos: tuple


@dataclass
class MouseEnteredEvent:
    """Fired when the pointer enters the window."""


@dataclass
class MouseExitedEvent:
    """Fired when the pointer leaves the window."""


# === Window Events ===

@dataclass
class QuitEvent:
    """Fired when the window is closed or ESC is pressed."""


INPUT_EVENTS = (
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MousePressedEvent,
    MouseReleasedEvent,
    MouseClickedEvent,
    MouseEnteredEvent,
    MouseExitedEvent,
)


# === EventBus ===

class EventBus:
    """Central event dispatcher.

    Publishers don't know about subscribers. Dispatch runs to completion:
    an event published from inside a handler is queued and delivered
    after the current event has reached all of its handlers.
    """

    def __init__(self):
        self._subscribers: Dict[type, List[Callable]] = {}
        self._pending: Deque[Any] = deque()
        self._dispatching = False
        self._event_history: List[Any] = []
        self._recording = False

    def subscribe(self, event_type: type, handler: Callable) -> None:
        """Register a handler for an event type."""
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []
        self._subscribers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        """Remove a handler from an event type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(handler)
            except ValueError:
                pass

    def has_subscribers(self, event_type: type) -> bool:
        return bool(self._subscribers.get(event_type))

    def publish(self, event: Any) -> None:
        """Notify all handlers subscribed to this event's type.

        Handler exceptions propagate to the caller; events queued
        behind the failing one are dropped.
        """
        if self._recording:
            self._event_history.append(event)

        self._pending.append(event)
        if self._dispatching:
            return

        self._dispatching = True
        try:
            while self._pending:
                current = self._pending.popleft()
                # Copy so handlers may unsubscribe while being called
                for handler in list(self._subscribers.get(type(current), [])):
                    handler(current)
        finally:
            self._pending.clear()
            self._dispatching = False

    def clear(self) -> None:
        """Clear all subscribers."""
        self._subscribers.clear()

    def start_recording(self) -> None:
        """Start recording events for replay/debugging."""
        self._recording = True
        self._event_history.clear()

    def stop_recording(self) -> List[Any]:
        """Stop recording and return event history."""
        self._recording = False
        return self._event_history.copy()


# Global EventBus instance
event_bus = EventBus()
