"""
Patterns Observer - KeyReleaseObserver

Observer pattern: the observer expresses interest in an event and
gets told when it happens. The window that publishes KeyReleasedEvent
never learns who is listening.
"""
import sys
from typing import Optional, TextIO

from ..events import event_bus, EventBus, KeyReleasedEvent

MESSAGE = "I know about the key click without knowing about the caller of the method"


class KeyReleaseObserver:
    """Prints a line every time a key is released."""

    def __init__(self, bus: Optional[EventBus] = None, out: Optional[TextIO] = None):
        self.bus = bus if bus is not None else event_bus
        self._out = out
        self.notifications = 0

        # Expressing our interest - the publisher doesn't know about us
        self.bus.subscribe(KeyReleasedEvent, self.on_key_released)

    def on_key_released(self, event: KeyReleasedEvent) -> None:
        self.notifications += 1
        print(MESSAGE, file=self._out if self._out is not None else sys.stdout)

    def detach(self) -> None:
        self.bus.unsubscribe(KeyReleasedEvent, self.on_key_released)
