"""
Console Source - Headless event source

Drives the demos from text instead of a window, one line per poll():
    k  -> key pressed + key released
    c  -> mouse pressed + released + clicked
    q  -> quit

Tokens may be separated by spaces or written together ("kcc").
Same interface as PygameEventSource - Duck Typing!
"""
from typing import Iterable, Iterator, List, Any, Optional

from patterns.events import (
    event_bus,
    EventBus,
    KeyPressedEvent,
    KeyReleasedEvent,
    MousePressedEvent,
    MouseReleasedEvent,
    MouseClickedEvent,
    QuitEvent,
)

# Stand-ins for the values a window would deliver
CONSOLE_KEY = 32  # space
CONSOLE_KEY_NAME = "space"
CONSOLE_BUTTON = 1
CONSOLE_POS = (0, 0)


def events_for_token(token: str) -> List[Any]:
    """Input events a single token stands for (empty if unknown)."""
    if token == "k":
        return [
            KeyPressedEvent(key=CONSOLE_KEY, name=CONSOLE_KEY_NAME),
            KeyReleasedEvent(key=CONSOLE_KEY, name=CONSOLE_KEY_NAME),
        ]
    if token == "c":
        return [
            MousePressedEvent(button=CONSOLE_BUTTON, pos=CONSOLE_POS),
            MouseReleasedEvent(button=CONSOLE_BUTTON, pos=CONSOLE_POS),
            MouseClickedEvent(button=CONSOLE_BUTTON, pos=CONSOLE_POS),
        ]
    if token == "q":
        return [QuitEvent()]
    return []


class ConsoleEventSource:
    """Reads tokens from lines of text and publishes the matching events."""

    def __init__(self, lines: Iterable[str], bus: Optional[EventBus] = None):
        self._lines: Iterator[str] = iter(lines)
        self.bus = bus if bus is not None else event_bus
        self.running = True

    def poll(self) -> bool:
        """Consume one line. False once quit or out of input."""
        if not self.running:
            return False

        try:
            line = next(self._lines)
        except StopIteration:
            self.running = False
            return False

        for token in line.strip().replace(" ", ""):
            events = events_for_token(token.lower())
            if not events:
                print(f"Unknown input {token!r} (use k, c or q)")
                continue
            for event in events:
                self.bus.publish(event)
                if isinstance(event, QuitEvent):
                    self.running = False
                    return False

        return True

    def cleanup(self) -> None:
        """Nothing to release - Duck Typing keeps the interface anyway."""
        self.running = False
