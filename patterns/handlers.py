"""
Patterns Handlers - Console logging of input events

Subscribes to the EventBus like any other handler; the frontends
don't know it exists.
"""
from typing import Optional

from .events import (
    event_bus,
    EventBus,
    INPUT_EVENTS,
    KeyPressedEvent,
    KeyTypedEvent,
    MousePressedEvent,
    MouseReleasedEvent,
    MouseClickedEvent,
    MouseEnteredEvent,
    QuitEvent,
)


class EventLogger:
    """Simple handler that logs events to console."""

    def __init__(self, bus: Optional[EventBus] = None, verbose: bool = False):
        self.bus = bus if bus is not None else event_bus
        self.verbose = verbose
        self.bus.subscribe(QuitEvent, self.on_quit)
        if verbose:
            for event_type in INPUT_EVENTS:
                self.bus.subscribe(event_type, self.on_input)

    def on_input(self, event) -> None:
        print(self.describe(event))

    @staticmethod
    def describe(event) -> str:
        """One log line for an input event."""
        if isinstance(event, KeyTypedEvent):
            return f"[KEY] typed {event.char!r}"

        if hasattr(event, "key"):
            action = "pressed" if isinstance(event, KeyPressedEvent) else "released"
            return f"[KEY] {event.name} {action}"

        if hasattr(event, "button"):
            action = {
                MousePressedEvent: "pressed",
                MouseReleasedEvent: "released",
                MouseClickedEvent: "clicked",
            }[type(event)]
            return f"[MOUSE] button {event.button} {action} at {event.pos}"

        where = "entered" if isinstance(event, MouseEnteredEvent) else "exited"
        return f"[MOUSE] pointer {where} window"

    def on_quit(self, event: QuitEvent) -> None:
        if self.verbose:
            print("[WINDOW] quit requested")
