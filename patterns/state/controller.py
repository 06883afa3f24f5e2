"""
Patterns State - Controller

Wires input events to the NameFormatter:
- key released  -> switch_state()
- mouse clicked -> print_name()

Other input events have no subscriber here, so they're ignored.
"""
from typing import Optional

from ..events import event_bus, EventBus, KeyReleasedEvent, MouseClickedEvent
from .name_formatter import NameFormatter


class NameFormatterController:
    """Subscribes a NameFormatter to key and mouse events.

    The formatter could just as well be a cursor in a paint program:
    the controller only tells it that something happened, and the
    current state decides what that means.
    """

    def __init__(self, formatter: NameFormatter, bus: Optional[EventBus] = None):
        self.formatter = formatter
        self.bus = bus if bus is not None else event_bus

        self.bus.subscribe(KeyReleasedEvent, self.on_key_released)
        self.bus.subscribe(MouseClickedEvent, self.on_mouse_clicked)

    def on_key_released(self, event: KeyReleasedEvent) -> None:
        self.formatter.switch_state()

    def on_mouse_clicked(self, event: MouseClickedEvent) -> None:
        self.formatter.print_name()

    def detach(self) -> None:
        """Stop listening to the bus."""
        self.bus.unsubscribe(KeyReleasedEvent, self.on_key_released)
        self.bus.unsubscribe(MouseClickedEvent, self.on_mouse_clicked)
