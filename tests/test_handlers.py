"""Tests for the console event logger."""
import pytest
from patterns.events import (
    INPUT_EVENTS,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MousePressedEvent,
    MouseReleasedEvent,
    MouseClickedEvent,
    MouseEnteredEvent,
    MouseExitedEvent,
    QuitEvent,
)
from patterns.handlers import EventLogger


class TestEventLogger:

    def test_verbose_subscribes_every_input_event(self, bus):
        EventLogger(bus, verbose=True)
        for event_type in INPUT_EVENTS:
            assert bus.has_subscribers(event_type)

    def test_quiet_subscribes_only_quit(self, bus):
        EventLogger(bus)
        assert bus.has_subscribers(QuitEvent)
        for event_type in INPUT_EVENTS:
            assert not bus.has_subscribers(event_type)

    @pytest.mark.parametrize("event,line", [
        (KeyPressedEvent(key=97, name="a"), "[KEY] a pressed"),
        (KeyReleasedEvent(key=97, name="a"), "[KEY] a released"),
        (KeyTypedEvent(char="a"), "[KEY] typed 'a'"),
        (MousePressedEvent(button=1, pos=(3, 4)), "[MOUSE] button 1 pressed at (3, 4)"),
        (MouseReleasedEvent(button=1, pos=(3, 4)), "[MOUSE] button 1 released at (3, 4)"),
        (MouseClickedEvent(button=3, pos=(3, 4)), "[MOUSE] button 3 clicked at (3, 4)"),
        (MouseEnteredEvent(), "[MOUSE] pointer entered window"),
        (MouseExitedEvent(), "[MOUSE] pointer exited window"),
    ])
    def test_verbose_lines(self, bus, capsys, event, line):
        EventLogger(bus, verbose=True)
        bus.publish(event)
        assert capsys.readouterr().out == line + "\n"

    def test_quiet_prints_nothing(self, bus, capsys):
        EventLogger(bus)
        bus.publish(KeyReleasedEvent(key=97, name="a"))
        bus.publish(QuitEvent())
        assert capsys.readouterr().out == ""
