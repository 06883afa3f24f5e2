"""Pytest fixtures for the pattern demos."""
import pytest


@pytest.fixture
def bus():
    """A fresh EventBus so tests don't share subscribers."""
    from patterns.events import EventBus
    return EventBus()


@pytest.fixture
def formatter():
    """NameFormatter for John M Doe in its initial state."""
    from patterns.state.name_formatter import NameFormatter
    return NameFormatter("John", "M", "Doe")


@pytest.fixture
def controller(formatter, bus):
    """Controller wiring the formatter to the fresh bus."""
    from patterns.state.controller import NameFormatterController
    return NameFormatterController(formatter, bus)
