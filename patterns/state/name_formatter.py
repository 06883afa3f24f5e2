"""
Patterns State - NameFormatter

State pattern: the formatter's behavior depends on which state it
currently holds. The context never checks the state itself, it just
asks the state to do the work.

The states are members of an Enum, each with its own pure formatting
function. Adding a state means adding a member and its function.
"""
import sys
from enum import Enum
from typing import Optional, TextIO


class InvalidNameError(ValueError):
    """Raised when a name part can't be formatted."""


def _first_initial_and_last(first: str, middle: str, last: str) -> str:
    if not first:
        raise InvalidNameError("first name must not be empty to take its initial")
    return first[0] + ", " + last


def _first_and_last(first: str, middle: str, last: str) -> str:
    return first + ", " + last


class NameFormatterState(Enum):
    """Every state formats a name in its own way."""

    FIRST_INITIAL_AND_LAST = "first_initial_and_last"
    FIRST_AND_LAST = "first_and_last"

    def format_name(self, first: str, middle: str, last: str) -> str:
        """Format the name parts according to this state."""
        if self is NameFormatterState.FIRST_INITIAL_AND_LAST:
            return _first_initial_and_last(first, middle, last)
        if self is NameFormatterState.FIRST_AND_LAST:
            return _first_and_last(first, middle, last)
        raise AssertionError(f"Unhandled state: {self!r}")


class NameFormatter:
    """Context object - holds a name and the current formatting state.

    Starts out as FIRST_INITIAL_AND_LAST. switch_state() alternates
    between the two states, print_name() writes the name formatted by
    whatever state is active.
    """

    def __init__(self, first: str, middle: str, last: str,
                 out: Optional[TextIO] = None):
        if not first:
            raise InvalidNameError("first name must not be empty")

        self._first = first
        self._middle = middle
        self._last = last

        self.state = NameFormatterState.FIRST_INITIAL_AND_LAST
        self.toggle = True  # True: next switch selects FIRST_AND_LAST

        self._out = out

    @property
    def first(self) -> str:
        return self._first

    @property
    def middle(self) -> str:
        return self._middle

    @property
    def last(self) -> str:
        return self._last

    def switch_state(self) -> NameFormatterState:
        """Flip to the other state and return it."""
        if self.toggle:
            self.state = NameFormatterState.FIRST_AND_LAST
        else:
            self.state = NameFormatterState.FIRST_INITIAL_AND_LAST
        self.toggle = not self.toggle
        return self.state

    def format(self) -> str:
        """Formatted name for the current state, without printing it."""
        return self.state.format_name(self._first, self._middle, self._last)

    def print_name(self) -> str:
        """Write the formatted name as one line and return it."""
        line = self.format()
        # Resolve stdout lazily so capture (pytest capsys) sees the output
        print(line, file=self._out if self._out is not None else sys.stdout)
        return line

    def __repr__(self) -> str:
        return (f"NameFormatter({self._first!r}, {self._middle!r}, {self._last!r}, "
                f"state={self.state.name})")
