#!/usr/bin/env python3
"""
State Pattern - Main Entry Point
================================

Run with: python -m patterns.state.main [--console | --script ckc] [--verbose]

In the window: release any key to switch the state, click the frame
to print the name in the current state.
"""
from ..config import STATE_CAPTION, DEMO_FIRST, DEMO_MIDDLE, DEMO_LAST
from ..events import EventBus
from ..runner import build_parser, run
from .controller import NameFormatterController
from .name_formatter import NameFormatter

CONTROLS = [
    "Controls: any key = switch state, click = print name, ESC = quit",
]


def main(argv=None):
    parser = build_parser("State pattern demo - a name formatter with two states")
    args = parser.parse_args(argv)

    bus = EventBus()
    formatter = NameFormatter(DEMO_FIRST, DEMO_MIDDLE, DEMO_LAST)
    NameFormatterController(formatter, bus)

    run(args, bus, STATE_CAPTION, hint="Key: switch state\nClick: print name",
        controls=CONTROLS)


if __name__ == '__main__':
    main()
