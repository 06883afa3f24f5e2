#!/usr/bin/env python3
"""
Observer Pattern - Main Entry Point
===================================

Run with: python -m patterns.observer.main [--console | --script kk] [--verbose]
"""
from ..config import OBSERVER_CAPTION
from ..events import EventBus
from ..runner import build_parser, run
from .key_observer import KeyReleaseObserver


def main(argv=None):
    parser = build_parser("Observer pattern demo - a decoupled key listener")
    args = parser.parse_args(argv)

    bus = EventBus()
    KeyReleaseObserver(bus)

    run(args, bus, OBSERVER_CAPTION, hint="Release a key",
        controls=["Controls: any key = notify observer, ESC = quit"])


if __name__ == '__main__':
    main()
