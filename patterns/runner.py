"""
Patterns Runner - shared demo loop for the window-driven demos

Picks an event source from the command line flags and runs it until
the user quits.
"""
import argparse
import sys
from typing import Any, Optional, Sequence

from .events import EventBus
from .handlers import EventLogger


def build_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument('--console', action='store_true',
                       help='Read input tokens from stdin instead of opening a window '
                            '(k = key release, c = mouse click, q = quit)')
    parser.add_argument('--script', metavar='TOKENS',
                       help='Run a fixed token sequence headless, e.g. "ckc"')
    parser.add_argument('--verbose', action='store_true',
                       help='Print every input event to console')
    return parser


def create_source(args: argparse.Namespace, bus: EventBus,
                  caption: str, hint: str) -> Any:
    """Console source for --console/--script, pygame window otherwise."""
    if args.script is not None:
        from frontends.console_source import ConsoleEventSource
        return ConsoleEventSource([args.script], bus)

    if args.console:
        from frontends.console_source import ConsoleEventSource
        return ConsoleEventSource(sys.stdin, bus)

    try:
        from frontends.pygame_window import PygameEventSource
    except ImportError as e:
        print(f"Error: pygame is required for the window demo: {e}")
        print("Install with: pip install pygame (or run with --console)")
        sys.exit(1)
    return PygameEventSource(caption=caption, bus=bus, hint=hint)


def run(args: argparse.Namespace, bus: EventBus, caption: str, hint: str,
        controls: Optional[Sequence[str]] = None) -> None:
    """Run the demo loop until the source reports quit."""
    EventLogger(bus, verbose=args.verbose)
    source = create_source(args, bus, caption, hint)

    print(f"{caption} started!")
    for line in controls or ():
        print(line)
    if args.verbose:
        print("Verbose mode: events will be logged")

    try:
        while source.poll():
            pass
    except KeyboardInterrupt:
        pass
    finally:
        source.cleanup()
