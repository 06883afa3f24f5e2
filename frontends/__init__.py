"""
Patterns Frontends
Event sources for the window-driven demos.

DUCK TYPING EXAMPLE:
Both sources have the same interface:
- poll() -> bool   (publish pending input events, False once quit)
- cleanup()

No shared base class needed! Just swap them:

    # Real window
    source = PygameEventSource(200, 200, "State Pattern Example", bus)

    # Or headless, driven by text tokens
    source = ConsoleEventSource(sys.stdin, bus)

    # Demo loop works with either:
    while source.poll():
        pass
"""

# Note: Don't import the pygame source here to avoid importing pygame
# when it might not be needed. Import directly in the demo's main.py instead.
