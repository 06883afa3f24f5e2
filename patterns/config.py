"""
Patterns Configuration
Contains demo constants and window settings.
"""

# Window (small frame, just big enough to click on)
WINDOW_WIDTH = 200
WINDOW_HEIGHT = 200
FPS = 30

STATE_CAPTION = "State Pattern Example"
OBSERVER_CAPTION = "Observer Pattern Example"

COLOR_BG = (30, 30, 40)
COLOR_TEXT = (200, 200, 200)

# State demo
DEMO_FIRST = "John"
DEMO_MIDDLE = "M"
DEMO_LAST = "Doe"

# Decorator demo prices
CHICKEN_PRICE = 6.99
HOTDOG_PRICE = 5.99
EXTRA_CHEESE_PRICE = 2.0
EXTRA_SAUCE_PRICE = 0.99

# Visitor demo speeds (distance per walk)
CAT_SPEED = 1
DOG_SPEED = 2
