"""
Design Patterns Playground
Four small, independent demos of classic OOP design patterns.

- state/     - NameFormatter switches formatting strategy on key release
- observer/  - a key listener that knows nothing about the window
- decorator/ - sandwiches wrapped in toppings
- visitor/   - animals that accept walk and sound behaviors
"""
