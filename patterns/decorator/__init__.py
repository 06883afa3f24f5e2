"""Patterns Decorator - sandwiches wrapped in toppings"""
from .sandwiches import (
    Sandwich,
    ToppingsDecorator,
    Chicken,
    Hotdog,
    ExtraCheeseTopping,
    ExtraSauceTopping,
)
