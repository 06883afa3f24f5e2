"""
Patterns Decorator - Sandwiches and Toppings

Decorator pattern: extend the behavior of one object without touching
other objects of the same class. A topping *is* a sandwich that wraps
another sandwich and adds its own price on top.

A list of toppings would do for prices alone, but the same wrapping
works for behavior that can't be summed up so easily (think of
stacked file streams: buffering around decoding around a raw file).
"""
from ..config import CHICKEN_PRICE, HOTDOG_PRICE, EXTRA_CHEESE_PRICE, EXTRA_SAUCE_PRICE


class Sandwich:
    """Base class for everything that has a price."""

    price = 0.0

    def get_price(self) -> float:
        return self.price

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.get_price():.2f})"


class ToppingsDecorator(Sandwich):
    """Wraps a sandwich and adds this topping's price to it.

    The wrapped sandwich may be a plain one or already carry toppings.
    """

    def __init__(self, sandwich: Sandwich):
        self.sandwich = sandwich

    def get_price(self) -> float:
        # Rounded to cents so stacked toppings don't drift
        return round(self.sandwich.get_price() + self.price, 2)


# Concrete sandwiches

class Chicken(Sandwich):
    price = CHICKEN_PRICE


class Hotdog(Sandwich):
    price = HOTDOG_PRICE


# Toppings

class ExtraCheeseTopping(ToppingsDecorator):
    price = EXTRA_CHEESE_PRICE


class ExtraSauceTopping(ToppingsDecorator):
    price = EXTRA_SAUCE_PRICE


def main():
    sandwich = Chicken()
    print(f"Chicken sandwich has price: {sandwich.get_price():.2f}")

    # Pass the latest topping on, otherwise it would be lost
    with_cheese = ExtraCheeseTopping(sandwich)
    double_cheese = ExtraCheeseTopping(with_cheese)
    print(f"With double cheese: {double_cheese.get_price():.2f}")

    with_sauce = ExtraSauceTopping(double_cheese)
    print(f"With double cheese and sauce: {with_sauce.get_price():.2f}")


if __name__ == '__main__':
    main()
