"""
Patterns Visitor - Animals

Visitor pattern: "define a new operation without changing the classes
of the elements on which it operates." The animals only know where
they are; walking and making sounds live in visitors.

Adding a behavior means adding a visitor. Adding an animal means
adding a visit_* method to every visitor.
"""
from abc import ABC, abstractmethod
from typing import Any

from ..config import CAT_SPEED, DOG_SPEED


class Animal(ABC):
    """Base class for all animals.

    Keeps a location so the walk visitor has something to change.
    """

    def __init__(self):
        self.location = 0

    def walk_distance(self, distance: int) -> None:
        self.location += distance

    def get_location(self) -> int:
        return self.location

    @abstractmethod
    def accept(self, visitor: "AnimalVisitor") -> Any:
        """Let the visitor do its work on this animal (double dispatch)."""


class Cat(Animal):
    def accept(self, visitor: "AnimalVisitor") -> Any:
        return visitor.visit_cat(self)


class Dog(Animal):
    def accept(self, visitor: "AnimalVisitor") -> Any:
        return visitor.visit_dog(self)


class AnimalVisitor(ABC):
    """One visit method per animal type."""

    @abstractmethod
    def visit_cat(self, cat: Cat) -> Any:
        pass

    @abstractmethod
    def visit_dog(self, dog: Dog) -> Any:
        pass


class WalkVisitor(AnimalVisitor):
    """Moves each animal by its own speed."""

    def visit_cat(self, cat: Cat) -> None:
        cat.walk_distance(CAT_SPEED)

    def visit_dog(self, dog: Dog) -> None:
        dog.walk_distance(DOG_SPEED)


class SoundVisitor(AnimalVisitor):
    """Prints each animal's sound and where it is, returns the line."""

    def visit_cat(self, cat: Cat) -> str:
        line = f"Meao! I'm at {cat.get_location()}"
        print(line)
        return line

    def visit_dog(self, dog: Dog) -> str:
        line = f"Woof! I'm at {dog.get_location()}"
        print(line)
        return line


def main():
    animals = [Cat(), Dog()]

    sound = SoundVisitor()
    walk = WalkVisitor()

    for animal in animals:
        animal.accept(sound)
    for animal in animals:
        animal.accept(walk)
    for animal in animals:
        animal.accept(sound)


if __name__ == '__main__':
    main()
