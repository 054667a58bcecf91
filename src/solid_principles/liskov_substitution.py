# src/solid_principles/liskov_substitution.py
"""
Liskov Substitution Principle (LSP).

Subtypes must be substitutable for their base types without altering the
correctness of the program.

The first half shows the violation: ``Ostrich`` is a ``Bird`` but blows up
when asked to ``fly()``, so code written against ``Bird`` breaks. The second
half fixes it by moving flight into its own ``Flyable`` abstraction that only
flying birds implement.
"""

from abc import ABC, abstractmethod

from .exceptions import FlightNotSupportedError


class BirdBase:
    """What every bird has in common. Flying is not part of it."""

    @property
    def species(self) -> str:
        return type(self).__name__

    def __repr__(self):
        return f"{self.species}()"


class Bird(BirdBase):
    """Bird that assumes all birds fly."""

    def fly(self) -> None:
        print("Flying")


class Sparrow(Bird):
    # Sparrow can fly, so no problem
    pass


class Ostrich(Bird):
    """Overrides fly() to raise, which breaks substitutability."""

    def fly(self) -> None:
        raise FlightNotSupportedError("Ostrich can't fly")


class Flyable(ABC):
    """Flight as a separate capability."""

    @abstractmethod
    def fly(self) -> None:
        pass


class FlyingSparrow(BirdBase, Flyable):
    def fly(self) -> None:
        print("Flying")


class NonFlyingOstrich(BirdBase):
    # No fly method here
    pass


def can_fly(bird: BirdBase) -> bool:
    """Return True if the bird implements the Flyable abstraction."""
    return isinstance(bird, Flyable)
