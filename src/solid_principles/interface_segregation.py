# src/solid_principles/interface_segregation.py
"""
Interface Segregation Principle (ISP).

Clients should not be forced to depend on interfaces they do not use. A robot
works but never eats, so eating lives in its own interface.
"""

from abc import ABC, abstractmethod


class Workable(ABC):
    """Interface for anything that can work."""

    @abstractmethod
    def work(self) -> None:
        pass


class Feedable(ABC):
    """Interface for anything that needs to eat."""

    @abstractmethod
    def eat(self) -> None:
        pass


class HumanWorker(Workable, Feedable):
    def work(self) -> None:
        print("Working")

    def eat(self) -> None:
        print("Eating")


class RobotWorker(Workable):
    def work(self) -> None:
        print("Working")
