# src/solid_principles/dependency_inversion.py
"""
Dependency Inversion Principle (DIP).

High-level modules should not depend on low-level modules; both depend on
abstractions. ``Computer`` only knows the ``Keyboard`` interface and receives
a concrete keyboard through its constructor.
"""

import logging
from abc import ABC, abstractmethod

from .exceptions import InvalidDependencyError

logger = logging.getLogger(__name__)


class Keyboard(ABC):
    """Abstraction the computer depends on."""

    @abstractmethod
    def type(self) -> None:
        pass


class WiredKeyboard(Keyboard):
    def type(self) -> None:
        print("Typing on wired keyboard")


class WirelessKeyboard(Keyboard):
    def type(self) -> None:
        print("Typing on wireless keyboard")


class Computer:
    """High-level module with an injected keyboard."""

    def __init__(self, keyboard: Keyboard):
        if not isinstance(keyboard, Keyboard):
            raise InvalidDependencyError(
                f"Expected a Keyboard, got {type(keyboard).__name__}"
            )
        self.keyboard = keyboard
        logger.debug(f"Computer wired to {type(keyboard).__name__}")

    def type_on_keyboard(self) -> None:
        """Delegate typing to whichever keyboard was injected."""
        self.keyboard.type()
