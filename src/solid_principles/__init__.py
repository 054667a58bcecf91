# src/solid_principles/__init__.py
"""
SOLID Principles: the five object-oriented design principles by example
Single Responsibility, Open/Closed, Liskov Substitution, Interface Segregation
and Dependency Inversion, each shown with a handful of minimal classes.
"""

__version__ = "0.1.0"

from .enums import Principle
from .config import DemoConfig, PrincipleInfo, PRINCIPLES
from .exceptions import SolidPrinciplesError, FlightNotSupportedError, InvalidDependencyError
from .single_responsibility import Invoice, InvoicePrinter
from .open_closed import Shape, Rectangle, Circle, AreaCalculator
from .liskov_substitution import (
    BirdBase,
    Bird,
    Sparrow,
    Ostrich,
    Flyable,
    FlyingSparrow,
    NonFlyingOstrich,
    can_fly,
)
from .interface_segregation import Workable, Feedable, HumanWorker, RobotWorker
from .dependency_inversion import Keyboard, WiredKeyboard, WirelessKeyboard, Computer
from .demo import DEMONSTRATIONS, run_demo

__all__ = [
    "Principle",
    "DemoConfig",
    "PrincipleInfo",
    "PRINCIPLES",
    "SolidPrinciplesError",
    "FlightNotSupportedError",
    "InvalidDependencyError",
    "Invoice",
    "InvoicePrinter",
    "Shape",
    "Rectangle",
    "Circle",
    "AreaCalculator",
    "BirdBase",
    "Bird",
    "Sparrow",
    "Ostrich",
    "Flyable",
    "FlyingSparrow",
    "NonFlyingOstrich",
    "can_fly",
    "Workable",
    "Feedable",
    "HumanWorker",
    "RobotWorker",
    "Keyboard",
    "WiredKeyboard",
    "WirelessKeyboard",
    "Computer",
    "DEMONSTRATIONS",
    "run_demo",
]
