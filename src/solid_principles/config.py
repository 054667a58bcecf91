# src/solid_principles/config.py
"""
Configuration and data structures for the SOLID principles demo.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from .enums import Principle


@dataclass(frozen=True)
class PrincipleInfo:
    """Reference card for one principle."""
    principle: Principle
    definition: str
    examples: Tuple[str, ...] = ()

    @property
    def acronym(self) -> str:
        return self.principle.name

    @property
    def title(self) -> str:
        return self.principle.title


PRINCIPLES: Dict[Principle, PrincipleInfo] = {
    Principle.SRP: PrincipleInfo(
        Principle.SRP,
        "A class should have only one reason to change, meaning it should have only one job.",
        ("Invoice", "InvoicePrinter"),
    ),
    Principle.OCP: PrincipleInfo(
        Principle.OCP,
        "Software entities should be open for extension but closed for modification.",
        ("Shape", "Rectangle", "Circle", "AreaCalculator"),
    ),
    Principle.LSP: PrincipleInfo(
        Principle.LSP,
        "Subtypes must be substitutable for their base types without altering "
        "the correctness of the program.",
        ("Bird", "Sparrow", "Ostrich", "Flyable", "FlyingSparrow", "NonFlyingOstrich"),
    ),
    Principle.ISP: PrincipleInfo(
        Principle.ISP,
        "Clients should not be forced to depend on interfaces they do not use.",
        ("Workable", "Feedable", "HumanWorker", "RobotWorker"),
    ),
    Principle.DIP: PrincipleInfo(
        Principle.DIP,
        "High-level modules should not depend on low-level modules. Both should "
        "depend on abstractions.",
        ("Keyboard", "WiredKeyboard", "WirelessKeyboard", "Computer"),
    ),
}


@dataclass
class DemoConfig:
    """Demo run configuration."""
    principles: Tuple[Principle, ...] = field(default_factory=lambda: tuple(Principle))
    show_violation: bool = False  # Call Ostrich.fly() and report the failure
    verbose: bool = False  # Enable detailed logging for debugging

    def __post_init__(self):
        # Accept acronyms as well as enum members, always run in canonical order
        chosen = {p if isinstance(p, Principle) else Principle.from_acronym(p)
                  for p in self.principles}
        self.principles = tuple(p for p in Principle if p in chosen)
