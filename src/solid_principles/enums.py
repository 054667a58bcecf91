# src/solid_principles/enums.py
"""
Enumeration types for the SOLID principles demo.
"""

from enum import Enum


class Principle(Enum):
    """The five SOLID principles, in their canonical order."""
    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"

    @property
    def number(self) -> int:
        """Position of the principle in the SOLID acronym (1-based)."""
        return list(Principle).index(self) + 1

    @property
    def title(self) -> str:
        return _TITLES[self]

    @classmethod
    def from_acronym(cls, acronym: str) -> "Principle":
        """Look up a principle by its acronym, ignoring case."""
        return cls(str(acronym).strip().lower())


_TITLES = {
    Principle.SRP: "Single Responsibility Principle",
    Principle.OCP: "Open/Closed Principle",
    Principle.LSP: "Liskov Substitution Principle",
    Principle.ISP: "Interface Segregation Principle",
    Principle.DIP: "Dependency Inversion Principle",
}
