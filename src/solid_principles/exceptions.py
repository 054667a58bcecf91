# src/solid_principles/exceptions.py
"""
Custom exceptions for the SOLID principles demo.
"""


class SolidPrinciplesError(Exception):
    """Base class for errors raised by the example classes."""

    pass


class FlightNotSupportedError(SolidPrinciplesError, NotImplementedError):
    """
    Raised when a bird that cannot fly is asked to fly.
    This is the Liskov Substitution violation the examples warn about.
    """

    pass


class InvalidDependencyError(SolidPrinciplesError, TypeError):
    """Raised when a collaborator does not implement the expected abstraction."""

    pass
