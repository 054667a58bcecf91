# src/solid_principles/open_closed.py
"""
Open/Closed Principle (OCP).

Software entities should be open for extension but closed for modification.
New shapes subclass ``Shape``; ``AreaCalculator`` never changes to support them.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Iterable

logger = logging.getLogger(__name__)


def _check_dimension(name: str, value: float) -> float:
    value = float(value)
    if math.isnan(value):
        raise ValueError(f"{name} must be a number")
    if value < 0:
        raise ValueError(f"{name} cannot be negative")
    return value


class Shape(ABC):
    """Anything with an area."""

    @abstractmethod
    def area(self) -> float:
        """Return the area of the shape."""
        pass


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = _check_dimension("width", width)
        self.height = _check_dimension("height", height)

    def area(self) -> float:
        return self.width * self.height

    def __repr__(self):
        return f"Rectangle(width={self.width!r}, height={self.height!r})"


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = _check_dimension("radius", radius)

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def __repr__(self):
        return f"Circle(radius={self.radius!r})"


class AreaCalculator:
    """Sums areas without knowing which shapes exist."""

    def total_area(self, shapes: Iterable[Shape]) -> float:
        """Return the combined area of all shapes."""
        total = 0.0
        for shape in shapes:
            area = shape.area()
            logger.debug(f"{shape!r} area: {area}")
            total += area
        return total
