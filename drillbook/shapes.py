"""A rectangle that combines a shape with a paint-cost calculator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Shape:
    """A shape with a width and a height."""

    width: int = 0
    height: int = 0


class PaintCost:
    """Works out the cost of paint for an area."""

    COST_PER_UNIT = 70

    def paint_cost(self, area: int) -> int:
        """Cost of painting ``area`` units."""
        return area * self.COST_PER_UNIT


@dataclass
class Rectangle(Shape, PaintCost):
    """A rectangular shape whose paint cost can be computed."""

    def area(self) -> int:
        """Width times height."""
        return self.width * self.height