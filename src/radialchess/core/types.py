"""Coordinate value type and pixel-space helpers.

Addressing scheme::

    y = ring index, 0 (centre, a single tile) .. 6 (outermost ring)
    x = angular position in sixteenths of a turn, 0 <= x < 16

Only multiples of the ring's step size are real tiles (see ``topology``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

RING_COUNT = 7
TURN = 16  # angular units per full turn


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable ``(x, y)`` address on the polar board."""

    x: int
    y: int

    def shifted(self, dx: int = 0, dy: int = 0) -> Coordinate:
        """Raw neighbour, *not* normalized (may be off-board mid-computation)."""
        return Coordinate(self.x + dx, self.y + dy)

    def normalized(self) -> Coordinate:
        from radialchess.core.topology import normalize

        return normalize(self.x, self.y)

    def __str__(self) -> str:
        return f"{self.x}@{self.y}"

    @classmethod
    def parse(cls, text: str) -> Coordinate:
        """Parse ``"x@y"``, e.g. ``"4@5"`` -> ``Coordinate(4, 5)``."""
        x_part, sep, y_part = text.strip().partition("@")
        if not sep:
            raise ValueError(f"Invalid coordinate: {text!r}")
        try:
            return cls(int(x_part), int(y_part))
        except ValueError:
            raise ValueError(f"Invalid coordinate: {text!r}") from None


@dataclass(frozen=True, slots=True)
class Point:
    """Cartesian point in pixel space."""

    x: float
    y: float

    def __truediv__(self, other: float) -> Point:
        return Point(self.x / other, self.y / other)

    def distance(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def angle(self, other: Point) -> float:
        """Polar angle of *self* around *other*, in ``(-pi, pi]``."""
        return math.atan2(self.y - other.y, self.x - other.x)
