"""BoardMetrics — pixel geometry of the board for the current viewport."""

from __future__ import annotations

from dataclasses import dataclass

from radialchess.core.topology import (
    MAX_RING,
    coordinate_to_pixel,
    pixel_to_coordinate,
)
from radialchess.core.types import Coordinate, Point

# The board radius is split into 13 bands: the centre disk plus a
# boundary-to-boundary pair for each of the six outer rings.
_RADIUS_BANDS = 2 * MAX_RING + 1
_PIECE_RATIO = 0.65


@dataclass(frozen=True, slots=True)
class BoardMetrics:
    """Immutable render metrics, rebuilt on load and on every resize.

    Args:
        width: Viewport width in pixels.
        height: Viewport height in pixels.
    """

    width: float
    height: float

    @classmethod
    def from_viewport(cls, width: float, height: float) -> BoardMetrics:
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid viewport size: {width}x{height}")
        return cls(float(width), float(height))

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)

    @property
    def radius(self) -> float:
        return min(self.width, self.height) / 2

    @property
    def radius_step(self) -> float:
        return self.radius / _RADIUS_BANDS

    @property
    def ring_radius(self) -> float:
        """Distance between the centres of two adjacent rings."""
        return 2 * self.radius_step

    @property
    def piece_size(self) -> float:
        return _PIECE_RATIO * self.radius_step

    def ring_boundary(self, y: int) -> float:
        """Outer edge radius of ring *y*."""
        return (2 * y + 1) * self.radius_step

    def to_coordinate(self, px: float, py: float) -> Coordinate | None:
        return pixel_to_coordinate(Point(px, py), self.center, self.ring_radius)

    def to_pixel(self, coord: Coordinate) -> Point:
        return coordinate_to_pixel(coord, self.center, self.ring_radius)
