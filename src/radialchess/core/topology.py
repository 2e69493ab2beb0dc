"""Board topology: tile addressing, wraparound and pixel conversion.

Ring layout (step = angular quantum, tiles = 16 // step)::

    ring 0      step 16   1 tile    index 1
    ring 1      step 4    4 tiles   index 2-5
    ring 2-3    step 2    8 tiles   index 6-21
    ring 4-6    step 1   16 tiles   index 22-69

All functions are pure. Off-board inputs yield ``None`` instead of raising.
"""

from __future__ import annotations

import math

from radialchess.core.types import RING_COUNT, TURN, Coordinate, Point

MAX_RING = RING_COUNT - 1
TILE_COUNT = 69

_HALF_TURN = TURN // 2
_UNIT_ANGLE = 2 * math.pi / TURN  # radians per angular unit


def normalize(x: int, y: int) -> Coordinate:
    """Canonical form of ``(x, y)``.

    A negative ring means the walk crossed the centre: the angle flips by
    half a turn and the ring index becomes positive. Ring 0 collapses every
    angle to 0.
    """
    if y < 0:
        x, y = x + _HALF_TURN, -y
    elif y == 0:
        x = 0
    return Coordinate(x % TURN, y)


def step_size(y: int) -> int:
    """Angular quantum of ring *y*."""
    if y <= 0:
        return 16
    if y <= 1:
        return 4
    if y <= 3:
        return 2
    if y <= MAX_RING:
        return 1
    raise ValueError(f"No ring {y} on the board")


def is_on_topology(coord: Coordinate) -> bool:
    """Whether *coord* names a real tile (ring in range, angle on the grid)."""
    if not 0 <= coord.y <= MAX_RING:
        return False
    return coord.x % step_size(coord.y) == 0


def to_index(coord: Coordinate) -> int | None:
    """Linear storage key in ``1..69``, or ``None`` for off-board input.

    *coord* must already be normalized; raw coordinates with a negative
    ring or an angle outside ``[0, 16)`` are rejected.
    """
    x, y = coord.x, coord.y
    if y < 0 or y > MAX_RING or not 0 <= x < TURN:
        return None
    if x % step_size(y):
        return None
    if y == 0:
        return 1
    if y <= 1:
        return x // 4 + y + 1
    if y <= 3:
        return 5 + x // 2 + 8 * (y - 2) + 1
    return 21 + x + 16 * (y - 4) + 1


def from_index(index: int) -> Coordinate | None:
    """Inverse of :func:`to_index`."""
    if index == 1:
        return Coordinate(0, 0)
    if 2 <= index <= 5:
        return Coordinate((index - 2) * 4, 1)
    if 6 <= index <= 21:
        offset = index - 6
        return Coordinate((offset % 8) * 2, 2 + offset // 8)
    if 22 <= index <= TILE_COUNT:
        offset = index - 22
        return Coordinate(offset % TURN, 4 + offset // TURN)
    return None


def all_coordinates() -> list[Coordinate]:
    """Every tile on the board, in index order."""
    return [
        Coordinate(x, y)
        for y in range(RING_COUNT)
        for x in range(0, TURN, step_size(y))
    ]


def is_intersection(coord: Coordinate) -> bool:
    """Whether the tile forks into two inward neighbours."""
    return (coord.y == 2 and coord.x % 4 != 0) or (
        coord.y == 4 and coord.x % 2 != 0
    )


# -- Pixel space -------------------------------------------------------------


def wrap_angle(angle: float) -> float:
    """Floored modulo of *angle* into ``[0, 2*pi)``."""
    return angle - 2 * math.pi * math.floor(angle / (2 * math.pi))


def pixel_to_coordinate(
    pixel: Point, center: Point, ring_radius: float
) -> Coordinate | None:
    """Tile under *pixel*, or ``None`` beyond the outer ring.

    The ring is the nearest one by radial distance. Within a ring, tiles
    are centred on their angle, so the polar angle is shifted by half an
    arc before bucketing.
    """
    y = math.floor(pixel.distance(center) / ring_radius + 0.5)
    if y == 0:
        return Coordinate(0, 0)
    if y > MAX_RING:
        return None

    step = step_size(y)
    arc = step * _UNIT_ANGLE / 2
    angle = wrap_angle(pixel.angle(center) + arc)
    x = step * math.floor(angle / (2 * arc))
    return Coordinate(x % TURN, y)


def coordinate_to_pixel(coord: Coordinate, center: Point, ring_radius: float) -> Point:
    """Centre of the tile *coord* in pixel space."""
    radius = coord.y * ring_radius
    angle = coord.x * _UNIT_ANGLE
    return Point(
        center.x + radius * math.cos(angle),
        center.y + radius * math.sin(angle),
    )
