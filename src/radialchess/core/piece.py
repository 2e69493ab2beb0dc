"""Piece record and per-kind move rays ("eyes")."""

from __future__ import annotations

from dataclasses import dataclass

from radialchess.core.enums import Color, PieceKind
from radialchess.core.topology import (
    MAX_RING,
    is_intersection,
    normalize,
    step_size,
)
from radialchess.core.types import TURN, Coordinate

# A direction is one line of travel, nearest candidate first.
Direction = list[Coordinate]

_CHARS: dict[PieceKind, str] = {
    PieceKind.PAWN: "p",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
}

# Ring 1 geometry is borrowed at the centre, where angles carry no meaning.
_POLE_STEP = 4
_SPOKES: tuple[int, ...] = (0, 4, 8, 12)


@dataclass(slots=True)
class Piece:
    """A game unit. Position and kind are mutated in place by the board."""

    color: Color
    kind: PieceKind
    position: Coordinate

    def __str__(self) -> str:
        """Upper case = white, lower case = black."""
        char = _CHARS[self.kind]
        return char.upper() if self.color == Color.WHITE else char

    def promote(self) -> None:
        """Toggle pawn/rook on reaching the centre."""
        self.kind = self.kind.promoted

    def eyes(self) -> list[Direction]:
        if self.kind == PieceKind.PAWN:
            return self._pawn_eyes()
        if self.kind == PieceKind.ROOK:
            return self._rook_eyes()
        return self._queen_eyes()

    # -- Rays ----------------------------------------------------------------

    def _pawn_eyes(self) -> list[Direction]:
        x, y = self.position.x, self.position.y
        eyes: list[Direction] = []

        if y == 0:
            eyes.append([normalize(x - _POLE_STEP, 1)])
            eyes.append([normalize(x + _POLE_STEP, 1)])
            m = _POLE_STEP
        else:
            m = step_size(y)
            eyes.append([normalize(x - m, y)])
            eyes.append([normalize(x + m, y)])

        if y < MAX_RING:
            eyes.append([normalize(x, y + 1)])

        if is_intersection(self.position):
            eyes.append([normalize(x - m, y - 1)])
            eyes.append([normalize(x + m, y - 1)])
        else:
            eyes.append([normalize(x, y - 1)])

        return eyes

    def _rook_eyes(self) -> list[Direction]:
        x, y = self.position.x, self.position.y

        if y == 0:
            return [
                [normalize(spoke, ring) for ring in range(1, MAX_RING + 1)]
                for spoke in _SPOKES
            ]

        m = step_size(y)
        reach = TURN // m - 1
        clockwise = [normalize(x + k * m, y) for k in range(1, reach + 1)]
        counter = [normalize(x - k * m, y) for k in range(1, reach + 1)]
        inward = [normalize(x, ring) for ring in range(y - 1, -1, -1)]
        outward = [normalize(x, ring) for ring in range(y + 1, MAX_RING + 1)]
        return [clockwise, counter, inward, outward]

    def _queen_eyes(self) -> list[Direction]:
        x, y = self.position.x, self.position.y
        if y == 0:
            return []

        m = step_size(y)
        return [
            [normalize(x + m, y), normalize(x + 2 * m, y)],
            [normalize(x - m, y), normalize(x - 2 * m, y)],
            [normalize(x, y - k) for k in (1, 2) if y - k >= 0],
        ]
