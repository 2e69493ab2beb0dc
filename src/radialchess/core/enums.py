"""Core enumerations for the radial board domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds. Promotion toggles PAWN and ROOK; QUEEN never changes."""

    PAWN = 1
    ROOK = 2
    QUEEN = 3

    @property
    def promoted(self) -> PieceKind:
        if self == PieceKind.PAWN:
            return PieceKind.ROOK
        if self == PieceKind.ROOK:
            return PieceKind.PAWN
        return self


class SelectionState(IntEnum):
    """Finite-state-machine states of the tap handler."""

    IDLE = 0
    SELECTED = 1


class TapResult(IntEnum):
    """Transition taken by a single tap on the board."""

    IGNORED = 0  # off-board, or empty tile while idle
    SELECTED = auto()
    DESELECTED = auto()
    MOVED = auto()
    RESET = auto()  # the move ended the match
