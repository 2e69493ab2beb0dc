"""Board - sparse piece set on the radial board plus the tap state machine."""

from __future__ import annotations

from radialchess.core.enums import Color, PieceKind, SelectionState, TapResult
from radialchess.core.piece import Piece
from radialchess.core.topology import (
    MAX_RING,
    is_on_topology,
    step_size,
    to_index,
)
from radialchess.core.types import TURN, Coordinate

CENTER = Coordinate(0, 0)

# Angular offset of each side's home sector.
_HOME_OFFSETS: tuple[tuple[Color, int], ...] = ((Color.BLACK, 0), (Color.WHITE, 8))


class Board:
    """Mutable piece set keyed by linear tile index.

    The selection is kept as ``(tile, piece)`` and re-resolved on every
    read, so a selection whose piece has moved or been captured reads as
    idle instead of dangling.
    """

    __slots__ = ("_pieces", "_selected_at", "_selected_piece", "_last_winner")

    def __init__(self) -> None:
        self._pieces: dict[int, Piece] = {}
        self._selected_at: Coordinate | None = None
        self._selected_piece: Piece | None = None
        self._last_winner: Color | None = None

    # -- Element access -------------------------------------------------------

    def get(self, coord: Coordinate) -> Piece | None:
        """Piece on *coord*, or ``None`` for an empty or off-board tile."""
        index = to_index(coord)
        if index is None:
            return None
        return self._pieces.get(index)

    def place(self, piece: Piece) -> None:
        """Put *piece* on the tile named by its own position."""
        index = to_index(piece.position)
        if index is None:
            raise ValueError(f"Position {piece.position} is not a tile")
        occupant = self._pieces.get(index)
        if occupant is not None and occupant is not piece:
            raise ValueError(f"Tile {piece.position} already holds {occupant}")
        self._pieces[index] = piece

    def remove(self, coord: Coordinate) -> Piece | None:
        """Take the piece off *coord* and return it."""
        index = to_index(coord)
        if index is None:
            return None
        return self._pieces.pop(index, None)

    def is_empty(self, coord: Coordinate) -> bool:
        return self.get(coord) is None

    # -- Query helpers --------------------------------------------------------

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """Pieces in tile-index order, optionally filtered by *color*."""
        return [
            self._pieces[index]
            for index in sorted(self._pieces)
            if color is None or self._pieces[index].color == color
        ]

    def __len__(self) -> int:
        return len(self._pieces)

    # -- Selection ------------------------------------------------------------

    def current_selection(self) -> Piece | None:
        if self._selected_at is None:
            return None
        piece = self.get(self._selected_at)
        if piece is None or piece is not self._selected_piece:
            return None
        return piece

    @property
    def last_winner(self) -> Color | None:
        """Winner of the match that ended on the last move, if any."""
        return self._last_winner

    @property
    def state(self) -> SelectionState:
        if self.current_selection() is None:
            return SelectionState.IDLE
        return SelectionState.SELECTED

    def _select_piece(self, piece: Piece) -> None:
        self._selected_at = piece.position
        self._selected_piece = piece

    def clear_selection(self) -> None:
        self._selected_at = None
        self._selected_piece = None

    def select(self, coord: Coordinate) -> TapResult:
        """Feed one tap on *coord* through the selection state machine."""
        selected = self.current_selection()
        occupant = self.get(coord)

        if selected is None:
            self.clear_selection()
            if occupant is None:
                return TapResult.IGNORED
            self._select_piece(occupant)
            return TapResult.SELECTED

        if occupant is not None and occupant.color == selected.color:
            if occupant is selected:
                self.clear_selection()
                return TapResult.DESELECTED
            self._select_piece(occupant)
            return TapResult.SELECTED

        if coord in self.list_valid_moves(selected):
            winner = self.move(selected, coord)
            return TapResult.MOVED if winner is None else TapResult.RESET

        self.clear_selection()
        return TapResult.DESELECTED

    # -- Move generation ------------------------------------------------------

    def list_valid_moves(self, piece: Piece) -> set[Coordinate]:
        """Destinations reachable by *piece*.

        Each direction is walked nearest-first. A walk stops on an
        off-grid candidate or on the first occupied tile, which is itself
        a legal capture when held by the other side.
        """
        moves: set[Coordinate] = set()
        for direction in piece.eyes():
            for candidate in direction:
                if not is_on_topology(candidate):
                    break
                occupant = self.get(candidate)
                if occupant is not None:
                    if occupant.color != piece.color:
                        moves.add(candidate)
                    break
                moves.add(candidate)
        return moves

    # -- Mutation -------------------------------------------------------------

    def move(self, piece: Piece, destination: Coordinate) -> Color | None:
        """Play *piece* to *destination* without a legality check.

        Returns the winning color when the move ends the match (a queen is
        captured, or a queen already holds the centre); the board is then
        back in its starting layout. Returns ``None`` otherwise.
        """
        if self.get(piece.position) is not piece:
            raise ValueError(f"{piece} at {piece.position} is not on this board")
        if to_index(destination) is None:
            raise ValueError(f"Position {destination} is not a tile")

        target = self.get(destination)
        if target is not None and target.kind == PieceKind.QUEEN:
            self.reset()
            self._last_winner = piece.color
            return piece.color

        center = self.get(CENTER)
        if center is not None and center.kind == PieceKind.QUEEN:
            self.reset()
            self._last_winner = center.color
            return center.color

        self.remove(destination)
        self.remove(piece.position)
        piece.position = destination
        self.place(piece)
        if destination.y == 0:
            piece.promote()

        self.clear_selection()
        self._last_winner = None
        return None

    def reset(self) -> None:
        """Restore the starting layout and drop the selection."""
        self._pieces = {}
        self.clear_selection()
        self._last_winner = None

        for color, dx in _HOME_OFFSETS:
            self.place(Piece(color, PieceKind.ROOK, Coordinate(4 + dx, 6)))
            self.place(Piece(color, PieceKind.QUEEN, Coordinate(4 + dx, 5)))
            self.place(Piece(color, PieceKind.ROOK, Coordinate(4 + dx, 4)))
            self.place(Piece(color, PieceKind.PAWN, Coordinate(4 + dx, 3)))

            for x in (3 + dx, 5 + dx):
                for y in range(4, MAX_RING + 1):
                    self.place(Piece(color, PieceKind.PAWN, Coordinate(x, y)))

    # -- Copying / factory ----------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting layout."""
        b = cls()
        b.reset()
        return b

    def copy(self) -> Board:
        b = Board()
        b._last_winner = self._last_winner
        for piece in self._pieces.values():
            b.place(Piece(piece.color, piece.kind, piece.position))
        selected = self.current_selection()
        if selected is not None:
            twin = b.get(selected.position)
            assert twin is not None
            b._select_piece(twin)
        return b

    def layout(self) -> dict[int, tuple[Color, PieceKind]]:
        """Index -> (color, kind) snapshot, for comparisons and tests."""
        return {
            index: (piece.color, piece.kind) for index, piece in self._pieces.items()
        }

    # -- Dunder helpers -------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.layout() == other.layout()

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(MAX_RING, -1, -1):
            step = step_size(y)
            cells = []
            for x in range(0, TURN, step):
                piece = self.get(Coordinate(x, y))
                cells.append(str(piece) if piece else ".")
            rows.append(f"{y} {' '.join(cells)}")
        return "\n".join(rows)
