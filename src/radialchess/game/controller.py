"""GameController — the tap/resize entry point around a single Board.

Coordinates: Board, BoardMetrics, match score.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from radialchess.core.board import Board
from radialchess.core.enums import Color, TapResult
from radialchess.core.piece import Piece
from radialchess.core.types import Coordinate
from radialchess.game.metrics import BoardMetrics

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[Piece | None], None]
MoveCallback = Callable[[Piece, Coordinate], None]  # piece, destination
ResetCallback = Callable[[Color | None], None]  # winner, None on a manual reset


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Routes input events into the board and notifies listeners.

    Thread-safety: all handlers must run on one thread (the Qt main
    thread). The board is mutated only inside :meth:`tap` and
    :meth:`new_match`; renderers only read it.
    """

    __slots__ = ("_board", "_metrics", "_score", "events")

    def __init__(
        self,
        board: Board | None = None,
        metrics: BoardMetrics | None = None,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._metrics = metrics
        self._score: dict[Color, int] = {Color.BLACK: 0, Color.WHITE: 0}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def metrics(self) -> BoardMetrics | None:
        return self._metrics

    def score(self, color: Color) -> int:
        """Matches won by *color* since the controller was created."""
        return self._score[color]

    def legal_targets(self) -> set[Coordinate]:
        """Legal destinations of the current selection, for highlighting."""
        selected = self._board.current_selection()
        if selected is None:
            return set()
        return self._board.list_valid_moves(selected)

    # ── Event handlers ───────────────────────────────────────────────────

    def resize(self, width: float, height: float) -> BoardMetrics:
        self._metrics = BoardMetrics.from_viewport(width, height)
        return self._metrics

    def tap(self, px: float, py: float) -> TapResult:
        """Handle a pointer press at pixel ``(px, py)``."""
        if self._metrics is None:
            return TapResult.IGNORED
        coord = self._metrics.to_coordinate(px, py)
        if coord is None:
            return TapResult.IGNORED
        return self.tap_tile(coord)

    def tap_tile(self, coord: Coordinate) -> TapResult:
        """Handle a tap already resolved to a tile."""
        before = self._board.current_selection()
        result = self._board.select(coord)
        _LOGGER.debug("Tap on %s -> %s", coord, result.name)

        if result == TapResult.MOVED and before is not None:
            self._emit_move(before, coord)
        elif result == TapResult.RESET:
            self._record_win(coord)

        after = self._board.current_selection()
        if after is not before:
            self._emit_selection(after)
        return result

    def new_match(self) -> None:
        """Abandon the running match and restore the starting layout."""
        self._board.reset()
        _LOGGER.info("Match reset by player")
        self._emit_reset(None)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _record_win(self, coord: Coordinate) -> None:
        winner = self._board.last_winner
        assert winner is not None
        self._score[winner] += 1
        _LOGGER.info("%s wins the match (move to %s)", winner, coord)
        self._emit_reset(winner)

    def _emit_move(self, piece: Piece, destination: Coordinate) -> None:
        for cb in self.events.on_move:
            cb(piece, destination)

    def _emit_selection(self, piece: Piece | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(piece)

    def _emit_reset(self, winner: Color | None) -> None:
        for cb in self.events.on_reset:
            cb(winner)
