"""Tests for Board: layout, legality walk, tap state machine, match reset."""

import pytest

from radialchess.core.board import CENTER, Board
from radialchess.core.enums import Color, PieceKind, SelectionState, TapResult
from radialchess.core.piece import Piece
from radialchess.core.topology import is_on_topology
from radialchess.core.types import Coordinate as C

BLACK_QUEEN = C(4, 5)
WHITE_QUEEN = C(12, 5)


def _put(board: Board, color: Color, kind: PieceKind, x: int, y: int) -> Piece:
    piece = Piece(color, kind, C(x, y))
    board.place(piece)
    return piece


class TestBoardInitial:
    def test_piece_count(self) -> None:
        board = Board.initial()
        assert len(board) == 20
        assert len(board.pieces(Color.BLACK)) == 10
        assert len(board.pieces(Color.WHITE)) == 10

    def test_composition_per_side(self) -> None:
        board = Board.initial()
        for color in Color:
            kinds = [p.kind for p in board.pieces(color)]
            assert kinds.count(PieceKind.PAWN) == 7
            assert kinds.count(PieceKind.ROOK) == 2
            assert kinds.count(PieceKind.QUEEN) == 1

    def test_queens(self) -> None:
        board = Board.initial()
        black = board.get(BLACK_QUEEN)
        white = board.get(WHITE_QUEEN)
        assert black is not None and black.kind == PieceKind.QUEEN
        assert black.color == Color.BLACK
        assert white is not None and white.kind == PieceKind.QUEEN
        assert white.color == Color.WHITE

    def test_sides_are_symmetric(self) -> None:
        board = Board.initial()
        for piece in board.pieces(Color.BLACK):
            mirror = board.get(C((piece.position.x + 8) % 16, piece.position.y))
            assert mirror is not None
            assert mirror.color == Color.WHITE
            assert mirror.kind == piece.kind

    def test_centre_empty_and_idle(self) -> None:
        board = Board.initial()
        assert board.is_empty(CENTER)
        assert board.state == SelectionState.IDLE
        assert board.current_selection() is None


class TestBoardOperations:
    def test_place_and_get(self, empty_board: Board) -> None:
        piece = _put(empty_board, Color.WHITE, PieceKind.PAWN, 6, 3)
        assert empty_board.get(C(6, 3)) is piece

    def test_get_off_board_is_none(self) -> None:
        board = Board.initial()
        assert board.get(C(0, 7)) is None
        assert board.get(C(0, -1)) is None
        assert board.get(C(1, 1)) is None

    def test_place_on_occupied_tile_raises(self, empty_board: Board) -> None:
        _put(empty_board, Color.WHITE, PieceKind.PAWN, 6, 3)
        with pytest.raises(ValueError, match="already holds"):
            _put(empty_board, Color.BLACK, PieceKind.ROOK, 6, 3)

    def test_place_off_grid_raises(self, empty_board: Board) -> None:
        with pytest.raises(ValueError, match="is not a tile"):
            _put(empty_board, Color.WHITE, PieceKind.PAWN, 1, 2)

    def test_remove(self, empty_board: Board) -> None:
        piece = _put(empty_board, Color.WHITE, PieceKind.PAWN, 6, 3)
        assert empty_board.remove(C(6, 3)) is piece
        assert empty_board.remove(C(6, 3)) is None
        assert len(empty_board) == 0

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy.remove(BLACK_QUEEN)
        assert board != copy
        assert board.get(BLACK_QUEEN) is not None

    def test_copy_keeps_last_winner(self) -> None:
        board = Board.initial()
        rook = board.get(C(12, 4))
        assert rook is not None
        board.move(rook, BLACK_QUEEN)

        copy = board.copy()
        assert copy.last_winner == Color.WHITE
        assert copy == board

    def test_repr_lists_rings(self) -> None:
        text = repr(Board.initial())
        assert "Q" in text and "q" in text
        assert text.splitlines()[-1] == "0 ."


class TestValidMoves:
    def test_enemy_blocks_and_is_capturable(self, empty_board: Board) -> None:
        rook = _put(empty_board, Color.BLACK, PieceKind.ROOK, 0, 5)
        _put(empty_board, Color.BLACK, PieceKind.PAWN, 15, 5)
        _put(empty_board, Color.WHITE, PieceKind.PAWN, 3, 5)

        moves = empty_board.list_valid_moves(rook)
        assert {c for c in moves if c.y == 5} == {C(1, 5), C(2, 5), C(3, 5)}
        assert C(4, 5) not in moves

    def test_ally_blocks_without_capture(self, empty_board: Board) -> None:
        rook = _put(empty_board, Color.BLACK, PieceKind.ROOK, 0, 5)
        _put(empty_board, Color.BLACK, PieceKind.PAWN, 15, 5)
        _put(empty_board, Color.BLACK, PieceKind.PAWN, 3, 5)

        moves = empty_board.list_valid_moves(rook)
        assert {c for c in moves if c.y == 5} == {C(1, 5), C(2, 5)}

    def test_radial_rays_reach_centre_and_rim(self, empty_board: Board) -> None:
        rook = _put(empty_board, Color.BLACK, PieceKind.ROOK, 0, 5)
        moves = empty_board.list_valid_moves(rook)
        assert {c for c in moves if c.x == 0 and c.y != 5} == {
            C(0, 0),
            C(0, 1),
            C(0, 2),
            C(0, 3),
            C(0, 4),
            C(0, 6),
        }

    def test_off_grid_candidate_stops_ray(self, empty_board: Board) -> None:
        rook = _put(empty_board, Color.BLACK, PieceKind.ROOK, 1, 4)
        moves = empty_board.list_valid_moves(rook)
        assert all(c.y >= 4 for c in moves)
        assert C(1, 5) in moves and C(1, 6) in moves

    def test_pawn_on_intersection(self, empty_board: Board) -> None:
        pawn = _put(empty_board, Color.WHITE, PieceKind.PAWN, 2, 2)
        assert empty_board.list_valid_moves(pawn) == {
            C(0, 2),
            C(4, 2),
            C(2, 3),
            C(0, 1),
            C(4, 1),
        }

    def test_all_moves_are_tiles(self) -> None:
        board = Board.initial()
        for piece in board.pieces():
            assert all(is_on_topology(c) for c in board.list_valid_moves(piece))

    def test_starting_queen_is_boxed_in(self) -> None:
        board = Board.initial()
        queen = board.get(BLACK_QUEEN)
        assert queen is not None
        eyes = queen.eyes()
        assert len(eyes) == 3
        assert all(len(direction) == 2 for direction in eyes)
        assert board.list_valid_moves(queen) == set()

    def test_starting_queen_with_clear_paths(self) -> None:
        board = Board.initial()
        for coord in (C(3, 5), C(5, 5), C(4, 4), C(4, 3)):
            board.remove(coord)
        queen = board.get(BLACK_QUEEN)
        assert queen is not None
        assert board.list_valid_moves(queen) == {
            C(5, 5),
            C(6, 5),
            C(3, 5),
            C(2, 5),
            C(4, 4),
            C(4, 3),
        }


class TestSelection:
    def test_tap_empty_while_idle(self) -> None:
        board = Board.initial()
        assert board.select(CENTER) == TapResult.IGNORED
        assert board.state == SelectionState.IDLE

    def test_select_and_deselect_same_piece(self) -> None:
        board = Board.initial()
        assert board.select(BLACK_QUEEN) == TapResult.SELECTED
        assert board.current_selection() is board.get(BLACK_QUEEN)
        assert board.select(BLACK_QUEEN) == TapResult.DESELECTED
        assert board.state == SelectionState.IDLE

    def test_tap_ally_switches_selection(self) -> None:
        board = Board.initial()
        board.select(BLACK_QUEEN)
        assert board.select(C(3, 5)) == TapResult.SELECTED
        assert board.current_selection() is board.get(C(3, 5))

    def test_any_side_may_be_selected(self) -> None:
        board = Board.initial()
        assert board.select(WHITE_QUEEN) == TapResult.SELECTED

    def test_tap_unreachable_tile_deselects(self) -> None:
        board = Board.initial()
        board.select(C(4, 3))
        assert board.select(C(0, 1)) == TapResult.DESELECTED
        assert board.state == SelectionState.IDLE

    def test_tap_unreachable_enemy_deselects(self) -> None:
        board = Board.initial()
        board.select(C(4, 3))
        assert board.select(WHITE_QUEEN) == TapResult.DESELECTED
        assert board.current_selection() is None

    def test_tap_off_board_deselects(self) -> None:
        board = Board.initial()
        board.select(C(4, 3))
        assert board.select(C(0, 9)) == TapResult.DESELECTED

    def test_tap_legal_move(self) -> None:
        board = Board.initial()
        pawn = board.get(C(4, 3))
        assert pawn is not None
        board.select(C(4, 3))
        assert board.list_valid_moves(pawn) == {C(2, 3), C(6, 3), C(4, 2)}

        assert board.select(C(4, 2)) == TapResult.MOVED
        assert board.get(C(4, 2)) is pawn
        assert board.is_empty(C(4, 3))
        assert pawn.position == C(4, 2)
        assert board.state == SelectionState.IDLE

    def test_selection_does_not_dangle(self) -> None:
        board = Board.initial()
        board.select(C(4, 3))
        board.remove(C(4, 3))
        assert board.current_selection() is None

        _put(board, Color.WHITE, PieceKind.PAWN, 4, 3)
        assert board.current_selection() is None
        assert board.state == SelectionState.IDLE


class TestMoveExecution:
    def test_capture_removes_target(self, empty_board: Board) -> None:
        rook = _put(empty_board, Color.BLACK, PieceKind.ROOK, 0, 4)
        _put(empty_board, Color.WHITE, PieceKind.PAWN, 0, 2)
        assert C(0, 2) in empty_board.list_valid_moves(rook)

        assert empty_board.move(rook, C(0, 2)) is None
        assert len(empty_board) == 1
        assert empty_board.get(C(0, 2)) is rook

    def test_promotion_round_trip(self, empty_board: Board) -> None:
        piece = _put(empty_board, Color.BLACK, PieceKind.ROOK, 0, 1)

        empty_board.move(piece, CENTER)
        assert piece.kind == PieceKind.PAWN

        empty_board.move(piece, C(4, 1))
        assert piece.kind == PieceKind.PAWN

        empty_board.move(piece, CENTER)
        assert piece.kind == PieceKind.ROOK

    def test_queen_not_promoted(self, empty_board: Board) -> None:
        queen = _put(empty_board, Color.WHITE, PieceKind.QUEEN, 8, 1)
        assert empty_board.move(queen, CENTER) is None
        assert queen.kind == PieceKind.QUEEN
        assert empty_board.get(CENTER) is queen

    def test_capturing_queen_resets(self) -> None:
        board = Board.initial()
        rook = board.get(C(12, 4))
        assert rook is not None

        assert board.move(rook, BLACK_QUEEN) == Color.WHITE
        assert board == Board.initial()
        assert board.last_winner == Color.WHITE

    def test_queen_on_centre_resets_on_next_move(self) -> None:
        board = Board.initial()
        queen = board.get(BLACK_QUEEN)
        assert queen is not None
        assert board.move(queen, CENTER) is None
        assert board.last_winner is None

        pawn = board.get(C(12, 3))
        assert pawn is not None
        assert board.move(pawn, C(12, 2)) == Color.BLACK
        assert board == Board.initial()

    def test_queen_capture_through_taps(self, empty_board: Board) -> None:
        _put(empty_board, Color.WHITE, PieceKind.ROOK, 0, 4)
        _put(empty_board, Color.BLACK, PieceKind.QUEEN, 0, 6)

        assert empty_board.select(C(0, 4)) == TapResult.SELECTED
        assert empty_board.select(C(0, 6)) == TapResult.RESET
        assert empty_board == Board.initial()
        assert empty_board.state == SelectionState.IDLE

    def test_move_foreign_piece_raises(self, empty_board: Board) -> None:
        stray = Piece(Color.WHITE, PieceKind.PAWN, C(2, 3))
        with pytest.raises(ValueError, match="not on this board"):
            empty_board.move(stray, C(4, 3))

    def test_move_off_board_raises(self, empty_board: Board) -> None:
        pawn = _put(empty_board, Color.WHITE, PieceKind.PAWN, 2, 3)
        with pytest.raises(ValueError, match="is not a tile"):
            empty_board.move(pawn, C(2, 7))
