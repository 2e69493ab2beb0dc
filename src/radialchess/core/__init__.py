"""Core domain layer — pure radial-board logic with zero external dependencies.

Quick start::

    from radialchess.core import Board, Coordinate

    board = Board.initial()
    queen = board.get(Coordinate(4, 5))
    for target in board.list_valid_moves(queen):
        print(target)
"""

from radialchess.core.board import CENTER, Board
from radialchess.core.enums import Color, PieceKind, SelectionState, TapResult
from radialchess.core.piece import Direction, Piece
from radialchess.core.topology import (
    MAX_RING,
    TILE_COUNT,
    all_coordinates,
    coordinate_to_pixel,
    from_index,
    is_intersection,
    is_on_topology,
    normalize,
    pixel_to_coordinate,
    step_size,
    to_index,
    wrap_angle,
)
from radialchess.core.types import RING_COUNT, TURN, Coordinate, Point

__all__ = [
    # Enums
    "Color",
    "PieceKind",
    "SelectionState",
    "TapResult",
    # Types / constants
    "CENTER",
    "Coordinate",
    "Direction",
    "MAX_RING",
    "Point",
    "RING_COUNT",
    "TILE_COUNT",
    "TURN",
    # Topology
    "all_coordinates",
    "coordinate_to_pixel",
    "from_index",
    "is_intersection",
    "is_on_topology",
    "normalize",
    "pixel_to_coordinate",
    "step_size",
    "to_index",
    "wrap_angle",
    # Domain objects
    "Board",
    "Piece",
]
