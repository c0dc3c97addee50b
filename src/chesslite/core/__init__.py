"""Core domain layer — pure move-legality logic with zero external dependencies.

Quick start::

    from chesslite.core import BoardSnapshot, Coordinate

    board = BoardSnapshot.initial()
    pawn = board.piece_at(Coordinate(1, 4))
    pawn.is_move_valid(Coordinate(3, 4), board)  # True
"""

from chesslite.core.board import BoardSnapshot
from chesslite.core.enums import Color, PieceType
from chesslite.core.notation import (
    EMPTY_PLACEMENT,
    STARTING_PLACEMENT,
    snapshot_from_placement,
    snapshot_to_placement,
)
from chesslite.core.piece import Piece
from chesslite.core.rules import (
    color_of_square,
    is_move_valid,
    is_path_empty,
    legal_destinations,
)
from chesslite.core.types import (
    ALL_COORDS,
    Coordinate,
    coord_name,
    is_aligned,
    is_on_board,
    parse_coord,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "ALL_COORDS",
    "Coordinate",
    "coord_name",
    "is_aligned",
    "is_on_board",
    "parse_coord",
    # Domain objects
    "BoardSnapshot",
    "Piece",
    # Legality
    "color_of_square",
    "is_move_valid",
    "is_path_empty",
    "legal_destinations",
    # Notation
    "EMPTY_PLACEMENT",
    "STARTING_PLACEMENT",
    "snapshot_from_placement",
    "snapshot_to_placement",
]
