"""Move legality: occupancy lookup, path obstruction, per-piece geometry.

Every function here is pure and total. ``pieces`` is always the full
board snapshot (any collection of :class:`~chesslite.core.piece.Piece`);
it is only read, never stored.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable
from typing import TYPE_CHECKING

from chesslite.core.enums import Color, PieceType
from chesslite.core.types import ALL_COORDS, Coordinate, deltas, is_on_board

if TYPE_CHECKING:
    from chesslite.core.piece import Piece

    MovePredicate = Callable[[Piece, tuple[int, int], Collection[Piece]], bool]

PAWN_START_FILE: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}


# -- Occupancy ---------------------------------------------------------------


def color_of_square(pos: tuple[int, int], pieces: Iterable[Piece]) -> Color | None:
    """Color of the piece on *pos*, or None if the square is empty."""
    for piece in pieces:
        if piece.coord == pos:
            return piece.color
    return None


# -- Path obstruction --------------------------------------------------------


def is_path_empty(
    begin: tuple[int, int], end: tuple[int, int], pieces: Collection[Piece]
) -> bool:
    """Whether every square strictly between *begin* and *end* is empty.

    Only meaningful for endpoints sharing a file, a rank or a diagonal.
    Any other pair has no checked squares and reports a clear path; see
    :func:`~chesslite.core.types.is_aligned` to test the shape first.
    """
    b_file, b_rank = begin
    e_file, e_rank = end

    # Same file
    if b_file == e_file:
        low, high = sorted((b_rank, e_rank))
        for piece in pieces:
            if piece.file == b_file and low < piece.rank < high:
                return False

    # Same rank
    if b_rank == e_rank:
        low, high = sorted((b_file, e_file))
        for piece in pieces:
            if piece.rank == b_rank and low < piece.file < high:
                return False

    # Diagonals
    d_file, d_rank = deltas(begin, end)
    if abs(d_file) == abs(d_rank):
        step_file = 1 if d_file > 0 else -1
        step_rank = 1 if d_rank > 0 else -1
        for i in range(1, abs(d_file)):
            pos = (b_file + i * step_file, b_rank + i * step_rank)
            if color_of_square(pos, pieces) is not None:
                return False

    return True


# -- Per-kind geometry -------------------------------------------------------


def _is_straight(d_file: int, d_rank: int) -> bool:
    """Exactly one axis changes."""
    return (d_file == 0) != (d_rank == 0)


def _is_diagonal(d_file: int, d_rank: int) -> bool:
    return abs(d_file) == abs(d_rank)


def _king_move_valid(
    piece: Piece, dest: tuple[int, int], pieces: Collection[Piece]
) -> bool:
    d_file, d_rank = deltas(piece.coord, dest)
    return max(abs(d_file), abs(d_rank)) == 1


def _queen_move_valid(
    piece: Piece, dest: tuple[int, int], pieces: Collection[Piece]
) -> bool:
    d_file, d_rank = deltas(piece.coord, dest)
    return is_path_empty(piece.coord, dest, pieces) and (
        _is_diagonal(d_file, d_rank) or _is_straight(d_file, d_rank)
    )


def _bishop_move_valid(
    piece: Piece, dest: tuple[int, int], pieces: Collection[Piece]
) -> bool:
    d_file, d_rank = deltas(piece.coord, dest)
    return is_path_empty(piece.coord, dest, pieces) and _is_diagonal(d_file, d_rank)


def _knight_move_valid(
    piece: Piece, dest: tuple[int, int], pieces: Collection[Piece]
) -> bool:
    d_file, d_rank = deltas(piece.coord, dest)
    return {abs(d_file), abs(d_rank)} == {1, 2}


def _rook_move_valid(
    piece: Piece, dest: tuple[int, int], pieces: Collection[Piece]
) -> bool:
    d_file, d_rank = deltas(piece.coord, dest)
    return is_path_empty(piece.coord, dest, pieces) and _is_straight(d_file, d_rank)


def _pawn_move_valid(
    piece: Piece, dest: tuple[int, int], pieces: Collection[Piece]
) -> bool:
    forward = PAWN_DIRECTION[piece.color]
    d_file, d_rank = deltas(piece.coord, dest)
    occupant = color_of_square(dest, pieces)

    # Single step
    if d_file == forward and d_rank == 0 and occupant is None:
        return True

    # Double step from the starting file
    if (
        piece.file == PAWN_START_FILE[piece.color]
        and d_file == 2 * forward
        and d_rank == 0
        and is_path_empty(piece.coord, dest, pieces)
        and occupant is None
    ):
        return True

    # Capture
    if d_file == forward and abs(d_rank) == 1 and occupant == piece.color.opposite:
        return True

    return False


_MOVE_PREDICATES: dict[PieceType, MovePredicate] = {
    PieceType.KING: _king_move_valid,
    PieceType.QUEEN: _queen_move_valid,
    PieceType.BISHOP: _bishop_move_valid,
    PieceType.KNIGHT: _knight_move_valid,
    PieceType.ROOK: _rook_move_valid,
    PieceType.PAWN: _pawn_move_valid,
}

_missing = set(PieceType) - _MOVE_PREDICATES.keys()
if _missing:
    raise RuntimeError(f"No move predicate for {sorted(p.name for p in _missing)}")


# -- Public API --------------------------------------------------------------


def is_move_valid(
    piece: Piece, new_position: tuple[int, int], pieces: Collection[Piece]
) -> bool:
    """Whether *piece* may move to *new_position* on the board *pieces*.

    Off-board destinations and the null move are rejected, as is any
    destination held by a piece of the mover's own color.
    """
    if not is_on_board(new_position):
        return False
    if color_of_square(new_position, pieces) == piece.color:
        return False
    if piece.coord == tuple(new_position):
        return False
    return _MOVE_PREDICATES[piece.piece_type](piece, new_position, pieces)


def legal_destinations(piece: Piece, pieces: Collection[Piece]) -> list[Coordinate]:
    """Every square *piece* may move to, in (file, rank) order."""
    return [coord for coord in ALL_COORDS if is_move_valid(piece, coord, pieces)]
