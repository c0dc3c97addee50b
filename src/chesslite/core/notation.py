"""Placement strings: FEN-style text for a :class:`BoardSnapshot`.

One row per file, from file 7 down to file 0, separated by ``/``. Each
row lists ranks 0-7; piece letters as in FEN (uppercase = white), digits
for runs of empty squares.
"""

from __future__ import annotations

from chesslite.core.board import BoardSnapshot
from chesslite.core.piece import Piece
from chesslite.core.types import BOARD_SIZE, Coordinate

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_PLACEMENT = "8/8/8/8/8/8/8/8"


def snapshot_from_placement(placement: str) -> BoardSnapshot:
    """Parse a placement string into a :class:`BoardSnapshot`."""
    rows = placement.strip().split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 rows): {placement!r}")

    pieces: list[Piece] = []
    for row_idx, row_text in enumerate(rows):
        file = BOARD_SIZE - 1 - row_idx
        rank = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                rank += step
            else:
                if rank >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement row width: {placement!r}")
                pieces.append(Piece.from_char(ch, Coordinate(file, rank)))
                rank += 1
            if rank > BOARD_SIZE:
                raise ValueError(f"Invalid placement row width: {placement!r}")
        if rank != BOARD_SIZE:
            raise ValueError(f"Invalid placement row width: {placement!r}")

    return BoardSnapshot(pieces)


def snapshot_to_placement(snapshot: BoardSnapshot) -> str:
    """Serialise a :class:`BoardSnapshot` to a placement string."""
    rows: list[str] = []
    for file in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        row = ""
        for rank in range(BOARD_SIZE):
            piece = snapshot.piece_at((file, rank))
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
