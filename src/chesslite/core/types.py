"""Coordinate type and board geometry helpers.

Board layout::

    (file, rank), both 0-7

The *file* axis is the one pawns advance along: White starts on files
0-1 and moves toward file 7, Black starts on files 6-7 and moves toward
file 0.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class Coordinate(NamedTuple):
    """One of the 64 board squares."""

    file: int
    rank: int

    def __str__(self) -> str:
        return coord_name(self)


def is_on_board(coord: tuple[int, int]) -> bool:
    """Whether both components lie in 0-7."""
    file, rank = coord
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def coord_name(coord: tuple[int, int]) -> str:
    """Two-digit name, e.g. (1, 4) -> '14'."""
    return f"{coord[0]}{coord[1]}"


def parse_coord(name: str) -> Coordinate:
    """Parse a two-digit name, e.g. '14' -> Coordinate(1, 4)."""
    if len(name) != 2 or name[0] not in "01234567" or name[1] not in "01234567":
        raise ValueError(f"Invalid coordinate name: {name!r}")
    return Coordinate(int(name[0]), int(name[1]))


def deltas(origin: tuple[int, int], dest: tuple[int, int]) -> tuple[int, int]:
    """Signed (file, rank) deltas from *origin* to *dest*."""
    return dest[0] - origin[0], dest[1] - origin[1]


def is_aligned(begin: tuple[int, int], end: tuple[int, int]) -> bool:
    """Whether *begin* and *end* share a file, a rank or a diagonal."""
    d_file, d_rank = deltas(begin, end)
    return d_file == 0 or d_rank == 0 or abs(d_file) == abs(d_rank)


ALL_COORDS: tuple[Coordinate, ...] = tuple(
    Coordinate(f, r) for f in range(BOARD_SIZE) for r in range(BOARD_SIZE)
)
