"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. ``"White"``."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.display_name


class PieceType(IntEnum):
    """The six chess piece kinds. Closed set."""

    KING = 1
    QUEEN = 2
    BISHOP = 3
    KNIGHT = 4
    ROOK = 5
    PAWN = 6
