"""Piece value object."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, replace

from chesslite.core.enums import Color, PieceType
from chesslite.core.rules import is_move_valid
from chesslite.core.types import Coordinate

# Letter ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_LETTERS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a colored piece standing on a square.

    The board position is part of the value. Committing a move means
    replacing the piece with :meth:`moved_to`, never mutating it.
    """

    color: Color
    piece_type: PieceType
    coord: Coordinate

    # ── Legality ─────────────────────────────────────────────────────────

    def is_move_valid(
        self, new_position: tuple[int, int], pieces: Collection[Piece]
    ) -> bool:
        """Whether this piece may move to *new_position* given *pieces*.

        *pieces* is the full board snapshot; it may or may not contain
        ``self``.
        """
        return is_move_valid(self, new_position, pieces)

    def moved_to(self, coord: tuple[int, int]) -> Piece:
        """Copy of this piece standing on *coord*."""
        return replace(self, coord=Coordinate(*coord))

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Piece letter (uppercase = white, lowercase = black)."""
        return _LETTERS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, coord: tuple[int, int]) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, Coordinate(*coord))

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    @property
    def file(self) -> int:
        return self.coord.file

    @property
    def rank(self) -> int:
        return self.coord.rank
