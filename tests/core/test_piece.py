"""Tests for Piece."""

import dataclasses

import pytest

from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import Coordinate


class TestPieceValue:
    def test_from_char(self) -> None:
        piece = Piece.from_char("N", (0, 1))
        assert piece == Piece(Color.WHITE, PieceType.KNIGHT, Coordinate(0, 1))

    def test_from_char_black(self) -> None:
        piece = Piece.from_char("q", (7, 3))
        assert piece.color == Color.BLACK
        assert piece.piece_type == PieceType.QUEEN

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x", (0, 0))

    @pytest.mark.parametrize("char", list("PNBRQKpnbrqk"))
    def test_str_is_letter(self, char: str) -> None:
        assert str(Piece.from_char(char, (4, 4))) == char

    def test_symbol(self) -> None:
        assert Piece.from_char("K", (0, 4)).symbol == "♔"
        assert Piece.from_char("n", (7, 1)).symbol == "♞"

    def test_file_and_rank(self) -> None:
        piece = Piece.from_char("P", (1, 6))
        assert piece.file == 1
        assert piece.rank == 6


class TestPieceCopies:
    def test_moved_to_returns_new_value(self) -> None:
        pawn = Piece.from_char("P", (1, 4))
        moved = pawn.moved_to((3, 4))
        assert moved.coord == Coordinate(3, 4)
        assert isinstance(moved.coord, Coordinate)
        assert pawn.coord == Coordinate(1, 4)
        assert moved.color == pawn.color and moved.piece_type == pawn.piece_type

    def test_frozen(self) -> None:
        pawn = Piece.from_char("P", (1, 4))
        with pytest.raises(dataclasses.FrozenInstanceError):
            pawn.coord = Coordinate(2, 4)  # type: ignore[misc]

    def test_hashable_value_semantics(self) -> None:
        a = Piece.from_char("R", (0, 0))
        b = Piece.from_char("R", (0, 0))
        assert a == b
        assert len({a, b}) == 1
