"""Tests for BoardSnapshot."""

import pytest

from chesslite.core.board import BoardSnapshot
from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import Coordinate


class TestSnapshotInitial:
    def test_thirty_two_pieces(self) -> None:
        board = BoardSnapshot.initial()
        assert len(board) == 32
        assert len(board.pieces_of(Color.WHITE)) == 16
        assert len(board.pieces_of(Color.BLACK)) == 16

    def test_no_shared_squares(self) -> None:
        board = BoardSnapshot.initial()
        assert len({p.coord for p in board}) == 32

    def test_kings_and_queens(self) -> None:
        board = BoardSnapshot.initial()
        assert board.piece_at((0, 4)) == Piece(Color.WHITE, PieceType.KING, Coordinate(0, 4))
        assert board.piece_at((7, 4)) == Piece(Color.BLACK, PieceType.KING, Coordinate(7, 4))
        assert board.piece_at((0, 3)) == Piece(Color.WHITE, PieceType.QUEEN, Coordinate(0, 3))
        assert board.piece_at((7, 3)) == Piece(Color.BLACK, PieceType.QUEEN, Coordinate(7, 3))

    @pytest.mark.parametrize(
        ("ranks", "piece_type"),
        [
            ((0, 7), PieceType.ROOK),
            ((1, 6), PieceType.KNIGHT),
            ((2, 5), PieceType.BISHOP),
        ],
    )
    def test_back_rank_pairs(self, ranks: tuple[int, int], piece_type: PieceType) -> None:
        board = BoardSnapshot.initial()
        for file, color in ((0, Color.WHITE), (7, Color.BLACK)):
            for rank in ranks:
                piece = board.piece_at((file, rank))
                assert piece is not None
                assert (piece.color, piece.piece_type) == (color, piece_type)

    def test_pawn_files(self) -> None:
        board = BoardSnapshot.initial()
        for rank in range(8):
            white = board.piece_at((1, rank))
            black = board.piece_at((6, rank))
            assert white is not None and white.piece_type == PieceType.PAWN
            assert black is not None and black.piece_type == PieceType.PAWN
            assert white.color == Color.WHITE
            assert black.color == Color.BLACK

    def test_empty_middle(self) -> None:
        board = BoardSnapshot.initial()
        for file in range(2, 6):
            for rank in range(8):
                assert board.is_empty((file, rank))


class TestSnapshotQueries:
    def test_color_of_square(self) -> None:
        board = BoardSnapshot.initial()
        assert board.color_of_square((0, 0)) == Color.WHITE
        assert board.color_of_square((7, 7)) == Color.BLACK
        assert board.color_of_square((4, 4)) is None

    def test_contains_and_iter(self) -> None:
        board = BoardSnapshot.initial()
        king = Piece(Color.WHITE, PieceType.KING, Coordinate(0, 4))
        assert king in board
        assert king.moved_to((1, 4)) not in board
        assert sum(1 for _ in board) == 32

    def test_equality_ignores_order(self) -> None:
        a = Piece.from_char("K", (0, 4))
        b = Piece.from_char("k", (7, 4))
        assert BoardSnapshot([a, b]) == BoardSnapshot([b, a])
        assert hash(BoardSnapshot([a, b])) == hash(BoardSnapshot([b, a]))
        assert BoardSnapshot([a]) != BoardSnapshot([a, b])

    def test_repr_draws_rows(self) -> None:
        text = repr(BoardSnapshot.initial())
        lines = text.splitlines()
        assert lines[0] == "7 r n b q k b n r"
        assert lines[7] == "0 R N B Q K B N R"
        assert lines[8] == "  0 1 2 3 4 5 6 7"


class TestDerivedSnapshots:
    def test_without(self) -> None:
        board = BoardSnapshot.initial()
        smaller = board.without((1, 4))
        assert len(smaller) == 31
        assert smaller.is_empty((1, 4))
        assert not board.is_empty((1, 4))

    def test_with_piece_moved(self) -> None:
        board = BoardSnapshot.initial()
        after = board.with_piece_moved((1, 4), (3, 4))
        assert after.is_empty((1, 4))
        assert after.piece_at((3, 4)) == Piece(Color.WHITE, PieceType.PAWN, Coordinate(3, 4))
        assert len(after) == 32
        # Original untouched
        assert board.piece_at((1, 4)) is not None
        assert board.is_empty((3, 4))

    def test_with_piece_moved_removes_captured(self) -> None:
        board = BoardSnapshot([Piece.from_char("P", (1, 4)), Piece.from_char("p", (2, 5))])
        after = board.with_piece_moved((1, 4), (2, 5))
        assert len(after) == 1
        assert after.color_of_square((2, 5)) == Color.WHITE

    def test_with_piece_moved_from_empty_square(self) -> None:
        with pytest.raises(ValueError, match="No piece on 44"):
            BoardSnapshot.initial().with_piece_moved((4, 4), (5, 4))
