"""BoardSnapshot - immutable point-in-time piece placement."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.rules import color_of_square
from chesslite.core.types import BOARD_SIZE, Coordinate

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# color -> (back file, pawn file)
_HOME_FILES: dict[Color, tuple[int, int]] = {
    Color.WHITE: (0, 1),
    Color.BLACK: (7, 6),
}


class BoardSnapshot:
    """Read-only collection of pieces, queried by coordinate.

    Pieces are kept in placement order. The snapshot never checks for two
    pieces sharing a square; callers must not build one.
    """

    __slots__ = ("_pieces",)

    def __init__(self, pieces: Iterable[Piece] = ()) -> None:
        self._pieces: tuple[Piece, ...] = tuple(pieces)

    # -- Collection protocol ------------------------------------------------

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def __contains__(self, item: object) -> bool:
        return item in self._pieces

    # -- Query helpers ------------------------------------------------------

    def piece_at(self, coord: tuple[int, int]) -> Piece | None:
        """The piece standing on *coord*, if any."""
        for piece in self._pieces:
            if piece.coord == coord:
                return piece
        return None

    def color_of_square(self, coord: tuple[int, int]) -> Color | None:
        return color_of_square(coord, self._pieces)

    def is_empty(self, coord: tuple[int, int]) -> bool:
        return self.piece_at(coord) is None

    def pieces_of(self, color: Color) -> list[Piece]:
        """All pieces of *color*."""
        return [p for p in self._pieces if p.color == color]

    # -- Derived snapshots --------------------------------------------------

    def without(self, coord: tuple[int, int]) -> BoardSnapshot:
        """Copy with the piece on *coord* (if any) removed."""
        return BoardSnapshot(p for p in self._pieces if p.coord != coord)

    def with_piece_moved(
        self, origin: tuple[int, int], dest: tuple[int, int]
    ) -> BoardSnapshot:
        """Copy where the piece on *origin* stands on *dest*.

        Whatever stood on *dest* is removed. No legality check is made.
        """
        mover = self.piece_at(origin)
        if mover is None:
            raise ValueError(f"No piece on {Coordinate(*origin)}")
        moved = mover.moved_to(dest)
        return BoardSnapshot(
            moved if p is mover else p for p in self._pieces if p.coord != dest
        )

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> BoardSnapshot:
        """Standard 32-piece starting placement."""
        pieces: list[Piece] = []
        for color, (back_file, pawn_file) in _HOME_FILES.items():
            for rank in range(BOARD_SIZE):
                pieces.append(Piece(color, PieceType.PAWN, Coordinate(pawn_file, rank)))
            for rank, pt in enumerate(_BACK_RANK):
                pieces.append(Piece(color, pt, Coordinate(back_file, rank)))
        return cls(pieces)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardSnapshot):
            return NotImplemented
        return set(self._pieces) == set(other._pieces)

    def __hash__(self) -> int:
        return hash(frozenset(self._pieces))

    def __repr__(self) -> str:
        rows: list[str] = []
        for file in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for rank in range(BOARD_SIZE):
                p = self.piece_at((file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{file} {' '.join(row)}")
        rows.append("  " + " ".join(str(r) for r in range(BOARD_SIZE)))
        return "\n".join(rows)
