"""PieceItem — a chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from chesslite.core.enums import PieceType
from chesslite.core.piece import Piece
from chesslite.ui.board.motion import Point

# Solid glyphs for both sides; the side is shown by the fill colour.
_GLYPHS: dict[PieceType, str] = {
    PieceType.KING: "♚",
    PieceType.QUEEN: "♛",
    PieceType.BISHOP: "♝",
    PieceType.KNIGHT: "♞",
    PieceType.ROOK: "♜",
    PieceType.PAWN: "♟",
}


class PieceItem(QGraphicsSimpleTextItem):
    """A single piece on the board.

    ``board_pos`` is the piece's *visual* location in board units and
    trails ``piece.coord`` while a move is being animated.
    """

    _FONT_RATIO = 0.72

    def __init__(self, piece: Piece, tile_size: int, fill: QColor) -> None:
        super().__init__(_GLYPHS[piece.piece_type])
        self.piece = piece
        self.board_pos: Point = (float(piece.file), float(piece.rank))
        self._tile_size = tile_size

        self.setBrush(QBrush(fill))
        self.setPen(QPen(QColor(20, 20, 20), 1.0))
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)
        self._update_font()

    @property
    def target(self) -> Point:
        """Where the piece logically stands, in board units."""
        return (float(self.piece.file), float(self.piece.rank))

    def set_fill(self, fill: QColor) -> None:
        self.setBrush(QBrush(fill))

    def set_tile_size(self, size: int) -> None:
        self._tile_size = size
        self._update_font()

    def _update_font(self) -> None:
        font = QFont()
        font.setPixelSize(max(int(self._tile_size * self._FONT_RATIO), 1))
        self.setFont(font)

    def centre_offset(self) -> tuple[float, float]:
        """Offset that centres the glyph inside its tile."""
        rect = self.boundingRect()
        return (
            (self._tile_size - rect.width()) / 2.0,
            (self._tile_size - rect.height()) / 2.0,
        )
