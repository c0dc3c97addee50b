"""BoardScene — QGraphicsScene that draws the board and slides pieces.

The scene is a pure listener: it mirrors the controller's snapshot and
never decides legality itself. Committed moves update each piece item's
logical square at once; a frame timer then glides the glyph toward it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QElapsedTimer, QObject, QPointF, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chesslite.core.types import BOARD_SIZE, Coordinate
from chesslite.ui.board.motion import Point, is_settled, step_toward
from chesslite.ui.board.piece_item import PieceItem
from chesslite.ui.settings import AppSettings
from chesslite.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from chesslite.core.board import BoardSnapshot
    from chesslite.core.piece import Piece
    from chesslite.game.interfaces import MoveRecord


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    Signals:
        square_clicked(int, int): file and rank of a clicked square.
    """

    square_clicked = pyqtSignal(int, int)

    TILE = 80  # px per square

    def __init__(
        self, settings: AppSettings | None = None, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else AppSettings()
        self._theme = BoardTheme.by_name(self._settings.board_theme)

        # Visual layers
        self._square_items: dict[Coordinate, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._selection_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsEllipseItem] = []
        self._last_move_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Coordinate, PieceItem] = {}

        # Overlay state, replayed on theme changes
        self._selection: tuple[Piece | None, list[Coordinate]] = (None, [])
        self._last_move: MoveRecord | None = None

        # Frame loop
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(self._settings.frame_interval_ms)
        self._frame_timer.timeout.connect(self._on_frame)
        self._frame_clock = QElapsedTimer()

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def piece_item(self, coord: tuple[int, int]) -> PieceItem | None:
        """Item for the piece that logically stands on *coord*."""
        return self._piece_items.get(Coordinate(*coord))

    def piece_items(self) -> list[PieceItem]:
        return list(self._piece_items.values())

    def is_animating(self) -> bool:
        return self._frame_timer.isActive()

    def set_snapshot(self, snapshot: BoardSnapshot) -> None:
        """Show *snapshot* immediately (full redraw of pieces)."""
        self._frame_timer.stop()
        self._selection = (None, [])
        self._last_move = None
        self._clear_items(self._last_move_items)
        self._clear_items(self._selection_items)
        self._clear_items(self._legal_dot_items)
        self._sync_pieces(snapshot)

    def apply_move(self, record: MoveRecord, snapshot: BoardSnapshot) -> None:
        """Reflect a committed move, gliding the mover to its new square."""
        item = self._piece_items.pop(record.origin, None)
        if item is None:
            # Out of step with the controller; resync
            self._sync_pieces(snapshot)
            self.highlight_last_move(record)
            return

        captured = self._piece_items.pop(record.dest, None)
        if captured is not None:
            self.removeItem(captured)

        item.piece = record.moved_piece
        self._piece_items[record.dest] = item
        self.highlight_last_move(record)

        if self._settings.animate_moves:
            item.setZValue(2)
            self._start_frames()
        else:
            self._place(item, item.target)

    def show_selection(self, piece: Piece | None, destinations: list[Coordinate]) -> None:
        """Highlight *piece*'s square and, if enabled, its legal targets."""
        self._selection = (piece, list(destinations))
        self._clear_items(self._selection_items)
        self._clear_items(self._legal_dot_items)
        if piece is None:
            return
        rect = self._make_highlight(piece.coord, self._theme.highlight_from)
        rect.setZValue(0.6)
        self._selection_items.append(rect)
        if self._settings.show_legal_moves:
            for coord in destinations:
                self._legal_dot_items.append(self._make_dot(coord))

    def highlight_last_move(self, record: MoveRecord | None) -> None:
        """Highlight origin/destination of the last committed move."""
        self._last_move = record
        self._clear_items(self._last_move_items)
        if record is None:
            return
        for coord, color in [
            (record.origin, self._theme.last_move_from),
            (record.dest, self._theme.last_move_to),
        ]:
            rect = self._make_highlight(coord, color)
            rect.setZValue(0.5)
            self._last_move_items.append(rect)

    def set_theme(self, theme: BoardTheme) -> None:
        """Recolor squares, labels, pieces and any shown highlights."""
        self._theme = theme
        self._draw_board()
        for item in self._piece_items.values():
            item.set_fill(self._theme.piece_color(item.piece.color))
        self.highlight_last_move(self._last_move)
        self.show_selection(*self._selection)

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide coordinate labels."""
        self._settings.show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dots."""
        self._settings.show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)

    def set_animate_moves(self, enabled: bool) -> None:
        """Enable or disable gliding; disabling snaps every piece home."""
        self._settings.animate_moves = enabled
        if not enabled:
            self._frame_timer.stop()
            for item in self._piece_items.values():
                self._place(item, item.target)

    def advance(self, dt: float) -> bool:
        """Move every piece one frame of *dt* seconds toward its square.

        Returns True while at least one piece is still travelling.
        """
        speed = self._settings.piece_speed
        snap = self._settings.snap_distance
        moving = False
        for item in self._piece_items.values():
            target = item.target
            if is_settled(item.board_pos, target, snap):
                if item.board_pos != target:
                    self._place(item, target)
                    item.setZValue(1)
                continue
            pos = step_toward(item.board_pos, target, dt, speed, snap)
            self._place(item, pos)
            if is_settled(pos, target, snap):
                self._place(item, target)
                item.setZValue(1)
            else:
                moving = True
        return moving

    # ── Frame loop ───────────────────────────────────────────────────────

    def _start_frames(self) -> None:
        if self._frame_timer.isActive():
            return
        self._frame_clock.start()
        self._frame_timer.start()

    def _on_frame(self) -> None:
        dt = self._frame_clock.restart() / 1000.0
        if not self.advance(dt):
            self._frame_timer.stop()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont()
        font.setPixelSize(max(9, t // 8))

        for file in range(BOARD_SIZE):
            for rank in range(BOARD_SIZE):
                col, row = self._visual_coords(file, rank)
                is_light = (file + rank) % 2 == 1
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[Coordinate(file, rank)] = rect

                label_color = self._theme.coord_dark if is_light else self._theme.coord_light
                # File numbers (left edge)
                if rank == 0:
                    self._add_label(str(file), font, label_color, col * t + 2, row * t + 1)
                # Rank numbers (bottom edge)
                if file == 0:
                    self._add_label(
                        str(rank), font, label_color, col * t + t - 12, row * t + t - 16
                    )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_label(
        self, text: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._settings.show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self, snapshot: BoardSnapshot) -> None:
        """Re-create all piece items from *snapshot*."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        for piece in snapshot:
            item = PieceItem(piece, self.TILE, self._theme.piece_color(piece.color))
            self.addItem(item)
            self._place(item, item.target)
            self._piece_items[piece.coord] = item

    def _place(self, item: PieceItem, pos: Point) -> None:
        """Put *item* at board-unit position *pos*."""
        item.board_pos = pos
        x, y = self._scene_point(pos)
        dx, dy = item.centre_offset()
        item.setPos(x + dx, y + dy)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        coord = self._pos_to_coord(event.scenePos())
        if coord is not None:
            self.square_clicked.emit(coord.file, coord.rank)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    @staticmethod
    def _visual_coords(file: int, rank: int) -> tuple[int, int]:
        """Board file/rank → visual column/row (White at the bottom)."""
        return rank, BOARD_SIZE - 1 - file

    def _scene_point(self, pos: Point) -> tuple[float, float]:
        """Board-unit (file, rank) point → scene top-left of its tile."""
        t = self.TILE
        return pos[1] * t, (BOARD_SIZE - 1 - pos[0]) * t

    def _pos_to_coord(self, pos: QPointF) -> Coordinate | None:
        """Scene position → board coordinate."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Coordinate(BOARD_SIZE - 1 - row, col)

    def _make_highlight(self, coord: tuple[int, int], color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        col, row = self._visual_coords(*coord)
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _make_dot(self, coord: tuple[int, int]) -> QGraphicsEllipseItem:
        """Small round marker in the middle of a legal target square."""
        t = self.TILE
        col, row = self._visual_coords(*coord)
        size = t * 0.3
        dot = QGraphicsEllipseItem(
            col * t + (t - size) / 2, row * t + (t - size) / 2, size, size
        )
        dot.setBrush(QBrush(self._theme.highlight_to))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(0.8)
        self.addItem(dot)
        return dot

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()
