"""MainWindow — top-level window assembling the board and the controller."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from PyQt6.QtGui import QAction, QActionGroup
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from chesslite.game.controller import GameController
from chesslite.ui.board.board_view import BoardView
from chesslite.ui.settings import THEMES, AppSettings
from chesslite.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from chesslite.core.board import BoardSnapshot
    from chesslite.core.piece import Piece
    from chesslite.core.types import Coordinate
    from chesslite.game.interfaces import MoveRecord


class MainWindow(QMainWindow):
    """Main application window for chesslite."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("chesslite")
        self.setMinimumSize(480, 520)
        self.resize(720, 760)

        self._settings = settings if settings is not None else AppSettings()
        self._controller = controller if controller is not None else GameController()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()

        self._board_view.board_scene.set_snapshot(self._controller.snapshot)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)

        self._board_view = BoardView(self._settings)
        root.addWidget(self._board_view)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("&New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # View menu
        self._menu_view = menu_bar.addMenu("&View")
        assert self._menu_view is not None

        scene = self._board_view.board_scene
        self._act_legal_moves = self._add_toggle(
            "Show &Legal Moves",
            self._settings.show_legal_moves,
            scene.set_show_legal_moves,
        )
        self._act_coordinates = self._add_toggle(
            "Show &Coordinates",
            self._settings.show_coordinates,
            scene.set_show_coordinates,
        )
        self._act_animate = self._add_toggle(
            "&Animate Moves",
            self._settings.animate_moves,
            scene.set_animate_moves,
        )

        self._menu_view.addSeparator()
        self._menu_theme = self._menu_view.addMenu("Board &Theme")
        assert self._menu_theme is not None
        self._theme_group = QActionGroup(self)
        self._theme_group.setExclusive(True)
        self._theme_actions: dict[str, QAction] = {}
        for name in THEMES:
            action = QAction(name, self)
            action.setCheckable(True)
            action.setChecked(name == self._settings.board_theme)
            action.triggered.connect(
                lambda _checked=False, n=name: self._on_theme_chosen(n)
            )
            self._theme_group.addAction(action)
            self._menu_theme.addAction(action)
            self._theme_actions[name] = action

    def _add_toggle(
        self, text: str, checked: bool, slot: Callable[[bool], None]
    ) -> QAction:
        action = QAction(text, self)
        action.setCheckable(True)
        action.setChecked(checked)
        action.toggled.connect(slot)
        self._menu_view.addAction(action)
        return action

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._board_view.square_clicked.connect(self._on_square_clicked)

    def _connect_game_events(self) -> None:
        ev = self._controller.events
        ev.on_move.append(self._on_move)
        ev.on_reset.append(self._on_reset)
        ev.on_selection_changed.append(self._on_selection_changed)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_square_clicked(self, file: int, rank: int) -> None:
        self._controller.click((file, rank))

    def _on_new_game(self) -> None:
        self._controller.new_game()

    def _on_theme_chosen(self, name: str) -> None:
        self._settings.board_theme = name
        self._board_view.board_scene.set_theme(BoardTheme.by_name(name))

    # ── Game event handlers ──────────────────────────────────────────────

    def _on_move(self, record: MoveRecord, snapshot: BoardSnapshot) -> None:
        self._board_view.board_scene.apply_move(record, snapshot)
        mover = record.piece
        text = f"{mover.color} {mover.piece_type.name.lower()} {record.origin} → {record.dest}"
        if record.captured is not None:
            text += f" takes {record.captured.piece_type.name.lower()}"
        self._status_label.setText(text)

    def _on_reset(self, snapshot: BoardSnapshot) -> None:
        self._board_view.board_scene.set_snapshot(snapshot)
        self._status_label.setText("New game")

    def _on_selection_changed(
        self, piece: Piece | None, destinations: list[Coordinate]
    ) -> None:
        self._board_view.board_scene.show_selection(piece, destinations)
        if piece is not None:
            self._status_label.setText(
                f"{piece.color} {piece.piece_type.name.lower()} on {piece.coord}: "
                f"{len(destinations)} legal move(s)"
            )
