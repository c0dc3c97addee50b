"""Visual theme constants and QSS styles for chesslite."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from chesslite.core.enums import Color


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board and pieces."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    last_move_from: QColor  # last move origin
    last_move_to: QColor  # last move destination
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    white_piece: QColor
    black_piece: QColor

    def piece_color(self, color: Color) -> QColor:
        return self.white_piece if color == Color.WHITE else self.black_piece

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(0, 0, 0, 40),  # dark dot overlay
            last_move_from=QColor(155, 199, 0, 105),  # green
            last_move_to=QColor(155, 199, 0, 105),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
            white_piece=QColor(255, 204, 204),  # pale pink
            black_piece=QColor(77, 77, 77),  # charcoal
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(100, 170, 255, 110),
            highlight_to=QColor(20, 40, 80, 50),
            last_move_from=QColor(90, 160, 230, 105),
            last_move_to=QColor(90, 160, 230, 105),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(40, 48, 56),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_from=QColor(255, 230, 80, 110),
            highlight_to=QColor(20, 60, 30, 50),
            last_move_from=QColor(200, 220, 60, 110),
            last_move_to=QColor(200, 220, 60, 110),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
            white_piece=QColor(255, 253, 240),
            black_piece=QColor(33, 33, 33),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a settings name; unknown names fall back to the default."""
        theme_map = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
        }
        return theme_map.get(name, cls.default)()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel, QStatusBar {
    color: #e0e0e0;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
