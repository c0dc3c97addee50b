"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chesslite.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings) -> None:
    """Route library logging to stderr at the configured level."""
    logging.basicConfig(level=settings.log_level, format=_LOG_FORMAT)
    logging.getLogger("chesslite").setLevel(settings.log_level)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chesslite.ui.styles.theme import APP_STYLE

    app.setApplicationName("chesslite")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chesslite.ui.main_window import MainWindow

    if settings is None:
        settings = AppSettings.from_env()
    configure_logging(settings)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Main window shown (theme=%s)", settings.board_theme)

    return app.exec()
