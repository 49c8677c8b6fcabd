"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from marble_solitaire.game.interfaces import GameConfig

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from marble_solitaire.ui.styles.theme import APP_STYLE

    app.setApplicationName("Marble Solitaire")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    config: GameConfig | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from marble_solitaire.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(config)
    window.show()
    _LOGGER.info("Main window shown with %r", window.session.config)

    return app.exec()
