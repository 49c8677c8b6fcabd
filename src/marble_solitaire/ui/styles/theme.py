"""Visual theme constants and QSS styles for Marble Solitaire."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board."""

    background: QColor
    cell: QColor  # playable hole
    cell_selected: QColor  # hole under the selected marble
    marble: QColor
    marble_outline: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            background=QColor(0, 0, 0),
            cell=QColor(77, 77, 77, 204),  # grey
            cell_selected=QColor(255, 255, 153, 230),  # pale yellow
            marble=QColor(26, 153, 255),  # blue
            marble_outline=QColor(10, 90, 160),
        )

    @classmethod
    def wood(cls) -> BoardTheme:
        return cls(
            background=QColor(60, 40, 25),
            cell=QColor(118, 74, 47),
            cell_selected=QColor(240, 217, 181),
            marble=QColor(200, 60, 50),
            marble_outline=QColor(120, 30, 25),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Wood": BoardTheme.wood(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
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
