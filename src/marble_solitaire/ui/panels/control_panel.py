"""ControlPanel — game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget


class ControlPanel(QWidget):
    """Buttons for game actions: new game, restart, undo, redo."""

    new_game_clicked = pyqtSignal()
    restart_clicked = pyqtSignal()
    undo_clicked = pyqtSignal()
    redo_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _make_button(self, text: str) -> QPushButton:
        btn = QPushButton(text)
        btn.setFont(QFont("Helvetica Neue", 10))
        btn.setMinimumHeight(36)
        return btn

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        row1 = QHBoxLayout()
        self._btn_new = self._make_button("New Game")
        self._btn_new.clicked.connect(self.new_game_clicked)
        row1.addWidget(self._btn_new)

        self._btn_restart = self._make_button("Restart")
        self._btn_restart.clicked.connect(self.restart_clicked)
        row1.addWidget(self._btn_restart)
        layout.addLayout(row1)

        row2 = QHBoxLayout()
        self._btn_undo = self._make_button("Undo")
        self._btn_undo.clicked.connect(self.undo_clicked)
        row2.addWidget(self._btn_undo)

        self._btn_redo = self._make_button("Redo")
        self._btn_redo.clicked.connect(self.redo_clicked)
        row2.addWidget(self._btn_redo)
        layout.addLayout(row2)

    def set_history_actions(self, can_undo: bool, can_redo: bool) -> None:
        """Enable/disable undo and redo based on game state."""
        self._btn_undo.setEnabled(can_undo)
        self._btn_redo.setEnabled(can_redo)

    def is_undo_enabled(self) -> bool:
        return self._btn_undo.isEnabled()

    def is_redo_enabled(self) -> bool:
        return self._btn_redo.isEnabled()
