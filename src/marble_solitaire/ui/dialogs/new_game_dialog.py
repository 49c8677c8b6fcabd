"""NewGameDialog — board size, win rule and undo budget for a new game."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QCheckBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from marble_solitaire.game.interfaces import GameConfig


class NewGameDialog(QDialog):
    """Modal dialog to configure a new game."""

    MIN_SIZE = 3
    MAX_SIZE = 15
    MAX_UNDOS = 99

    def __init__(self, current: GameConfig | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumWidth(300)
        self.setWindowTitle("New Game")
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._config: GameConfig | None = None
        self._setup_ui(current or GameConfig.classic())

    def _setup_ui(self, current: GameConfig) -> None:
        main = QVBoxLayout(self)
        form = QFormLayout()
        form.setSpacing(10)

        self._spin_size = QSpinBox()
        self._spin_size.setRange(self.MIN_SIZE, self.MAX_SIZE)
        self._spin_size.setValue(
            min(max(current.board_size, self.MIN_SIZE), self.MAX_SIZE)
        )
        form.addRow("Board size:", self._spin_size)

        self._check_center = QCheckBox("Last marble must finish in the center")
        self._check_center.setChecked(current.center_win)
        form.addRow("Win rule:", self._check_center)

        self._spin_undos = QSpinBox()
        self._spin_undos.setRange(0, self.MAX_UNDOS)
        self._spin_undos.setValue(min(current.undo_budget, self.MAX_UNDOS))
        form.addRow("Undos allowed:", self._spin_undos)

        main.addLayout(form)

        self._buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._buttons.accepted.connect(self._on_accept)
        self._buttons.rejected.connect(self.reject)
        main.addWidget(self._buttons)

    def _on_accept(self) -> None:
        self._config = GameConfig(
            board_size=self._spin_size.value(),
            center_win=self._check_center.isChecked(),
            undo_budget=self._spin_undos.value(),
        )
        self.accept()

    @property
    def config(self) -> GameConfig | None:
        return self._config

    @staticmethod
    def ask(current: GameConfig | None = None, parent: QWidget | None = None) -> GameConfig | None:
        dlg = NewGameDialog(current, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.config
        return None
