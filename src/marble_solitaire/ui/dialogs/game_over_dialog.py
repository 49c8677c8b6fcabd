"""GameOverDialog — win/lose message with a Replay button."""

from __future__ import annotations

from PyQt6.QtWidgets import QMessageBox, QWidget

from marble_solitaire.core.enums import GameOutcome
from marble_solitaire.ui.panels.status_panel import format_elapsed


def game_over_title(outcome: GameOutcome) -> str:
    return "You Win!" if outcome == GameOutcome.WON else "Game Over"


def game_over_text(outcome: GameOutcome, elapsed: float, marbles: int) -> str:
    if outcome == GameOutcome.WON:
        return f"Congratulations! You win!\nTime taken: {format_elapsed(elapsed)} seconds"
    return f"No valid moves remain. You lose.\nMarbles remaining: {marbles}"


class GameOverDialog(QMessageBox):
    """Modal end-of-game message. Replay starts the next game."""

    def __init__(
        self,
        outcome: GameOutcome,
        elapsed: float,
        marbles: int,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(game_over_title(outcome))
        self.setText(game_over_text(outcome, elapsed, marbles))
        self.setIcon(
            QMessageBox.Icon.Information
            if outcome == GameOutcome.WON
            else QMessageBox.Icon.Warning
        )
        self._replay_button = self.addButton("Replay", QMessageBox.ButtonRole.AcceptRole)
        self.addButton(QMessageBox.StandardButton.Close)
        self.setDefaultButton(self._replay_button)

    @staticmethod
    def ask_replay(
        outcome: GameOutcome,
        elapsed: float,
        marbles: int,
        parent: QWidget | None = None,
    ) -> bool:
        """Show the dialog; True if the player chose Replay."""
        dlg = GameOverDialog(outcome, elapsed, marbles, parent)
        dlg.exec()
        return dlg.clickedButton() is dlg._replay_button
