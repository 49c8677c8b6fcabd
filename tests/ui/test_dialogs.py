"""Tests for the new-game and game-over dialogs."""

from __future__ import annotations

from marble_solitaire.core.enums import GameOutcome
from marble_solitaire.game.interfaces import GameConfig
from marble_solitaire.ui.dialogs.game_over_dialog import (
    GameOverDialog,
    game_over_text,
    game_over_title,
)
from marble_solitaire.ui.dialogs.new_game_dialog import NewGameDialog


class TestGameOverText:
    def test_titles(self) -> None:
        assert game_over_title(GameOutcome.WON) == "You Win!"
        assert game_over_title(GameOutcome.LOST) == "Game Over"

    def test_win_reports_time(self) -> None:
        text = game_over_text(GameOutcome.WON, 83.27, 1)
        assert "83.3 seconds" in text

    def test_loss_reports_marbles(self) -> None:
        text = game_over_text(GameOutcome.LOST, 10.0, 5)
        assert "Marbles remaining: 5" in text

    def test_dialog_has_replay_default(self) -> None:
        dlg = GameOverDialog(GameOutcome.LOST, 1.0, 3)
        assert dlg.defaultButton() is dlg._replay_button
        assert dlg.windowTitle() == "Game Over"


class TestNewGameDialog:
    def test_prefilled_from_current(self) -> None:
        dlg = NewGameDialog(GameConfig(board_size=9, center_win=True, undo_budget=5))
        assert dlg._spin_size.value() == 9
        assert dlg._check_center.isChecked()
        assert dlg._spin_undos.value() == 5
        assert dlg.config is None

    def test_accept_builds_config(self) -> None:
        dlg = NewGameDialog()
        dlg._spin_size.setValue(11)
        dlg._spin_undos.setValue(0)
        dlg._on_accept()
        assert dlg.config == GameConfig(board_size=11, undo_budget=0)

    def test_out_of_range_size_is_clamped(self) -> None:
        dlg = NewGameDialog(GameConfig(board_size=1))
        assert dlg._spin_size.value() == NewGameDialog.MIN_SIZE
