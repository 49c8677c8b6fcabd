"""Tests for GameConfig and the game-layer interfaces."""

import pytest

from marble_solitaire.game.clock import Stopwatch
from marble_solitaire.game.interfaces import (
    DEFAULT_UNDO_BUDGET,
    GameConfig,
    IGameSession,
    IStopwatch,
)
from marble_solitaire.game.session import GameSession


class TestGameConfig:
    def test_defaults(self) -> None:
        cfg = GameConfig()
        assert cfg.board_size == 7
        assert not cfg.center_win
        assert cfg.undo_budget == DEFAULT_UNDO_BUDGET == 3

    def test_presets(self) -> None:
        assert GameConfig.classic() == GameConfig()
        assert GameConfig.strict() == GameConfig(center_win=True)

    def test_equality_and_hash(self) -> None:
        assert GameConfig(9, True, 1) == GameConfig(9, True, 1)
        assert GameConfig(9) != GameConfig(7)
        assert len({GameConfig(), GameConfig.classic()}) == 1

    @pytest.mark.parametrize(
        ("size", "undos"),
        [(0, 3), (-1, 3), (7, -1)],
    )
    def test_rejects_bad_values(self, size: int, undos: int) -> None:
        with pytest.raises(ValueError):
            GameConfig(board_size=size, undo_budget=undos)

    def test_repr(self) -> None:
        assert repr(GameConfig()) == "GameConfig(7x7, undos=3)"
        assert repr(GameConfig.strict()) == "GameConfig(7x7, center-win, undos=3)"


class TestImplementations:
    def test_session_and_stopwatch_implement_interfaces(self) -> None:
        assert isinstance(GameSession(), IGameSession)
        assert isinstance(Stopwatch(), IStopwatch)

    def test_session_defaults_to_classic(self) -> None:
        assert GameSession().config == GameConfig.classic()
