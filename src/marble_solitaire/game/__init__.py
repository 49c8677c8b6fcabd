"""Game management layer — session, history, stopwatch, state machine.

Quick start::

    from marble_solitaire.core import Position
    from marble_solitaire.game import GameConfig, GameSession

    session = GameSession()
    session.new_game(GameConfig(board_size=7, center_win=True))
    session.select_or_move(Position(1, 3))
    session.select_or_move(Position(3, 3))
"""

from marble_solitaire.game.clock import Stopwatch
from marble_solitaire.game.history import History
from marble_solitaire.game.interfaces import (
    DEFAULT_UNDO_BUDGET,
    GameConfig,
    IGameSession,
    IStopwatch,
    SelectResult,
)
from marble_solitaire.game.session import GameEvents, GameSession
from marble_solitaire.game.state import GameState

__all__ = [
    # Interfaces / config
    "DEFAULT_UNDO_BUDGET",
    "GameConfig",
    "IGameSession",
    "IStopwatch",
    "SelectResult",
    # Concrete
    "GameEvents",
    "GameSession",
    "GameState",
    "History",
    "Stopwatch",
]
