"""GameSession — the single owner of a solitaire game's mutable state.

Coordinates: GameState, selection, Stopwatch.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from marble_solitaire.core.board import Board
from marble_solitaire.core.enums import CellState, GameOutcome
from marble_solitaire.core.move import Move
from marble_solitaire.core.types import Position
from marble_solitaire.game.clock import Stopwatch
from marble_solitaire.game.interfaces import GameConfig, IGameSession, SelectResult
from marble_solitaire.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

BoardCallback = Callable[["GameState"], None]
SelectionCallback = Callable[[Position | None], None]
GameOverCallback = Callable[[GameOutcome], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_board_changed: list[BoardCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession(IGameSession):
    """Orchestrates a solitaire game: selection, moves, undo/redo, timing.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). Collaborators read state through the query
    properties, which hand out copies of the board.
    """

    __slots__ = (
        "_config",
        "_state",
        "_selection",
        "_stopwatch",
        "events",
    )

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config or GameConfig.classic()
        self._state = GameState()
        self._selection: Position | None = None
        self._stopwatch = Stopwatch()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board.copy()

    @property
    def selection(self) -> Position | None:
        return self._selection

    @property
    def outcome(self) -> GameOutcome:
        return self._state.outcome

    @property
    def undo_budget(self) -> int:
        return self._state.undo_budget

    @property
    def marble_count(self) -> int:
        return self._state.marble_count

    @property
    def can_undo(self) -> bool:
        return self._state.can_undo

    @property
    def can_redo(self) -> bool:
        return self._state.can_redo

    @property
    def stopwatch(self) -> Stopwatch:
        return self._stopwatch

    @property
    def elapsed(self) -> float:
        return self._stopwatch.elapsed

    # ── IGameSession impl ────────────────────────────────────────────────

    def new_game(self, config: GameConfig | None = None) -> None:
        if config is not None:
            self._config = config
        cfg = self._config

        self._state = GameState()
        self._state.setup(cfg.board_size, cfg.undo_budget, cfg.center_win)
        self._selection = None
        self._stopwatch.restart()
        _LOGGER.info("New game: %r", cfg)

        self._emit_selection()
        self._emit_board()
        self._check_game_over()

    def restart(self) -> None:
        self.new_game()

    def select_or_move(self, position: Position) -> SelectResult:
        if self._state.is_game_over:
            return SelectResult.NO_OP

        if self._selection is None:
            if self._state.board.get(position) != CellState.MARBLE:
                return SelectResult.NO_OP
            self._selection = position
            _LOGGER.debug("Selected %s", position)
            self._emit_selection()
            return SelectResult.SELECTION_CHANGED

        move = Move(self._selection, position)
        self._selection = None
        self._emit_selection()

        if not self._state.apply_move(move):
            _LOGGER.debug("Rejected move %s", move)
            return SelectResult.SELECTION_CHANGED

        _LOGGER.debug("Played %s, %d marbles left", move, self._state.marble_count)
        self._emit_board()
        self._check_game_over()
        return SelectResult.MOVE_APPLIED

    def undo(self) -> bool:
        if not self._state.undo():
            return False
        _LOGGER.debug("Undo, %d undos remaining", self._state.undo_budget)
        self._clear_selection()
        self._emit_board()
        self._check_game_over()
        return True

    def redo(self) -> bool:
        if not self._state.redo():
            return False
        _LOGGER.debug("Redo")
        self._clear_selection()
        self._emit_board()
        self._check_game_over()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _clear_selection(self) -> None:
        if self._selection is not None:
            self._selection = None
            self._emit_selection()

    def _check_game_over(self) -> None:
        outcome = self._state.outcome
        if not outcome.is_terminal:
            return
        self._stopwatch.stop()
        _LOGGER.info(
            "Game over: %s with %d marbles after %.1fs",
            outcome.name,
            self._state.marble_count,
            self._stopwatch.elapsed,
        )
        for cb in self.events.on_game_over:
            cb(outcome)

    def _emit_board(self) -> None:
        for cb in self.events.on_board_changed:
            cb(self._state)

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._selection)
