"""Game state — board, history and outcome kept in step."""

from __future__ import annotations

from dataclasses import dataclass, field

from marble_solitaire.core.board import Board
from marble_solitaire.core.enums import GameOutcome
from marble_solitaire.core.layout import DEFAULT_BOARD_SIZE, generate_initial_board
from marble_solitaire.core.move import Move
from marble_solitaire.core.rules import Rules
from marble_solitaire.game.history import History
from marble_solitaire.game.interfaces import DEFAULT_UNDO_BUDGET


@dataclass
class GameState:
    """Owns the current board, its history and the game outcome.

    This is a pure data/logic class — no timing, no UI. The outcome is
    re-evaluated after every successful transition and stays put once
    terminal until :meth:`setup` is called again.
    """

    board: Board = field(init=False)
    history: History = field(default_factory=History, init=False)
    outcome: GameOutcome = field(default=GameOutcome.IN_PROGRESS, init=False)
    center_win: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.board = generate_initial_board(DEFAULT_BOARD_SIZE)
        self.history.record_initial(self.board)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        size: int = DEFAULT_BOARD_SIZE,
        undo_budget: int = DEFAULT_UNDO_BUDGET,
        center_win: bool = False,
    ) -> None:
        """Initialise (or reset) the game."""
        self.board = generate_initial_board(size)
        self.history.reset(self.board, undo_budget)
        self.center_win = center_win
        self.outcome = GameOutcome.IN_PROGRESS
        self._evaluate()

    # ── Transitions ──────────────────────────────────────────────────────

    def apply_move(self, move: Move) -> bool:
        """Apply *move* if legal and record it. Returns True if applied."""
        if self.is_game_over:
            return False
        if not Rules.apply_move(self.board, move):
            return False
        self.history.record(self.board)
        self._evaluate()
        return True

    def undo(self) -> bool:
        if self.is_game_over:
            return False
        board = self.history.undo()
        if board is None:
            return False
        self.board = board
        self._evaluate()
        return True

    def redo(self) -> bool:
        if self.is_game_over:
            return False
        board = self.history.redo()
        if board is None:
            return False
        self.board = board
        self._evaluate()
        return True

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def marble_count(self) -> int:
        return self.board.marble_count()

    @property
    def undo_budget(self) -> int:
        return self.history.undo_budget

    @property
    def can_undo(self) -> bool:
        return not self.is_game_over and self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return not self.is_game_over and self.history.can_redo

    @property
    def moves_played(self) -> int:
        return self.history.undo_depth - 1

    # ── Internal ─────────────────────────────────────────────────────────

    def _evaluate(self) -> None:
        if self.is_game_over:
            return
        self.outcome = Rules.evaluate(self.board, self.center_win)
