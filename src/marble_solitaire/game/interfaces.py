"""Abstract interfaces and configuration for the game layer.

GameSession and Stopwatch implement these ABCs. GameConfig is shared by
the command line, the New Game dialog and the session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from marble_solitaire.core.layout import DEFAULT_BOARD_SIZE

if TYPE_CHECKING:
    from marble_solitaire.core.board import Board
    from marble_solitaire.core.enums import GameOutcome
    from marble_solitaire.core.types import Position

DEFAULT_UNDO_BUDGET = 3


class SelectResult(IntEnum):
    """What a board click did."""

    NO_OP = auto()
    SELECTION_CHANGED = auto()
    MOVE_APPLIED = auto()


# ── Configuration ────────────────────────────────────────────────────────────


class GameConfig:
    """Immutable per-game settings.

    Args:
        board_size: Side length of the square board.
        center_win: Require the last marble to sit on the center to win.
        undo_budget: Number of undos allowed per game.
    """

    __slots__ = ("board_size", "center_win", "undo_budget")

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        center_win: bool = False,
        undo_budget: int = DEFAULT_UNDO_BUDGET,
    ) -> None:
        if board_size < 1:
            raise ValueError(f"board_size must be >= 1, got {board_size}")
        if undo_budget < 0:
            raise ValueError(f"undo_budget must be >= 0, got {undo_budget}")
        self.board_size = board_size
        self.center_win = center_win
        self.undo_budget = undo_budget

    @classmethod
    def classic(cls) -> GameConfig:
        """English 33-hole board, any final square wins."""
        return cls()

    @classmethod
    def strict(cls) -> GameConfig:
        """English board, the last marble must finish in the center."""
        return cls(center_win=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameConfig):
            return NotImplemented
        return (self.board_size, self.center_win, self.undo_budget) == (
            other.board_size,
            other.center_win,
            other.undo_budget,
        )

    def __hash__(self) -> int:
        return hash((self.board_size, self.center_win, self.undo_budget))

    def __repr__(self) -> str:
        flag = ", center-win" if self.center_win else ""
        return f"GameConfig({self.board_size}x{self.board_size}{flag}, undos={self.undo_budget})"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IStopwatch(ABC):
    """Interface for the elapsed play-time counter."""

    @abstractmethod
    def start(self) -> None:
        """Start (or resume) counting."""

    @abstractmethod
    def stop(self) -> None:
        """Freeze the elapsed time."""

    @abstractmethod
    def reset(self) -> None:
        """Zero the elapsed time and stop."""

    @property
    @abstractmethod
    def elapsed(self) -> float:
        """Seconds counted so far."""


class IGameSession(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, config: GameConfig | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def select_or_move(self, position: Position) -> SelectResult:
        """Handle a click on *position*."""

    @abstractmethod
    def undo(self) -> bool:
        """Step back one move. Returns True on success."""

    @abstractmethod
    def redo(self) -> bool:
        """Re-apply the last undone move. Returns True on success."""

    @abstractmethod
    def restart(self) -> None:
        """Start over with the current configuration."""

    @property
    @abstractmethod
    def board(self) -> Board:
        """Snapshot of the current board."""

    @property
    @abstractmethod
    def outcome(self) -> GameOutcome:
        """Current game outcome."""
