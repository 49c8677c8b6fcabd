"""Undo/redo history of full board snapshots with a consumable undo budget."""

from __future__ import annotations

from marble_solitaire.core.board import Board
from marble_solitaire.game.interfaces import DEFAULT_UNDO_BUDGET


class History:
    """Two snapshot stacks plus an undo budget.

    The top of the undo stack is the current board. Snapshots are copied
    on the way in and on the way out, so callers never alias stored boards.

    Redo does not refund the budget: undos are a per-game resource.
    """

    __slots__ = ("_undo", "_redo", "_budget")

    def __init__(self, undo_budget: int = DEFAULT_UNDO_BUDGET) -> None:
        self._undo: list[Board] = []
        self._redo: list[Board] = []
        self._budget = undo_budget

    # ── Seeding ──────────────────────────────────────────────────────────

    def record_initial(self, board: Board) -> None:
        """Clear both stacks and seed with *board*."""
        self._undo = [board.copy()]
        self._redo.clear()

    def reset(self, board: Board, undo_budget: int) -> None:
        """Start a new game's history and restore the budget."""
        self.record_initial(board)
        self._budget = undo_budget

    # ── Transitions ──────────────────────────────────────────────────────

    def record(self, board: Board) -> None:
        """Push the board reached by a new move; the redo branch is dropped."""
        self._undo.append(board.copy())
        self._redo.clear()

    def undo(self) -> Board | None:
        """Step back. Returns the new current board, or None if not allowed."""
        if not self.can_undo:
            return None
        self._redo.append(self._undo.pop())
        self._budget -= 1
        return self._undo[-1].copy()

    def redo(self) -> Board | None:
        """Step forward. Returns the new current board, or None if nothing to redo."""
        if not self._redo:
            return None
        board = self._redo.pop()
        self._undo.append(board)
        return board.copy()

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def current(self) -> Board | None:
        return self._undo[-1].copy() if self._undo else None

    @property
    def undo_budget(self) -> int:
        return self._budget

    @property
    def can_undo(self) -> bool:
        return len(self._undo) > 1 and self._budget > 0

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        """Entries on the undo stack, including the initial board."""
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def __repr__(self) -> str:
        return (
            f"History(undo={len(self._undo)}, redo={len(self._redo)}, "
            f"budget={self._budget})"
        )
