"""Solitaire rules: jump legality, jump execution, win/loss detection."""

from __future__ import annotations

from marble_solitaire.core.board import Board
from marble_solitaire.core.enums import CellState, GameOutcome
from marble_solitaire.core.move import Move
from marble_solitaire.core.types import JUMP_OFFSETS, Position


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_legal_move(board: Board, source: Position, dest: Position) -> bool:
        """Whether jumping from *source* to *dest* is allowed.

        Both ends on the board, an orthogonal two-cell jump, a marble on
        the source and the jumped cell, and an empty destination.
        """
        size = board.size
        if not (source.is_within(size) and dest.is_within(size)):
            return False
        if not Move(source, dest).is_jump_shape:
            return False
        if board[source] != CellState.MARBLE or board[dest] != CellState.EMPTY:
            return False
        return board[source.midpoint(dest)] == CellState.MARBLE

    @staticmethod
    def legal_moves_from(board: Board, source: Position) -> list[Move]:
        return [
            Move(source, dest)
            for dest in (source.offset(dr, dc) for dr, dc in JUMP_OFFSETS)
            if Rules.is_legal_move(board, source, dest)
        ]

    @staticmethod
    def has_legal_move(board: Board) -> bool:
        """Whether any marble on the board can jump."""
        return any(Rules.legal_moves_from(board, pos) for pos in board.marbles())

    @staticmethod
    def apply_move(board: Board, move: Move) -> bool:
        """Execute *move* in place. Illegal moves leave *board* untouched.

        Returns True if the move was applied.
        """
        if not Rules.is_legal_move(board, move.source, move.dest):
            return False
        board[move.source] = CellState.EMPTY
        board[move.midpoint] = CellState.EMPTY
        board[move.dest] = CellState.MARBLE
        return True

    @staticmethod
    def is_win(board: Board, center_win: bool = False) -> bool:
        if board.marble_count() != 1:
            return False
        return not center_win or board.get(board.center) == CellState.MARBLE

    @staticmethod
    def evaluate(board: Board, center_win: bool = False) -> GameOutcome:
        """Determine the outcome of *board*.

        The win check runs first: a single remaining marble is never
        scanned for further jumps.
        """
        if Rules.is_win(board, center_win):
            return GameOutcome.WON
        if Rules.has_legal_move(board):
            return GameOutcome.IN_PROGRESS
        return GameOutcome.LOST
