"""Core domain layer — pure solitaire logic with zero external dependencies.

Quick start::

    from marble_solitaire.core import Move, Rules, generate_initial_board

    board = generate_initial_board(7)
    Rules.apply_move(board, Move.of(1, 3, 3, 3))
    print(board)
"""

from marble_solitaire.core.board import Board
from marble_solitaire.core.enums import CellState, GameOutcome
from marble_solitaire.core.layout import (
    DEFAULT_BOARD_SIZE,
    generate_initial_board,
    is_excluded,
)
from marble_solitaire.core.move import Move
from marble_solitaire.core.notation import (
    board_from_text,
    board_to_text,
    cell_name,
)
from marble_solitaire.core.rules import Rules
from marble_solitaire.core.types import (
    JUMP_OFFSETS,
    Position,
    center_of,
    iter_positions,
)

__all__ = [
    # Enums
    "CellState",
    "GameOutcome",
    # Types / helpers
    "JUMP_OFFSETS",
    "Position",
    "center_of",
    "iter_positions",
    # Domain objects
    "Board",
    "Move",
    "Rules",
    # Layout
    "DEFAULT_BOARD_SIZE",
    "generate_initial_board",
    "is_excluded",
    # Notation
    "board_from_text",
    "board_to_text",
    "cell_name",
]
