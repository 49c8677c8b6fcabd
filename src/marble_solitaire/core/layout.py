"""Initial board layout: square grid with a cross-shaped playable area.

The four corner blocks are cut out. Their extent depends on ``size % 3``;
for the default size 7 this yields the classic 33-hole English board.
"""

from __future__ import annotations

from marble_solitaire.core.board import Board
from marble_solitaire.core.enums import CellState
from marble_solitaire.core.types import center_of

DEFAULT_BOARD_SIZE = 7


def _is_outer(x: int, size: int) -> bool:
    """Whether row/column index *x* lies in an outer band."""
    rem = size % 3
    if rem == 0:
        return x < size // 3 or x > 2 * size // 3 - 1
    if rem == 1:
        return x < (size - 1) // 3 or x > 2 * (size - 1) // 3
    return x < (size - 2) // 3 + 1 or x > 2 * (size - 2) // 3


def is_excluded(row: int, col: int, size: int) -> bool:
    """Whether cell (*row*, *col*) falls in a cut-out corner."""
    return _is_outer(row, size) and _is_outer(col, size)


def generate_initial_board(size: int = DEFAULT_BOARD_SIZE) -> Board:
    """Fresh board: every playable cell holds a marble except the center.

    The center is forced ``EMPTY`` even when the cut-out rule would
    exclude it (only possible for tiny boards).
    """
    cells = [
        CellState.INVALID if is_excluded(r, c, size) else CellState.MARBLE
        for r in range(size)
        for c in range(size)
    ]
    center = center_of(size)
    cells[center.row * size + center.col] = CellState.EMPTY
    return Board(size, cells)
