"""Text notation for cells and boards.

Cells are named by column letter and 1-based row counted from the top,
so on the default board the center is ``d4``.

Boards are written one row per line, cells separated by single spaces::

    # # o o o # #
    # # o o o # #
    o o o o o o o
    o o o . o o o
    o o o o o o o
    # # o o o # #
    # # o o o # #
"""

from __future__ import annotations

from marble_solitaire.core.board import Board
from marble_solitaire.core.enums import CellState
from marble_solitaire.core.types import Position

_CELL_CHARS: dict[CellState, str] = {
    CellState.INVALID: "#",
    CellState.EMPTY: ".",
    CellState.MARBLE: "o",
}
_CHAR_CELLS: dict[str, CellState] = {ch: state for state, ch in _CELL_CHARS.items()}

_COLUMN_LETTERS = "abcdefghijklmnopqrstuvwxyz"


def cell_name(pos: Position) -> str:
    """Human-readable name, e.g. Position(3, 3) -> 'd4'."""
    if 0 <= pos.col < len(_COLUMN_LETTERS) and pos.row >= 0:
        return f"{_COLUMN_LETTERS[pos.col]}{pos.row + 1}"
    return str(pos)


def board_to_text(board: Board) -> str:
    return "\n".join(
        " ".join(_CELL_CHARS[cell] for cell in row) for row in board.rows()
    )


def board_from_text(text: str) -> Board:
    """Parse the text form produced by :func:`board_to_text`.

    Blank lines and surrounding whitespace are ignored. Whitespace between
    cells is optional, so ``"#o."`` and ``"# o ."`` are equivalent.
    """
    lines = [line.split() for line in text.strip().splitlines() if line.strip()]
    rows = [list("".join(tokens)) for tokens in lines]
    if not rows:
        raise ValueError("Board text is empty")

    size = len(rows)
    cells: list[CellState] = []
    for idx, row in enumerate(rows):
        if len(row) != size:
            raise ValueError(
                f"Row {idx + 1} has {len(row)} cells, expected {size} (board must be square)"
            )
        for ch in row:
            state = _CHAR_CELLS.get(ch)
            if state is None:
                raise ValueError(f"Unknown cell character {ch!r} in row {idx + 1}")
            cells.append(state)
    return Board(size, cells)
