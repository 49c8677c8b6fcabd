"""Board - cell contents on an N x N grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from marble_solitaire.core.enums import CellState
from marble_solitaire.core.types import Position, center_of, iter_positions


class Board:
    """Mutable square grid of :class:`CellState` values.

    The playable layout (which cells are ``INVALID``) is fixed at
    construction; only ``EMPTY`` / ``MARBLE`` toggle afterwards.
    """

    __slots__ = ("_size", "_cells")

    def __init__(self, size: int, cells: Iterable[CellState] | None = None) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self._size = size
        if cells is None:
            self._cells: list[CellState] = [CellState.INVALID] * (size * size)
        else:
            self._cells = [CellState(c) for c in cells]
            if len(self._cells) != size * size:
                raise ValueError(
                    f"Expected {size * size} cells for a {size}x{size} board, "
                    f"got {len(self._cells)}"
                )

    def _index(self, pos: Position) -> int:
        if not pos.is_within(self._size):
            raise IndexError(f"Position {pos} is off a {self._size}x{self._size} board")
        return pos.row * self._size + pos.col

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> CellState:
        return self._cells[self._index(pos)]

    def __setitem__(self, pos: Position, state: CellState) -> None:
        idx = self._index(pos)
        old = self._cells[idx]
        if old.is_playable != state.is_playable:
            raise ValueError(
                f"Cannot change layout at {pos}: {old.name} -> {state.name}"
            )
        self._cells[idx] = state

    def get(self, pos: Position) -> CellState:
        """Cell state, or ``INVALID`` for positions off the board."""
        if not pos.is_within(self._size):
            return CellState.INVALID
        return self._cells[pos.row * self._size + pos.col]

    # -- Query helpers ------------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def center(self) -> Position:
        return center_of(self._size)

    def positions(self) -> Iterator[Position]:
        """All positions, row-major."""
        return iter_positions(self._size)

    def cells_with(self, state: CellState) -> list[Position]:
        """Positions whose cell equals *state*."""
        return [pos for pos in self.positions() if self[pos] == state]

    def marbles(self) -> list[Position]:
        return self.cells_with(CellState.MARBLE)

    def marble_count(self) -> int:
        return self._cells.count(CellState.MARBLE)

    def playable_count(self) -> int:
        """Number of ``MARBLE`` + ``EMPTY`` cells."""
        return len(self._cells) - self._cells.count(CellState.INVALID)

    def same_layout(self, other: Board) -> bool:
        """Whether *other* has the same set of playable cells."""
        return self._size == other._size and all(
            a.is_playable == b.is_playable for a, b in zip(self._cells, other._cells)
        )

    def rows(self) -> list[list[CellState]]:
        """Row-major copy of the grid, for rendering."""
        n = self._size
        return [self._cells[r * n : (r + 1) * n] for r in range(n)]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._size = self._size
        b._cells = self._cells.copy()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from marble_solitaire.core.notation import board_to_text

        return board_to_text(self)
