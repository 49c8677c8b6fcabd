"""Board coordinates and direction helpers.

Layout (row-major, row 0 at the top):
    (0, 0) (0, 1) ... (0, N-1)
    (1, 0) (1, 1) ... (1, N-1)
    ...
    (N-1, 0)      ... (N-1, N-1)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable (row, col) pair, 0-indexed.

    Any pair of ints is representable; whether it lies on a board is
    answered by :meth:`is_within`.
    """

    row: int
    col: int

    def is_within(self, size: int) -> bool:
        """Whether both coordinates lie in ``[0, size)``."""
        return 0 <= self.row < size and 0 <= self.col < size

    def offset(self, d_row: int, d_col: int) -> Position:
        return Position(self.row + d_row, self.col + d_col)

    def midpoint(self, other: Position) -> Position:
        """Cell halfway to *other* (integer division, as for a jump)."""
        return Position((self.row + other.row) // 2, (self.col + other.col) // 2)

    def __iter__(self) -> Iterator[int]:
        yield self.row
        yield self.col

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


# Two-step orthogonal jumps: up, down, left, right.
JUMP_OFFSETS: tuple[tuple[int, int], ...] = ((-2, 0), (2, 0), (0, -2), (0, 2))


def center_of(size: int) -> Position:
    """Center cell of a *size* x *size* board (integer division)."""
    return Position(size // 2, size // 2)


def iter_positions(size: int) -> Iterator[Position]:
    """Yield every position of a *size* x *size* board in row-major order."""
    for row in range(size):
        for col in range(size):
            yield Position(row, col)
