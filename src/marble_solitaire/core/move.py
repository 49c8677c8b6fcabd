"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from marble_solitaire.core.types import Position


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single jump."""

    source: Position
    dest: Position

    @classmethod
    def of(cls, src_row: int, src_col: int, dst_row: int, dst_col: int) -> Move:
        return cls(Position(src_row, src_col), Position(dst_row, dst_col))

    @property
    def midpoint(self) -> Position:
        """The cell jumped over."""
        return self.source.midpoint(self.dest)

    @property
    def delta(self) -> tuple[int, int]:
        return self.dest.row - self.source.row, self.dest.col - self.source.col

    @property
    def is_jump_shape(self) -> bool:
        """Orthogonal displacement of exactly two cells."""
        d_row, d_col = self.delta
        return (abs(d_row) == 2 and d_col == 0) or (abs(d_col) == 2 and d_row == 0)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        from marble_solitaire.core.notation import cell_name

        return f"{cell_name(self.source)}-{cell_name(self.dest)}"
