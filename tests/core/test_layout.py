"""Tests for initial board layout generation."""

import pytest

from marble_solitaire.core.enums import CellState
from marble_solitaire.core.layout import generate_initial_board, is_excluded
from marble_solitaire.core.types import Position


class TestDefaultLayout:
    def test_playable_count(self) -> None:
        board = generate_initial_board(7)
        assert board.playable_count() == 33

    def test_single_empty_center(self) -> None:
        board = generate_initial_board(7)
        assert board.cells_with(CellState.EMPTY) == [Position(3, 3)]

    def test_all_others_marbles(self) -> None:
        board = generate_initial_board(7)
        assert board.marble_count() == 32

    def test_default_size_is_seven(self) -> None:
        assert generate_initial_board().size == 7

    def test_corners_cut(self) -> None:
        board = generate_initial_board(7)
        for pos in (Position(0, 0), Position(1, 1), Position(0, 6), Position(6, 0), Position(5, 5)):
            assert board[pos] == CellState.INVALID, f"{pos} should be off-board"

    def test_cross_arms_playable(self) -> None:
        board = generate_initial_board(7)
        for pos in (Position(0, 2), Position(0, 4), Position(2, 0), Position(4, 6), Position(6, 3)):
            assert board[pos] == CellState.MARBLE

    def test_layout_is_symmetric(self) -> None:
        board = generate_initial_board(7)
        for pos in board.positions():
            mirrored = Position(pos.col, pos.row)
            assert board[pos].is_playable == board[mirrored].is_playable


class TestExclusionRule:
    @pytest.mark.parametrize(
        ("row", "col", "expected"),
        [
            (0, 0, True),
            (1, 1, True),
            (0, 2, False),
            (2, 0, False),
            (4, 5, False),
            (5, 5, True),
            (3, 3, False),
        ],
    )
    def test_size_seven(self, row: int, col: int, expected: bool) -> None:
        assert is_excluded(row, col, 7) is expected

    @pytest.mark.parametrize(
        ("size", "playable"),
        [
            (9, 45),  # size % 3 == 0: outer bands of width 3
            (6, 20),  # size % 3 == 0: outer bands of width 2
            (8, 28),  # size % 3 == 2: two-wide arms
            (5, 9),  # size % 3 == 2: plus shape
            (10, 64),  # size % 3 == 1
        ],
    )
    def test_other_sizes(self, size: int, playable: int) -> None:
        board = generate_initial_board(size)
        assert board.playable_count() == playable
        assert board.marble_count() == playable - 1

    def test_even_size_center_uses_integer_division(self) -> None:
        board = generate_initial_board(8)
        assert board[Position(4, 4)] == CellState.EMPTY

    def test_center_forced_empty_on_tiny_board(self) -> None:
        board = generate_initial_board(2)
        assert board[Position(1, 1)] == CellState.EMPTY
        assert board.playable_count() == 1
        assert board.marble_count() == 0
