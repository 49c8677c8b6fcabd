"""Tests for Board."""

import pytest

from marble_solitaire.core.board import Board
from marble_solitaire.core.enums import CellState
from marble_solitaire.core.layout import generate_initial_board
from marble_solitaire.core.types import Position


class TestBoardConstruction:
    def test_blank_board_is_all_invalid(self) -> None:
        board = Board(3)
        assert all(board[pos] == CellState.INVALID for pos in board.positions())

    def test_rejects_non_positive_size(self) -> None:
        with pytest.raises(ValueError):
            Board(0)

    def test_rejects_wrong_cell_count(self) -> None:
        with pytest.raises(ValueError):
            Board(3, [CellState.EMPTY] * 8)


class TestBoardAccess:
    def test_center(self) -> None:
        assert generate_initial_board(7).center == Position(3, 3)

    def test_off_board_index_raises(self) -> None:
        board = generate_initial_board(7)
        with pytest.raises(IndexError):
            board[Position(7, 0)]

    def test_get_off_board_is_invalid(self) -> None:
        board = generate_initial_board(7)
        assert board.get(Position(-1, 3)) == CellState.INVALID
        assert board.get(Position(3, 3)) == CellState.EMPTY

    def test_toggle_playable_cell(self) -> None:
        board = generate_initial_board(7)
        board[Position(3, 3)] = CellState.MARBLE
        assert board[Position(3, 3)] == CellState.MARBLE

    def test_layout_is_fixed(self) -> None:
        board = generate_initial_board(7)
        with pytest.raises(ValueError):
            board[Position(0, 0)] = CellState.MARBLE
        with pytest.raises(ValueError):
            board[Position(3, 3)] = CellState.INVALID

    def test_marbles_row_major(self) -> None:
        board = generate_initial_board(7)
        marbles = board.marbles()
        assert marbles[0] == Position(0, 2)
        assert marbles[-1] == Position(6, 4)
        assert Position(3, 3) not in marbles


class TestBoardCopy:
    def test_copy_is_equal(self) -> None:
        board = generate_initial_board(7)
        assert board.copy() == board

    def test_copy_is_independent(self) -> None:
        board = generate_initial_board(7)
        clone = board.copy()
        clone[Position(3, 3)] = CellState.MARBLE
        assert board[Position(3, 3)] == CellState.EMPTY
        assert clone != board

    def test_same_layout(self) -> None:
        board = generate_initial_board(7)
        clone = board.copy()
        clone[Position(2, 3)] = CellState.EMPTY
        assert board.same_layout(clone)
        assert not board.same_layout(generate_initial_board(9))

    def test_not_equal_to_other_types(self) -> None:
        assert generate_initial_board(7) != "board"
