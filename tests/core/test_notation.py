"""Tests for cell names and the text board format."""

import pytest

from marble_solitaire.core.enums import CellState
from marble_solitaire.core.layout import generate_initial_board
from marble_solitaire.core.move import Move
from marble_solitaire.core.notation import (
    board_from_text,
    board_to_text,
    cell_name,
)
from marble_solitaire.core.types import Position

_ENGLISH = """\
# # o o o # #
# # o o o # #
o o o o o o o
o o o . o o o
o o o o o o o
# # o o o # #
# # o o o # #"""


class TestCellNames:
    def test_center_name(self) -> None:
        assert cell_name(Position(3, 3)) == "d4"

    def test_corner_name(self) -> None:
        assert cell_name(Position(0, 0)) == "a1"

    def test_move_str(self) -> None:
        assert str(Move.of(1, 3, 3, 3)) == "d2-d4"


class TestBoardText:
    def test_default_board_text(self) -> None:
        assert board_to_text(generate_initial_board(7)) == _ENGLISH

    def test_repr_uses_text(self) -> None:
        assert repr(generate_initial_board(7)) == _ENGLISH

    def test_parse_default_board(self) -> None:
        assert board_from_text(_ENGLISH) == generate_initial_board(7)

    def test_parse_without_spaces(self) -> None:
        board = board_from_text("#o.\n...\n.o#")
        assert board.size == 3
        assert board[Position(0, 1)] == CellState.MARBLE
        assert board[Position(2, 2)] == CellState.INVALID

    def test_parse_ignores_indentation_and_blank_lines(self) -> None:
        board = board_from_text(
            """

            o .
            . o

            """
        )
        assert board.marble_count() == 2

    def test_non_square_rejected(self) -> None:
        with pytest.raises(ValueError):
            board_from_text("o o o\no o")

    def test_unknown_character_rejected(self) -> None:
        with pytest.raises(ValueError):
            board_from_text("o x\no o")

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            board_from_text("   \n  ")
