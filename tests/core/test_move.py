"""Tests for Move and Position value objects."""

from marble_solitaire.core.move import Move
from marble_solitaire.core.types import Position, center_of


class TestPosition:
    def test_is_within(self) -> None:
        assert Position(0, 6).is_within(7)
        assert not Position(7, 0).is_within(7)
        assert not Position(0, -1).is_within(7)

    def test_unpacks_as_row_col(self) -> None:
        row, col = Position(2, 5)
        assert (row, col) == (2, 5)

    def test_hashable(self) -> None:
        assert len({Position(1, 1), Position(1, 1), Position(1, 2)}) == 2

    def test_center_of(self) -> None:
        assert center_of(7) == Position(3, 3)
        assert center_of(8) == Position(4, 4)


class TestMove:
    def test_midpoint(self) -> None:
        assert Move.of(1, 3, 3, 3).midpoint == Position(2, 3)
        assert Move.of(3, 5, 3, 3).midpoint == Position(3, 4)

    def test_jump_shape(self) -> None:
        assert Move.of(1, 3, 3, 3).is_jump_shape
        assert Move.of(3, 3, 3, 1).is_jump_shape
        assert not Move.of(3, 3, 3, 4).is_jump_shape
        assert not Move.of(0, 3, 3, 3).is_jump_shape
        assert not Move.of(1, 1, 3, 3).is_jump_shape
        assert not Move.of(3, 3, 3, 3).is_jump_shape

    def test_equality(self) -> None:
        assert Move.of(1, 3, 3, 3) == Move(Position(1, 3), Position(3, 3))
