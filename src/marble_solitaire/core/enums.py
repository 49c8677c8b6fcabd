"""Core enumerations for the solitaire domain."""

from __future__ import annotations

from enum import IntEnum


class CellState(IntEnum):
    """Contents of a single board cell."""

    INVALID = 0  # not part of the playable board
    EMPTY = 1
    MARBLE = 2

    @property
    def is_playable(self) -> bool:
        return self != CellState.INVALID


class GameOutcome(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WON = 1
    LOST = 2

    @property
    def is_terminal(self) -> bool:
        return self != GameOutcome.IN_PROGRESS
