"""Stopwatch measuring elapsed play time."""

from __future__ import annotations

import time

from marble_solitaire.game.interfaces import IStopwatch


class Stopwatch(IStopwatch):
    """Counts up from zero while running.

    Uses monotonic time for accuracy. Stopping freezes the reading, which
    is how the final time of a finished game is kept on screen.
    """

    __slots__ = ("_accumulated", "_last_tick", "_running")

    def __init__(self) -> None:
        self._accumulated: float = 0.0
        self._last_tick: float = 0.0
        self._running: bool = False

    # ── IStopwatch implementation ────────────────────────────────────────

    def start(self) -> None:
        if self._running:
            return
        self._last_tick = time.monotonic()
        self._running = True

    def stop(self) -> None:
        if self._running:
            self._consume_elapsed()
            self._running = False

    def reset(self) -> None:
        self._accumulated = 0.0
        self._running = False

    @property
    def elapsed(self) -> float:
        if self._running:
            return self._accumulated + (time.monotonic() - self._last_tick)
        return self._accumulated

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def is_running(self) -> bool:
        return self._running

    def restart(self) -> None:
        """Zero the reading and start counting again."""
        self.reset()
        self.start()

    # ── Internal ─────────────────────────────────────────────────────────

    def _consume_elapsed(self) -> None:
        now = time.monotonic()
        self._accumulated += now - self._last_tick
        self._last_tick = now
