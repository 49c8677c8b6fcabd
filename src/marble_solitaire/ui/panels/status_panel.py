"""StatusPanel — elapsed time, marble count and remaining undos."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QSizePolicy, QVBoxLayout, QWidget


def format_elapsed(seconds: float) -> str:
    """One decimal, e.g. 12.34 -> '12.3'."""
    return f"{max(0.0, seconds):.1f}"


class _Counter(QLabel):
    """Large single-value readout."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setFont(QFont("Helvetica Neue", 20, QFont.Weight.Bold))
        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Fixed)
        self.set_warning(False)

    def set_warning(self, warning: bool) -> None:
        if warning:
            self.setStyleSheet(
                "background-color: #8b2020; color: white; "
                "padding: 6px 12px; border-radius: 4px;"
            )
            return
        self.setStyleSheet(
            "background-color: #2b2b2b; color: #e0e0e0; "
            "padding: 6px 12px; border-radius: 4px;"
        )


class StatusPanel(QWidget):
    """Live readouts for the running game."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        self._time = _Counter()
        self._marbles = _Counter()
        self._undos = _Counter()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)
        for title, counter in (
            ("Time", self._time),
            ("Marbles", self._marbles),
            ("Undos remaining", self._undos),
        ):
            label = QLabel(title)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.setFont(QFont("Helvetica Neue", 9))
            layout.addWidget(label)
            layout.addWidget(counter)

        self._instructions = QLabel(
            "Click a marble to select it, then click a valid destination.\n"
            "Press Z to undo, Y to redo."
        )
        self._instructions.setWordWrap(True)
        self._instructions.setFont(QFont("Helvetica Neue", 9))
        layout.addWidget(self._instructions)
        layout.addStretch()

        self._timer = QTimer(self)
        self._timer.setInterval(100)
        self._timer.timeout.connect(self._tick)
        self._get_elapsed: Callable[[], float] | None = None

        self.update_time(0.0)
        self.set_marbles(0)
        self.set_undos(0)

    def start(self, get_elapsed: Callable[[], float]) -> None:
        """Start polling. *get_elapsed* returns seconds played."""
        self._get_elapsed = get_elapsed
        self._tick()
        self._timer.start()

    def stop(self) -> None:
        """Stop polling, leaving the last reading on screen."""
        self._tick()
        self._timer.stop()

    def is_running(self) -> bool:
        return self._timer.isActive()

    def update_time(self, seconds: float) -> None:
        self._time.setText(format_elapsed(seconds))

    def set_marbles(self, count: int) -> None:
        self._marbles.setText(str(count))

    def set_undos(self, remaining: int) -> None:
        self._undos.setText(str(remaining))
        self._undos.set_warning(remaining == 0)

    def time_text(self) -> str:
        return self._time.text()

    def marbles_text(self) -> str:
        return self._marbles.text()

    def undos_text(self) -> str:
        return self._undos.text()

    def _tick(self) -> None:
        if self._get_elapsed:
            self.update_time(self._get_elapsed())
