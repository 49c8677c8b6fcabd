"""Tests for Stopwatch."""

import pytest

from marble_solitaire.game import clock as clock_module
from marble_solitaire.game.clock import Stopwatch


class _FakeTime:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def fake_time(monkeypatch: pytest.MonkeyPatch) -> _FakeTime:
    fake = _FakeTime()
    monkeypatch.setattr(clock_module.time, "monotonic", fake)
    return fake


class TestStopwatchBasics:
    def test_initial_reading(self) -> None:
        sw = Stopwatch()
        assert sw.elapsed == 0.0
        assert not sw.is_running

    def test_counts_while_running(self, fake_time: _FakeTime) -> None:
        sw = Stopwatch()
        sw.start()
        fake_time.now += 2.5
        assert sw.is_running
        assert sw.elapsed == pytest.approx(2.5)

    def test_stop_freezes(self, fake_time: _FakeTime) -> None:
        sw = Stopwatch()
        sw.start()
        fake_time.now += 1.0
        sw.stop()
        fake_time.now += 10.0
        assert sw.elapsed == pytest.approx(1.0)

    def test_resume_accumulates(self, fake_time: _FakeTime) -> None:
        sw = Stopwatch()
        sw.start()
        fake_time.now += 1.0
        sw.stop()
        fake_time.now += 5.0
        sw.start()
        fake_time.now += 2.0
        assert sw.elapsed == pytest.approx(3.0)

    def test_double_start_keeps_origin(self, fake_time: _FakeTime) -> None:
        sw = Stopwatch()
        sw.start()
        fake_time.now += 1.0
        sw.start()
        fake_time.now += 1.0
        assert sw.elapsed == pytest.approx(2.0)


class TestStopwatchReset:
    def test_reset_zeroes_and_stops(self, fake_time: _FakeTime) -> None:
        sw = Stopwatch()
        sw.start()
        fake_time.now += 4.0
        sw.reset()
        assert sw.elapsed == 0.0
        assert not sw.is_running

    def test_restart(self, fake_time: _FakeTime) -> None:
        sw = Stopwatch()
        sw.start()
        fake_time.now += 4.0
        sw.restart()
        fake_time.now += 0.5
        assert sw.is_running
        assert sw.elapsed == pytest.approx(0.5)
