"""
Tests for the tick timer owner.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.tick_scheduler import TickScheduler  # noqa: E402


def jobs(ticker):
    return list(ticker._scheduler.jobs)


class TestTickScheduler:
    """Tests for TickScheduler."""

    def test_start_installs_one_job(self):
        ticker = TickScheduler()
        ticker.start(100, lambda: None)

        assert ticker.is_running
        assert len(jobs(ticker)) == 1
        assert jobs(ticker)[0].interval == pytest.approx(0.1)
        assert jobs(ticker)[0].unit == "seconds"

    def test_starting_again_replaces_the_job(self):
        ticker = TickScheduler()
        ticker.start(100, lambda: None)
        ticker.start(100, lambda: None)

        assert len(jobs(ticker)) == 1

    def test_reschedule_keeps_a_single_job(self):
        ticker = TickScheduler()
        ticker.start(100, lambda: None)
        ticker.reschedule(95)

        assert len(jobs(ticker)) == 1
        assert jobs(ticker)[0].interval == pytest.approx(0.095)
        assert ticker.interval_ms == 95

    def test_stop_cancels(self):
        ticker = TickScheduler()
        ticker.start(100, lambda: None)
        ticker.stop()

        assert not ticker.is_running
        assert jobs(ticker) == []
        assert ticker.seconds_until_next_tick() is None

    def test_invalid_use_raises(self):
        ticker = TickScheduler()
        with pytest.raises(ValueError):
            ticker.reschedule(50)
        with pytest.raises(ValueError):
            ticker.start(0, lambda: None)

    def test_callback_runs_when_due(self):
        calls = []
        ticker = TickScheduler()
        ticker.start(100, lambda: calls.append(1))

        ticker.run_pending()
        assert calls == []

        ticker._scheduler.run_all()
        assert calls == [1]

    def test_callback_may_reschedule_itself(self):
        """Rescheduling from inside a tick leaves exactly one job behind."""
        ticker = TickScheduler()

        def on_tick():
            ticker.reschedule(50)

        ticker.start(100, on_tick)
        ticker._scheduler.run_all()

        assert len(jobs(ticker)) == 1
        assert jobs(ticker)[0].interval == pytest.approx(0.05)

    def test_next_tick_is_one_interval_away(self):
        ticker = TickScheduler()
        ticker.start(100, lambda: None)

        assert ticker.seconds_until_next_tick() <= 0.1
