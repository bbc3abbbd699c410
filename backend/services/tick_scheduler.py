"""
Owner of the game's single repeating tick timer.

Wraps a private `schedule.Scheduler` so that at most one tick job is ever
registered. start, reschedule and stop all cancel the current job first.
"""

import logging
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)


class TickScheduler:
    """Repeating timer with a mutable interval (milliseconds)."""

    def __init__(self, scheduler: Optional[schedule.Scheduler] = None):
        self._scheduler = scheduler or schedule.Scheduler()
        self._job: Optional[schedule.Job] = None
        self._callback: Optional[Callable[[], None]] = None
        self.interval_ms: Optional[int] = None

    @property
    def is_running(self) -> bool:
        return self._job is not None

    def start(self, interval_ms: int, callback: Callable[[], None]):
        """Install `callback` to run every `interval_ms`, replacing any current job."""
        self.stop()
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")

        self._callback = callback
        self.interval_ms = interval_ms
        self._job = self._scheduler.every(interval_ms / 1000.0).seconds.do(callback)
        logger.debug(f"Tick timer installed at {interval_ms}ms")

    def reschedule(self, interval_ms: int):
        """Reinstall the current callback at a new interval."""
        if self._callback is None:
            raise ValueError("Cannot reschedule a timer that was never started")
        self.start(interval_ms, self._callback)

    def stop(self):
        if self._job is not None:
            self._scheduler.cancel_job(self._job)
            logger.debug("Tick timer cancelled")
        self._job = None

    def run_pending(self):
        self._scheduler.run_pending()

    def seconds_until_next_tick(self) -> Optional[float]:
        if self._job is None:
            return None
        return self._scheduler.idle_seconds
