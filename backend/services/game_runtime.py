"""
Single-owner event loop for a running game.

The runtime thread is the only code that touches the game state. Other
threads (HTTP handlers) submit commands through a queue and read the
snapshot and frame the loop publishes after each change.
"""

import logging
import queue
import threading
import time
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

LOOP_SLEEP_SECONDS = 0.005
COMMANDS = {"start", "restart", "input"}


class GameRuntime:
    """
    Drives a SnakeGame: applies queued commands, fires due ticks, and
    publishes what readers need.
    """

    def __init__(self, game, loop_sleep_seconds: float = LOOP_SLEEP_SECONDS):
        self.game = game
        self.loop_sleep_seconds = loop_sleep_seconds
        self._commands: "queue.Queue[Tuple[str, tuple]]" = queue.Queue()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        self._snapshot: Dict[str, Any] = {}
        self._frame: bytes = b""
        # Show the idle board before the first tick
        game.renderer.render_frame(game.state.snake.positions, game.state.food)
        self.publish()

    def submit(self, command: str, *args):
        """Queue a command for the loop thread ('start', 'restart' or 'input', key)."""
        if command not in COMMANDS:
            raise ValueError(f"Unknown command: {command}")
        self._commands.put((command, args))

    def process_commands(self) -> int:
        """Apply every queued command; returns how many were applied."""
        handlers = {
            "start": self.game.start,
            "restart": self.game.restart,
            "input": self.game.on_input,
        }
        processed = 0
        while True:
            try:
                command, args = self._commands.get_nowait()
            except queue.Empty:
                return processed

            try:
                handlers[command](*args)
            except Exception:
                logger.exception(f"Command {command}{args} failed")
            processed += 1

    def run_once(self):
        ticks_before = self.game.ticks
        phase_before = self.game.phase

        processed = self.process_commands()
        self.game.scheduler.run_pending()

        if processed or self.game.ticks != ticks_before or self.game.phase != phase_before:
            self.publish()

    def publish(self):
        snapshot = self.game.snapshot()
        frame = self.game.frame_png()
        with self._lock:
            self._snapshot = snapshot
            self._frame = frame

    def latest_snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self._snapshot)

    def latest_frame(self) -> bytes:
        with self._lock:
            return self._frame

    def run(self):
        """Loop until stop() is called."""
        logger.info("Game loop started")
        while not self._stop_event.is_set():
            try:
                self.run_once()
            except Exception:
                logger.exception("Game loop iteration failed")
            time.sleep(self.loop_sleep_seconds)
        self.game.scheduler.stop()
        logger.info("Game loop stopped")

    def start_background(self) -> threading.Thread:
        if self._thread is not None and self._thread.is_alive():
            return self._thread
        self._stop_event.clear()
        self._thread = threading.Thread(target=self.run, name="game-loop", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self, timeout: float = 1.0):
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
