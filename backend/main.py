import os
import json
import random
import logging
import argparse
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from domain.constants import IDLE, RUNNING, GAME_OVER, SPEED_MAX
from domain.collision import GameOver, check_collision
from domain.food import place_food
from domain.game_state import GameState, new_game_state, score_label
from domain.input_buffer import InputBuffer
from domain.snake import tick
from domain.speed import next_interval
from services.host_notifier import HostNotifier
from services.renderer import CanvasRenderer
from services.tick_scheduler import TickScheduler

load_dotenv()

logger = logging.getLogger(__name__)


def env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class SnakeGame:
    """
    Manages:
      - The GameState (snake, direction, score, speed, move queue, food)
      - The single tick timer
      - Rendering and the score display
      - Notifications to the hosting page
      - Idle -> Running -> GameOver transitions, and restart
    """
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        renderer: Optional[CanvasRenderer] = None,
        notifier: Optional[HostNotifier] = None,
        scheduler: Optional[TickScheduler] = None,
        u_turn_sequencing: Optional[bool] = None,
    ):
        self.rng = rng or random.Random()
        self.renderer = renderer or CanvasRenderer()
        self.notifier = notifier or HostNotifier()
        self.scheduler = scheduler or TickScheduler()

        if u_turn_sequencing is None:
            u_turn_sequencing = env_flag('U_TURN_SEQUENCING_ENABLED')
        self.input_buffer = InputBuffer(u_turn_sequencing=u_turn_sequencing)

        self.state: GameState = new_game_state(self.rng)
        self.score_text = score_label(0)
        self.start_prompt_visible = True
        self.game_over_prompt_visible = False
        self.result: Optional[GameOver] = None
        self.ticks = 0
        self._in_tick = False

        self.notifier.notify_ready()

    @property
    def phase(self) -> str:
        return self.state.phase

    def start(self) -> bool:
        """Leave the start prompt and begin ticking at SPEED_MAX."""
        if self.state.phase != IDLE:
            logger.warning(f"Ignoring start request while {self.state.phase}")
            return False

        self.state.score = 0
        self.state.speed = SPEED_MAX
        self.state.phase = RUNNING
        self.notifier.notify_start()
        self.start_prompt_visible = False
        self.scheduler.start(self.state.speed, self.update)
        logger.info(f"Game started at {self.state.speed}ms per tick")
        return True

    def restart(self):
        """Throw away the current game and start a fresh one."""
        self.scheduler.stop()

        self.state = new_game_state(self.rng)
        self.state.phase = RUNNING
        self.input_buffer.reset()
        self.score_text = score_label(0)
        self.result = None
        self.ticks = 0
        self.start_prompt_visible = False
        self.game_over_prompt_visible = False

        self.scheduler.start(self.state.speed, self.update)
        self.notifier.notify_start()
        logger.info("Game restarted")

    def on_input(self, key: str) -> str:
        """Raw keyboard key or on-screen button press."""
        return self.input_buffer.on_input(self.state, key)

    def update(self):
        """
        One tick: clear, draw food, move the snake, draw it, then check
        for collisions. Re-entrant calls and ticks outside RUNNING are ignored.
        """
        if self._in_tick or self.state.phase != RUNNING:
            return

        self._in_tick = True
        try:
            self.renderer.clear()
            self.renderer.draw_food(self.state.food)

            move = tick(self.state)
            self.ticks += 1
            # Chords only count within a single tick
            self.input_buffer.reset()
            if move.ate_food:
                self._on_food_eaten()

            self.renderer.draw_snake(self.state.snake.positions)

            result = check_collision(self.state)
            if result is not None:
                self.game_over(result)
        finally:
            self._in_tick = False

    def _on_food_eaten(self):
        self.score_text = score_label(self.state.score)
        self.state.food = place_food(self.state.snake.cells, self.rng)

        previous = self.state.speed
        self.state.speed = next_interval(self.state.score, previous)
        if self.state.speed != previous:
            logger.debug(f"Speed {previous}ms -> {self.state.speed}ms at score {self.state.score}")
        self.scheduler.reschedule(self.state.speed)

    def game_over(self, result: GameOver):
        self.scheduler.stop()
        self.state.phase = GAME_OVER
        self.result = result
        self.game_over_prompt_visible = True
        self.notifier.notify_score(result.score)
        logger.info(f"Game Over: hit {result.reason} after {self.ticks} ticks, score {result.score}")

    def snapshot(self) -> Dict[str, Any]:
        data = self.state.snapshot()
        data.update({
            "score_text": self.score_text,
            "ticks": self.ticks,
            "start_prompt_visible": self.start_prompt_visible,
            "game_over_prompt_visible": self.game_over_prompt_visible,
            "death_reason": self.result.reason if self.result else None,
        })
        return data

    def frame_png(self) -> bytes:
        return self.renderer.to_png()


# -------------------------------
# Headless session
# -------------------------------

def run_session(
    keys: List[str],
    max_ticks: int,
    seed: Optional[int] = None,
    print_board: bool = False,
    u_turn_sequencing: bool = False,
) -> Dict[str, Any]:
    """
    Play a scripted game without a timer.

    keys[i] (if present and non-empty) is fed to the input buffer right
    before tick i. Stops after max_ticks or at game over.

    Returns:
        A dictionary summarizing the session (score, ticks, phase, messages).
    """
    game = SnakeGame(rng=random.Random(seed), u_turn_sequencing=u_turn_sequencing)
    game.start()

    for i in range(max_ticks):
        if i < len(keys) and keys[i]:
            game.on_input(keys[i])
        game.update()

        if print_board:
            print(f"\nTick {game.ticks} ({game.score_text}, {game.state.speed}ms)")
            print(game.state.print_board())

        if game.phase == GAME_OVER:
            break

    # Never leave a timer job behind
    game.scheduler.stop()

    return {
        "final_score": game.state.score,
        "ticks": game.ticks,
        "phase": game.phase,
        "length": len(game.state.snake),
        "death_reason": game.result.reason if game.result else None,
        "messages": game.notifier.drain(),
    }


def main():
    parser = argparse.ArgumentParser(
        description="Play a scripted snake game headlessly and print the result."
    )
    parser.add_argument("--keys", type=str, default="",
                        help="Comma-separated keys fed one per tick, e.g. 'ArrowUp,,ArrowLeft' (empty = no input)")
    parser.add_argument("--ticks", type=int, default=50,
                        help="Maximum number of ticks to run")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement (defaults to GAME_SEED env var)")
    parser.add_argument("--print-board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--u-turn-sequencing", action="store_true",
                        help="Enable two-key U-turn sequencing")
    args = parser.parse_args()

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.ticks <= 0:
        raise ValueError("--ticks must be a positive number")

    seed = args.seed
    if seed is None and os.getenv("GAME_SEED"):
        seed = int(os.getenv("GAME_SEED"))

    keys = [k.strip() for k in args.keys.split(",")] if args.keys else []
    result = run_session(
        keys,
        args.ticks,
        seed=seed,
        print_board=args.print_board,
        u_turn_sequencing=args.u_turn_sequencing or env_flag('U_TURN_SEQUENCING_ENABLED'),
    )

    print("\nSession Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
