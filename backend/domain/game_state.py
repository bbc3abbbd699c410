"""
GameState entity - the complete mutable simulation state of one game.
"""

import random
from collections import deque
from typing import Any, Deque, Dict, Tuple

from .constants import (
    BOX_SIZE,
    GRID_SIZE,
    IDLE,
    INITIAL_CELL,
    INITIAL_DIRECTION,
    SPEED_MAX,
)
from .food import place_food
from .snake import Snake


def score_label(score: int) -> str:
    return f"Score: {score}"


class GameState:
    """
    Everything the simulation mutates while a game runs.

    Attributes:
        snake: the Snake (head first)
        direction: current direction, written only through validated turns
        heading: direction the snake actually moved on the last tick
        score: non-negative, grows by FOOD_REWARD per food
        speed: tick interval in milliseconds
        move_queue: FIFO of queued directions, one consumed per tick
        food: (x, y) of the single food cell
        phase: IDLE, RUNNING or GAME_OVER
    """

    def __init__(
        self,
        snake: Snake,
        direction: str,
        score: int,
        speed: int,
        move_queue: Deque[str],
        food: Tuple[int, int],
        phase: str = IDLE,
        heading: str = None,
    ):
        self.snake = snake
        self.direction = direction
        self.heading = heading or direction
        self.score = score
        self.speed = speed
        self.move_queue = move_queue
        self.food = food
        self.phase = phase

    def snapshot(self) -> Dict[str, Any]:
        """JSON-friendly copy of the state."""
        return {
            "phase": self.phase,
            "snake": [list(cell) for cell in self.snake.positions],
            "direction": self.direction,
            "food": list(self.food),
            "score": self.score,
            "score_text": score_label(self.score),
            "speed": self.speed,
            "queued_moves": len(self.move_queue),
        }

    def print_board(self, grid_size: int = GRID_SIZE, box_size: int = BOX_SIZE) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        o = snake body
        Row 0 is the top of the canvas.
        """
        board = [['.' for _ in range(grid_size)] for _ in range(grid_size)]

        fx, fy = self.food
        board[fy // box_size][fx // box_size] = 'F'

        for idx, (x, y) in enumerate(self.snake.positions):
            col, row = x // box_size, y // box_size
            if 0 <= col < grid_size and 0 <= row < grid_size:
                board[row][col] = 'H' if idx == 0 else 'o'

        return "\n".join(f"{row:2d} {' '.join(cells)}" for row, cells in enumerate(board))

    def __repr__(self):
        return (
            f"<GameState phase={self.phase}, head={self.snake.head}, "
            f"length={len(self.snake)}, direction={self.direction}, "
            f"score={self.score}, speed={self.speed}>"
        )


def new_game_state(rng: random.Random = None) -> GameState:
    """Fresh state: one-segment snake at INITIAL_CELL heading right, food placed."""
    snake = Snake([INITIAL_CELL])
    return GameState(
        snake=snake,
        direction=INITIAL_DIRECTION,
        score=0,
        speed=SPEED_MAX,
        move_queue=deque(),
        food=place_food(snake.cells, rng),
    )
