"""
Snake entity and the per-tick movement transform.
"""

from collections import deque
from dataclasses import dataclass
from typing import List, Set, Tuple, TYPE_CHECKING

from .constants import BOX_SIZE, FOOD_REWARD
from .grid import step
from .input_buffer import accept_turn

if TYPE_CHECKING:
    from .game_state import GameState


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        self.positions = deque(positions)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def cells(self) -> Set[Tuple[int, int]]:
        return set(self.positions)

    def advance(self, direction: str, box_size: int = BOX_SIZE) -> Tuple[int, int]:
        """Prepend a new head one cell away in `direction` and return it."""
        new_head = step(self.head, direction, box_size)
        self.positions.appendleft(new_head)
        return new_head

    def drop_tail(self) -> Tuple[int, int]:
        return self.positions.pop()

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self)}>"


@dataclass
class MoveResult:
    new_head: Tuple[int, int]
    direction: str
    ate_food: bool


def tick(state: "GameState") -> MoveResult:
    """
    Advance the snake one cell.

    1) Pop the next queued direction, if any, and adopt it unless it
       reverses the current direction. The input buffer already rejected
       reversals when the key arrived, but the current direction may have
       moved on since that entry was queued.
    2) Grow a new head in the current direction.
    3) Keep the tail when the head lands on food (length +1, score +
       FOOD_REWARD), otherwise drop it.

    Placing new food and adjusting the speed is left to the game loop.
    """
    if state.move_queue:
        queued = state.move_queue.popleft()
        state.direction = accept_turn(state.direction, queued)

    new_head = state.snake.advance(state.direction)
    state.heading = state.direction

    ate_food = new_head == state.food
    if ate_food:
        state.score += FOOD_REWARD
    else:
        state.snake.drop_tail()

    return MoveResult(new_head=new_head, direction=state.direction, ate_food=ate_food)
