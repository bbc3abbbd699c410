"""
Wall and self-intersection checks against the snake's head.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .constants import BOX_SIZE, GRID_SIZE
from .grid import in_bounds

if TYPE_CHECKING:
    from .game_state import GameState

WALL = "wall"
SELF = "self"


@dataclass(frozen=True)
class GameOver:
    """Terminal result of a game: the final score and what the head hit."""
    score: int
    reason: str


def check_collision(
    state: "GameState",
    grid_size: int = GRID_SIZE,
    box_size: int = BOX_SIZE,
) -> Optional[GameOver]:
    """Return a GameOver if the head left the board or hit the body, else None."""
    positions = list(state.snake.positions)
    head = positions[0]

    if not in_bounds(head, grid_size, box_size):
        return GameOver(score=state.score, reason=WALL)

    if head in positions[1:]:
        return GameOver(score=state.score, reason=SELF)

    return None
