"""
Food placement on a free cell.
"""

import random
from typing import Iterable

from .constants import BOX_SIZE, GRID_SIZE
from .grid import Cell, cell_from_point


def place_food(
    occupied: Iterable[Cell],
    rng: random.Random = None,
    grid_size: int = GRID_SIZE,
    box_size: int = BOX_SIZE,
) -> Cell:
    """
    Return a random grid-aligned cell that is not in `occupied`.

    Uses rejection sampling, so termination is only probabilistic: as the
    snake approaches the size of the board the expected number of draws
    grows without bound. A completely full board never returns.
    """
    rng = rng or random
    taken = set(occupied)
    canvas = grid_size * box_size

    while True:
        cell = cell_from_point(rng.random() * canvas, rng.random() * canvas, box_size)
        if cell not in taken:
            return cell
