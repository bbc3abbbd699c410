"""
Grid arithmetic for the square game board.

Cells are (x, y) pixel offsets of the cell's top-left corner; every
engine position is a multiple of BOX_SIZE.
"""

from typing import Tuple

from .constants import UP, DOWN, LEFT, RIGHT, BOX_SIZE, GRID_SIZE

Cell = Tuple[int, int]


def cell_from_point(x: float, y: float, box_size: int = BOX_SIZE) -> Cell:
    """Snap a continuous point to the cell that contains it."""
    return (int(x // box_size) * box_size, int(y // box_size) * box_size)


def in_bounds(cell: Cell, grid_size: int = GRID_SIZE, box_size: int = BOX_SIZE) -> bool:
    """True if the cell lies within [0, grid_size) on both axes."""
    limit = grid_size * box_size
    x, y = cell
    return 0 <= x < limit and 0 <= y < limit


def is_grid_aligned(cell: Cell, box_size: int = BOX_SIZE) -> bool:
    x, y = cell
    return x % box_size == 0 and y % box_size == 0


def step(cell: Cell, direction: str, box_size: int = BOX_SIZE) -> Cell:
    """Return the neighbouring cell one grid unit away in `direction`."""
    x, y = cell
    # Canvas coordinates: y grows downwards
    if direction == UP:
        return (x, y - box_size)
    elif direction == DOWN:
        return (x, y + box_size)
    elif direction == LEFT:
        return (x - box_size, y)
    elif direction == RIGHT:
        return (x + box_size, y)
    raise ValueError(f"Unknown direction: {direction!r}")
