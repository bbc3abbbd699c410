"""
Tests for food placement.
"""

import os
import sys
import random

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import BOX_SIZE, GRID_SIZE  # noqa: E402
from domain.food import place_food  # noqa: E402
from domain.grid import in_bounds, is_grid_aligned  # noqa: E402


class SequenceRng:
    """Returns the given floats in order from random()."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


class TestPlaceFood:
    """Tests for place_food."""

    def test_retries_until_cell_is_free(self):
        """An occupied draw is rejected and the next free draw is used."""
        rng = SequenceRng([0.0, 0.0, 0.5, 0.5])
        assert place_food({(0, 0)}, rng) == (300, 300)

    def test_never_places_on_snake(self):
        rng = random.Random(42)
        occupied = {(x * BOX_SIZE, 5 * BOX_SIZE) for x in range(GRID_SIZE)}
        for _ in range(200):
            cell = place_food(occupied, rng)
            assert cell not in occupied
            assert in_bounds(cell)
            assert is_grid_aligned(cell)

    def test_finds_the_only_free_cell(self):
        """With one free cell left, that cell is eventually chosen."""
        all_cells = {
            (x * BOX_SIZE, y * BOX_SIZE) for x in range(GRID_SIZE) for y in range(GRID_SIZE)
        }
        free = (7 * BOX_SIZE, 11 * BOX_SIZE)
        assert place_food(all_cells - {free}, random.Random(0)) == free

    def test_accepts_any_iterable(self):
        cell = place_food([(0, 0), (20, 0)], random.Random(1))
        assert cell not in [(0, 0), (20, 0)]
