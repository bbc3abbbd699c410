"""
Tests for the speed controller.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import (  # noqa: E402
    FOOD_REWARD,
    SPEED_DECREMENT,
    SPEED_MAX,
    SPEED_MIN,
    SPEED_RANDOM_THRESHOLD,
)
from domain.speed import next_interval  # noqa: E402


class TestNextInterval:
    """Tests for next_interval."""

    def test_decrements_below_threshold(self):
        assert next_interval(10, SPEED_MAX) == SPEED_MAX - SPEED_DECREMENT

    def test_floored_at_min(self):
        assert next_interval(100, SPEED_MIN) == SPEED_MIN
        assert next_interval(100, SPEED_MIN + 2) == SPEED_MIN

    def test_pinned_at_threshold(self):
        """At exactly the threshold the interval jumps straight to SPEED_MIN."""
        assert next_interval(SPEED_RANDOM_THRESHOLD, SPEED_MAX) == SPEED_MIN

    def test_stays_pinned_above_threshold(self):
        for score in range(SPEED_RANDOM_THRESHOLD, SPEED_RANDOM_THRESHOLD + 500, FOOD_REWARD):
            assert next_interval(score, SPEED_MIN) == SPEED_MIN

    def test_monotonic_over_a_whole_game(self):
        speed = SPEED_MAX
        for score in range(FOOD_REWARD, 1000, FOOD_REWARD):
            new_speed = next_interval(score, speed)
            assert new_speed <= speed
            assert new_speed >= SPEED_MIN
            speed = new_speed
        assert speed == SPEED_MIN
