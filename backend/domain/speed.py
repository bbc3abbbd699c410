"""
Score-driven tick interval policy.
"""

from .constants import SPEED_MIN, SPEED_DECREMENT, SPEED_RANDOM_THRESHOLD


def next_interval(score: int, current_interval: int) -> int:
    """
    Return the tick interval (ms) to use after food has been eaten.

    Below SPEED_RANDOM_THRESHOLD the interval shrinks by SPEED_DECREMENT,
    never going under SPEED_MIN. At or above the threshold it is pinned
    to SPEED_MIN; no randomisation is applied despite the constant's name.
    """
    if score < SPEED_RANDOM_THRESHOLD:
        return max(SPEED_MIN, current_interval - SPEED_DECREMENT)
    return SPEED_MIN
