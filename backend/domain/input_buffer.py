"""
Directional input handling.

Every raw input event (keyboard key or on-screen button) goes through
InputBuffer.on_input, which may turn the snake immediately and always
queues one entry for the game loop to consume on a later tick.
"""

from collections import deque
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

from .constants import (
    KEY_TO_DIRECTION,
    MAX_BUFFER_SIZE,
    OPPOSITE_DIRECTIONS,
    U_TURN_PATTERNS,
)

if TYPE_CHECKING:
    from .game_state import GameState


def direction_for_key(key: str) -> Optional[str]:
    """Map a raw key name to a direction, or None for unrecognized keys."""
    return KEY_TO_DIRECTION.get(key)


def is_reversal(current: str, proposed: str) -> bool:
    return OPPOSITE_DIRECTIONS.get(current) == proposed


def accept_turn(current: str, proposed: str) -> str:
    """Return the direction to adopt: `proposed`, unless it reverses `current`."""
    if is_reversal(current, proposed):
        return current
    return proposed


def is_u_turn_pattern(keys: Sequence[str], current_direction: str) -> bool:
    """
    True if the two buffered keys form a U-turn chord for the current
    direction (key order does not matter).
    """
    if len(keys) != 2:
        return False

    patterns = U_TURN_PATTERNS.get(current_direction)
    if not patterns:
        return False

    return any(first in keys and second in keys for first, second in patterns)


def get_u_turn_sequence(
    keys: Sequence[str], current_direction: str
) -> Optional[Tuple[str, str]]:
    """
    Return the two directions that perform the U-turn without ever
    reversing (sideways first, then back), or None if nothing matches.
    """
    if not is_u_turn_pattern(keys, current_direction):
        return None

    for first, second in U_TURN_PATTERNS[current_direction]:
        if first in keys and second in keys:
            return (KEY_TO_DIRECTION[first], KEY_TO_DIRECTION[second])
    return None


class KeyBuffer:
    """The most recent raw directional keys, oldest first, bounded."""

    def __init__(self, max_size: int = MAX_BUFFER_SIZE):
        self._keys = deque(maxlen=max_size)

    def push(self, key: str):
        self._keys.append(key)

    def clear(self):
        self._keys.clear()

    def as_list(self) -> List[str]:
        return list(self._keys)

    def __len__(self) -> int:
        return len(self._keys)


class InputBuffer:
    """
    Translates raw input into the move queue.

    The turn is applied to the current direction right away (unless it
    is a reversal) and the resulting direction is appended to the move
    queue, one entry per event. Fast multi-key input therefore builds up
    a backlog that the loop drains one entry per tick.

    U-turn sequencing is off by default. When enabled, directional keys
    are also kept in a two-key buffer; a chord that matches a U-turn
    pattern for the direction the snake last moved in replaces the
    pending queue with the two-step sequence.
    """

    def __init__(self, u_turn_sequencing: bool = False):
        self.u_turn_sequencing = u_turn_sequencing
        self.key_buffer = KeyBuffer()

    def on_input(self, state: "GameState", key: str) -> str:
        """Handle one raw input event and return the current direction."""
        if self.u_turn_sequencing and self._apply_u_turn(state, key):
            return state.direction

        new_direction = direction_for_key(key)
        if new_direction is not None:
            state.direction = accept_turn(state.direction, new_direction)

        state.move_queue.append(state.direction)
        return state.direction

    def reset(self):
        self.key_buffer.clear()

    def _apply_u_turn(self, state: "GameState", key: str) -> bool:
        if direction_for_key(key) is None:
            return False

        self.key_buffer.push(key)
        sequence = get_u_turn_sequence(self.key_buffer.as_list(), state.heading)
        if sequence is None:
            return False

        state.move_queue.clear()
        state.move_queue.extend(sequence)
        state.direction = sequence[-1]
        self.key_buffer.clear()
        return True
