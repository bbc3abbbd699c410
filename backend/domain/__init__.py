"""
Domain entities for the snake game engine.

This module contains the core game rules that are independent of
infrastructure concerns (timers, rendering, HTTP, notifications).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, IDLE, RUNNING, GAME_OVER
from .snake import Snake, MoveResult, tick
from .game_state import GameState, new_game_state, score_label
from .input_buffer import InputBuffer
from .collision import GameOver, check_collision
from .food import place_food
from .speed import next_interval

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'IDLE', 'RUNNING', 'GAME_OVER',
    'Snake', 'MoveResult', 'tick',
    'GameState', 'new_game_state', 'score_label',
    'InputBuffer',
    'GameOver', 'check_collision',
    'place_food',
    'next_interval',
]
