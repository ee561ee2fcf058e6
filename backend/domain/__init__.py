"""
Domain entities for the Snake game engine.

This module contains the core game entities that are independent of
terminal concerns (drawing, keyboard handling, etc.).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE_MOVES,
    RUNNING, GAME_OVER,
)
from .position import Position, move, opposite
from .snake import Snake
from .food import Food
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE_MOVES',
    'RUNNING', 'GAME_OVER',
    'Position', 'move', 'opposite',
    'Snake',
    'Food',
    'GameState',
]
