"""
Domain entities for the snake simulation.

This module contains the core game entities that are independent of
scheduling and presentation concerns.
"""

from .constants import ARENA_WIDTH, ARENA_HEIGHT, WALL, SELF
from .direction import Direction, DirectionState
from .grid import GridConfig, Position, Renderable, Size
from .snake import Snake
from .game_state import GameState

__all__ = [
    'ARENA_WIDTH', 'ARENA_HEIGHT', 'WALL', 'SELF',
    'Direction',
    'DirectionState',
    'GridConfig',
    'Position',
    'Renderable',
    'Size',
    'Snake',
    'GameState',
]
