"""
Simulation engine: movement, food, growth and the round lifecycle.

Each phase is a plain function or small class operating on state that is
passed in; `run_tick` chains them in the order the game depends on.
"""

from .signals import GameOverSignal, GrowthSignal
from .movement import advance
from .food import Food, FoodManager
from .growth import apply_growth
from .lifecycle import LifecycleController, LifecycleState
from .tick import TickResult, run_tick

__all__ = [
    'GameOverSignal',
    'GrowthSignal',
    'advance',
    'Food',
    'FoodManager',
    'apply_growth',
    'LifecycleController',
    'LifecycleState',
    'TickResult',
    'run_tick',
]
