"""
Game lifecycle controller - turns game-over signals into a fresh round.
"""

import logging
from enum import Enum
from typing import Iterable

from domain.snake import Snake
from .food import FoodManager
from .signals import game_over_signals

logger = logging.getLogger(__name__)


class LifecycleState(str, Enum):
    RUNNING = "running"
    RESETTING = "resetting"


class LifecycleController:
    """
    Two-state machine: RUNNING -> RESETTING -> RUNNING, all within one call.

    Attributes:
        state: current state; only ever observed as RUNNING from outside
        resets: number of resets performed
    """

    def __init__(self):
        self.state = LifecycleState.RUNNING
        self.resets = 0

    def observe(self, signals: Iterable[object], snake: Snake, food_manager: FoodManager) -> Snake:
        """
        Reset the round if any game-over signal was raised this tick.

        Any number of game-over signals in one tick produce exactly one reset.

        Returns:
            The snake to keep playing with: the same one, or a fresh default.
        """
        over = game_over_signals(signals)
        if not over:
            return snake

        self.state = LifecycleState.RESETTING
        reasons = ", ".join(s.reason for s in over)
        logger.info("Game over (%s) at length %s; resetting.", reasons, len(snake))

        snake.positions.clear()
        food_manager.clear()
        fresh = Snake.default()

        self.resets += 1
        self.state = LifecycleState.RUNNING
        return fresh
