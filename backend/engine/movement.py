"""
Movement & collision engine.
"""

import logging
from typing import List

from domain.constants import WALL, SELF
from domain.grid import GridConfig
from domain.snake import Snake
from .signals import GameOverSignal

logger = logging.getLogger(__name__)


def advance(snake: Snake, grid: GridConfig) -> List[GameOverSignal]:
    """
    Move the snake one cell in its committed direction.

    Steps:
      1) Snapshot every segment position (head included)
      2) Step the head by the committed direction
      3) Wall check: head left the grid
      4) Self check: head landed on the pre-move cell of any non-head segment
      5) Follow-the-leader shift; applied even when a collision fired
      6) Remember the cell the tail vacated for growth

    Returns:
        The game-over signals raised this tick (empty, one or two).
    """
    snapshot = list(snake.positions)
    new_head = snapshot[0].step(snake.committed_direction)

    signals: List[GameOverSignal] = []
    if not grid.contains(new_head):
        logger.debug("Head left the grid at %s", new_head)
        signals.append(GameOverSignal(WALL, new_head))
    if new_head in snapshot[1:]:
        logger.debug("Head ran into its own body at %s", new_head)
        signals.append(GameOverSignal(SELF, new_head))

    # Every segment takes its predecessor's old cell; the old tail drops off the end
    snake.positions.appendleft(new_head)
    snake.last_tail_position = snake.positions.pop()

    return signals
