"""
Growth coordinator - appends a segment where the tail just was.
"""

import logging

from domain.snake import Snake
from .signals import GrowthSignal

logger = logging.getLogger(__name__)


def apply_growth(snake: Snake, signal: GrowthSignal) -> bool:
    """
    Append one tail segment at the signal's position.

    Returns:
        True if the snake grew, False if there was no vacated cell to grow into.
    """
    if signal.position is None:
        logger.warning("Growth requested before the snake has moved; ignoring.")
        return False

    snake.positions.append(signal.position)
    logger.debug("Snake grew to %s segments at %s", len(snake), signal.position)
    return True
