"""
Food manager - places food off the snake and detects when it is eaten.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from domain.constants import FOOD_SIZE, FOOD_SPAWN_MAX_ATTEMPTS
from domain.grid import GridConfig, Position, Renderable, Size
from domain.snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Food:
    position: Position

    def renderable(self) -> Renderable:
        return Renderable("food", self.position, Size.square(FOOD_SIZE))


class FoodManager:
    """
    Owns the (at most one) active food item for a game session.

    Placement draws uniformly random cells and rejects any draw that lands
    on the snake. After `max_attempts` rejections it falls back to picking
    among the free cells directly, so a crowded board still terminates.
    """

    def __init__(
        self,
        grid: GridConfig,
        rng: Optional[random.Random] = None,
        max_attempts: int = FOOD_SPAWN_MAX_ATTEMPTS,
    ):
        self.grid = grid
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.food: Optional[Food] = None

    @property
    def position(self) -> Optional[Position]:
        return self.food.position if self.food is not None else None

    def spawn_if_absent(self, snake: Snake) -> Optional[Food]:
        """
        Spawn food if none exists.

        Returns:
            The newly spawned Food, or None if food already existed or the
            snake covers every cell.
        """
        if self.food is not None:
            return None

        cell = self._random_free_cell(snake)
        if cell is None:
            logger.warning("No free cell left for food on a %sx%s grid.", self.grid.width, self.grid.height)
            return None

        self.food = Food(cell)
        logger.debug("Spawned food at %s", cell)
        return self.food

    def place(self, position: Position, snake: Optional[Snake] = None) -> Food:
        """Put food at an explicit cell, replacing any existing food."""
        if not self.grid.contains(position):
            raise ValueError(f"Food out of bounds at {position.as_tuple()}.")
        if snake is not None and snake.occupies(position):
            raise ValueError(f"Food cannot go under the snake at {position.as_tuple()}.")
        self.food = Food(position)
        return self.food

    def check_consumption(self, head: Position) -> bool:
        """Eat the food if the head sits exactly on it."""
        if self.food is None or self.food.position != head:
            return False
        logger.debug("Food at %s eaten", head)
        self.food = None
        return True

    def clear(self) -> None:
        self.food = None

    def _random_free_cell(self, snake: Snake) -> Optional[Position]:
        for _ in range(self.max_attempts):
            cell = Position(
                self.rng.randint(0, self.grid.width - 1),
                self.rng.randint(0, self.grid.height - 1),
            )
            if not snake.occupies(cell):
                return cell

        occupied = set(snake.positions)
        free: List[Position] = [c for c in self.grid.cells() if c not in occupied]
        if not free:
            return None
        return self.rng.choice(free)
