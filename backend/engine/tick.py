"""
One movement tick, with all state passed in explicitly.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from domain.direction import Direction
from domain.grid import GridConfig
from domain.snake import Snake
from .food import Food, FoodManager
from .growth import apply_growth
from .lifecycle import LifecycleController
from .movement import advance
from .signals import GrowthSignal, game_over_signals


@dataclass
class TickResult:
    """
    Outcome of one movement tick.

    Attributes:
        snake: snake to use next tick (a fresh one if the round reset)
        food: active food after the tick
        signals: game-over and growth signals raised this tick
        reset: whether the lifecycle controller started a new round
        grew: whether a segment was appended
    """

    snake: Snake
    food: Optional[Food]
    signals: List[object] = field(default_factory=list)
    reset: bool = False
    grew: bool = False

    @property
    def game_over(self) -> bool:
        return bool(game_over_signals(self.signals))

    @property
    def ate(self) -> bool:
        return any(isinstance(s, GrowthSignal) for s in self.signals)


def run_tick(
    grid: GridConfig,
    snake: Snake,
    food_manager: FoodManager,
    lifecycle: LifecycleController,
    direction_request: Optional[Direction] = None,
) -> TickResult:
    """
    Run the movement phases in their required order:
      1) Apply any direction request (reversals are filtered)
      2) Commit the pending direction
      3) Move and detect wall/self collisions
      4) Check whether the head ate the food
      5) Grow into the cell the tail just vacated
      6) Reset the round if a game-over signal was raised
    """
    if direction_request is not None:
        snake.direction.set_pending(direction_request)
    snake.direction.commit()

    signals: List[object] = list(advance(snake, grid))

    grew = False
    if food_manager.check_consumption(snake.head):
        growth = GrowthSignal(snake.last_tail_position)
        signals.append(growth)
        grew = apply_growth(snake, growth)

    next_snake = lifecycle.observe(signals, snake, food_manager)

    return TickResult(
        snake=next_snake,
        food=food_manager.food,
        signals=signals,
        reset=next_snake is not snake,
        grew=grew,
    )
