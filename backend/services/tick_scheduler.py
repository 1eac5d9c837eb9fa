"""
Fixed-tick driver for a live game.

Input is sampled every frame; movement and food spawning run as periodic
`schedule` jobs on their own, coarser cadences:
 - movement tick every `move_interval` seconds (default: 0.25)
 - food-spawn tick every `food_interval` seconds (default: 1)

Everything runs on the calling thread. Due jobs run in registration order
(movement first), not in `next_run` order as `Scheduler.run_pending` would,
so when both are due in the same frame the snake moves (and any reset
happens) before food is placed.
"""

import logging
import time
from typing import Callable, Optional

import schedule

from domain.constants import MOVE_INTERVAL, FOOD_INTERVAL, FRAME_INTERVAL

logger = logging.getLogger(__name__)


class TickScheduler:
    def __init__(
        self,
        game,
        player,
        move_interval: float = MOVE_INTERVAL,
        food_interval: float = FOOD_INTERVAL,
        frame_interval: float = FRAME_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ):
        for name, value in (
            ("move_interval", move_interval),
            ("food_interval", food_interval),
            ("frame_interval", frame_interval),
        ):
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

        self.game = game
        self.player = player
        self.move_interval = move_interval
        self.food_interval = food_interval
        self.frame_interval = frame_interval
        self.frames = 0
        self._sleep = sleep

        self.scheduler = schedule.Scheduler()
        self.scheduler.every(move_interval).seconds.do(self.movement_tick)
        self.scheduler.every(food_interval).seconds.do(self.food_tick)

    def sample_input(self) -> None:
        """Read the player once and forward any request to the game."""
        self.game.handle_input(self.player.get_move(self.game.get_current_state()))

    def movement_tick(self) -> None:
        result = self.game.run_movement_tick()
        if result.reset:
            logger.info("Fresh snake spawned after %s round(s).", self.game.rounds_played)

    def food_tick(self) -> None:
        food = self.game.run_food_tick()
        if food is not None:
            logger.debug("Food tick placed food at %s", food.position)

    def run_due_jobs(self) -> None:
        """Run every due job, movement before food."""
        for job in list(self.scheduler.jobs):
            if job.should_run:
                job.run()

    def run_frame(self) -> None:
        self.sample_input()
        self.run_due_jobs()
        self.frames += 1

    def _done(self, max_ticks: Optional[int], max_rounds: Optional[int]) -> bool:
        if max_ticks is not None and self.game.tick_number >= max_ticks:
            return True
        if max_rounds is not None and self.game.rounds_played >= max_rounds:
            return True
        return False

    def run(self, max_ticks: Optional[int] = None, max_rounds: Optional[int] = None) -> None:
        """
        Start the frame loop. Runs until a limit is hit, or forever with no limits.
        """
        logger.info(
            "Starting tick loop. Movement every %ss, food every %ss, frame every %ss.",
            self.move_interval,
            self.food_interval,
            self.frame_interval,
        )

        # Food is available from the first frame rather than after one food interval
        self.food_tick()

        while not self._done(max_ticks, max_rounds):
            self.run_frame()
            self._sleep(self.frame_interval)

        logger.info(
            "Tick loop stopped after %s frames, %s ticks, %s rounds.",
            self.frames,
            self.game.tick_number,
            self.game.rounds_played,
        )
