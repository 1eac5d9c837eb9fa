import argparse
import json
import logging
import math
import random
import uuid
from typing import Any, Dict, List, Optional, Union

from config import GameConfig, load_config
from domain.constants import ARENA_WIDTH, ARENA_HEIGHT, START_HEAD, START_BODY
from domain.direction import Direction
from domain.game_state import GameState
from domain.grid import GridConfig, Position, Renderable
from domain.snake import Snake
from engine import FoodManager, LifecycleController, TickResult, run_tick
from engine.food import Food
from engine.signals import game_over_signals
from players import Player, get_player_class, list_players

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (grid bounds)
      - The snake and its direction state
      - Food
      - The round lifecycle (game over -> fresh snake)
      - Scores and tick bookkeeping

    Movement and food spawning are driven from outside by calling
    `run_movement_tick` and `run_food_tick` on their own cadences.
    """

    def __init__(
        self,
        width: int = ARENA_WIDTH,
        height: int = ARENA_HEIGHT,
        rng: Optional[random.Random] = None,
        game_id: Optional[str] = None,
    ):
        self.grid = GridConfig(width, height)
        for cell in [START_HEAD] + START_BODY:
            if not self.grid.contains(Position(*cell)):
                raise ValueError(
                    f"A {width}x{height} board cannot hold the starting snake at {cell}."
                )

        self.game_id = game_id or str(uuid.uuid4())
        self.snake = Snake.default()
        self.food_manager = FoodManager(self.grid, rng)
        self.lifecycle = LifecycleController()

        self.tick_number = 0
        self.score = 0
        self.best_score = 0
        self.death_reason: Optional[str] = None  # e.g., 'wall', 'self'
        self.death_tick: Optional[int] = None

        logger.info("Game %s started on a %sx%s board.", self.game_id, width, height)

    @property
    def food(self) -> Optional[Food]:
        return self.food_manager.food

    @property
    def rounds_played(self) -> int:
        return self.lifecycle.resets

    def handle_input(self, direction: Optional[Union[Direction, str]]) -> bool:
        """
        Feed one frame of input. None means no key pressed.

        Returns:
            True if the request became the pending direction.
        """
        if direction is None:
            return False
        return self.snake.direction.set_pending(Direction.parse(direction))

    def run_movement_tick(self, direction_request: Optional[Direction] = None) -> TickResult:
        """
        Execute one movement tick:
          1) Commit the pending direction and move
          2) Detect wall/self collisions
          3) Eat and grow
          4) Reset the round on game over
        """
        result = run_tick(
            self.grid,
            self.snake,
            self.food_manager,
            self.lifecycle,
            direction_request,
        )

        if result.grew:
            self.score += 1
            self.best_score = max(self.best_score, self.score)
            logger.info("Snake ate food; score %s, length %s.", self.score, len(result.snake))

        if result.reset:
            first = game_over_signals(result.signals)[0]
            self.death_reason = first.reason
            self.death_tick = self.tick_number
            logger.info(
                "Round %s over at tick %s (%s). Score: %s",
                self.rounds_played, self.tick_number, self.death_reason, self.score,
            )
            self.score = 0

        self.snake = result.snake
        self.tick_number += 1
        return result

    def run_food_tick(self) -> Optional[Food]:
        return self.food_manager.spawn_if_absent(self.snake)

    def set_food(self, position: Union[Position, tuple]) -> Food:
        """
        Place the food at a specific cell. Mainly for scripted scenarios.
        """
        if not isinstance(position, Position):
            position = Position(*position)
        return self.food_manager.place(position, self.snake)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        food = self.food_manager.position
        return GameState(
            tick_number=self.tick_number,
            snake_positions=[p.as_tuple() for p in self.snake.positions],
            direction=self.snake.committed_direction.value,
            food=food.as_tuple() if food is not None else None,
            width=self.grid.width,
            height=self.grid.height,
            score=self.score,
            rounds_played=self.rounds_played,
        )

    def renderables(self) -> List[Renderable]:
        """Every snake segment and the food, with grid position and logical size."""
        items = self.snake.renderables()
        if self.food is not None:
            items.append(self.food.renderable())
        return items

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")

    def summary(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "ticks": self.tick_number,
            "rounds_played": self.rounds_played,
            "score": self.score,
            "best_score": self.best_score,
            "length": len(self.snake),
            "last_death_reason": self.death_reason,
            "last_death_tick": self.death_tick,
            "final_state": self.get_current_state().to_dict(),
        }


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    player: Player,
    game_params: argparse.Namespace,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    """
    Runs a headless game as fast as possible, keeping the ratio between the
    movement and food-spawn cadences.

    Args:
        player: source of direction requests, sampled once per movement tick
        game_params: namespace with width, height, max_ticks, max_rounds,
                     move_interval and food_interval

    Returns:
        A dictionary summarizing the game (see SnakeGame.summary).
    """
    game = SnakeGame(
        width=game_params.width,
        height=game_params.height,
        rng=rng,
        game_id=getattr(game_params, "game_id", None),
    )

    # Food tick fires once every `food_every` movement ticks
    food_every = max(1, math.ceil(game_params.food_interval / game_params.move_interval))
    max_rounds = getattr(game_params, "max_rounds", None)

    game.run_food_tick()
    while game.tick_number < game_params.max_ticks:
        game.handle_input(player.get_move(game.get_current_state()))
        game.run_movement_tick()

        if max_rounds is not None and game.rounds_played >= max_rounds:
            break
        if game.tick_number % food_every == 0:
            game.run_food_tick()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Tick %s\n%s", game.tick_number, game.get_current_state().print_board())

    return game.summary()


def build_player(args: argparse.Namespace) -> Player:
    player_cls = get_player_class(args.player)
    if player_cls.name == "scripted":
        moves = [m for m in (args.moves or "").split(",") if m.strip()]
        return player_cls(moves)
    return player_cls()


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main(argv: Optional[List[str]] = None):
    config: GameConfig = load_config()

    parser = argparse.ArgumentParser(
        description="Run a headless fixed-tick Snake game with an autopilot or scripted player."
    )
    parser.add_argument("--width", type=int, default=config.width,
                        help="Width of the board from 0 to N")
    parser.add_argument("--height", type=int, default=config.height,
                        help="Height of the board from 0 to N")
    parser.add_argument("--player", type=str, default="random",
                        help="Player key: " + ", ".join(p["key"] for p in list_players()))
    parser.add_argument("--moves", type=str, default=None,
                        help="Comma separated directions for the scripted player (e.g. 'up,left,down')")
    parser.add_argument("--max-ticks", type=int, default=200,
                        help="Stop after this many movement ticks")
    parser.add_argument("--max-rounds", type=int, default=None,
                        help="Stop after this many game overs")
    parser.add_argument("--move-interval", type=float, default=config.move_interval,
                        help="Seconds per movement tick")
    parser.add_argument("--food-interval", type=float, default=config.food_interval,
                        help="Seconds per food-spawn tick")
    parser.add_argument("--realtime", action="store_true",
                        help="Drive the game from the wall-clock scheduler instead of as fast as possible")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    player = build_player(args)
    rng = random.Random(args.seed) if args.seed is not None else None

    if args.realtime:
        from services.tick_scheduler import TickScheduler

        game = SnakeGame(width=args.width, height=args.height, rng=rng)
        scheduler = TickScheduler(
            game,
            player,
            move_interval=args.move_interval,
            food_interval=args.food_interval,
            frame_interval=config.frame_interval,
        )
        scheduler.run(max_ticks=args.max_ticks, max_rounds=args.max_rounds)
        result = game.summary()
    else:
        result = run_simulation(player, args, rng=rng)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
