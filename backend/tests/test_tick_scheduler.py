"""
Tests for the schedule-driven tick loop.
"""

import datetime
import random
import pytest
import sys
import os
from unittest.mock import Mock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import SnakeGame
from domain import Direction, Position, Snake
from services.tick_scheduler import TickScheduler


def _scheduler(game=None, player=None, **kwargs):
    game = game or SnakeGame(rng=random.Random(0))
    player = player or Mock(get_move=Mock(return_value=None))
    sleep = Mock()
    ticker = TickScheduler(game, player, sleep=sleep, **kwargs)
    return ticker, sleep


def _make_all_due(ticker, food_first=True):
    """Push every job into the past; by default the food job looks more overdue."""
    now = datetime.datetime.now()
    move_job, food_job = ticker.scheduler.jobs
    move_job.next_run = now - datetime.timedelta(seconds=1)
    food_job.next_run = now - datetime.timedelta(seconds=2 if food_first else 0.5)


def _record_phases(game):
    order = []
    move, food = game.run_movement_tick, game.run_food_tick

    def run_movement_tick(*args, **kwargs):
        order.append("move")
        return move(*args, **kwargs)

    def run_food_tick():
        order.append("food")
        return food()

    game.run_movement_tick = run_movement_tick
    game.run_food_tick = run_food_tick
    return order


class TestTickScheduler:
    def test_registers_movement_then_food_jobs(self):
        ticker, _ = _scheduler(move_interval=0.25, food_interval=1)

        jobs = ticker.scheduler.jobs
        assert len(jobs) == 2
        assert jobs[0].job_func.func == ticker.movement_tick
        assert jobs[1].job_func.func == ticker.food_tick

    def test_frame_runs_movement_before_food_when_both_due(self):
        """Food scheduled earlier than movement still runs after it."""
        game = SnakeGame(rng=random.Random(0))
        order = _record_phases(game)
        ticker, _ = _scheduler(game=game)
        _make_all_due(ticker, food_first=True)

        ticker.run_frame()

        assert order == ["move", "food"]
        assert game.tick_number == 1
        assert game.food is not None

    def test_food_placed_in_reset_frame_survives(self):
        game = SnakeGame(rng=random.Random(0))
        game.snake = Snake([(9, 3), (8, 3)], Direction.RIGHT)
        ticker, _ = _scheduler(game=game)
        _make_all_due(ticker)

        ticker.run_frame()

        assert game.rounds_played == 1
        assert game.snake.head == Position(3, 3)
        assert game.food is not None
        assert not game.snake.occupies(game.food.position)

    def test_frame_skips_jobs_not_yet_due(self):
        game = SnakeGame(rng=random.Random(0))
        order = _record_phases(game)
        ticker, _ = _scheduler(game=game, move_interval=60, food_interval=60)

        ticker.run_frame()

        assert order == []
        assert ticker.frames == 1

    @pytest.mark.parametrize("name", ["move_interval", "food_interval", "frame_interval"])
    def test_non_positive_interval_raises(self, name):
        with pytest.raises(ValueError):
            _scheduler(**{name: 0})

    def test_sample_input_forwards_player_move(self):
        game = SnakeGame()
        player = Mock(get_move=Mock(return_value=Direction.UP))
        ticker, _ = _scheduler(game=game, player=player)

        ticker.sample_input()

        assert game.snake.pending_direction == Direction.UP
        player.get_move.assert_called_once()

    def test_run_stops_at_max_ticks(self):
        game = SnakeGame(rng=random.Random(0))
        player = Mock(get_move=Mock(return_value=None))
        ticker, sleep = _scheduler(game=game, player=player)
        # Every frame finds both jobs due
        _make_all_due(ticker)
        sleep.side_effect = lambda _: _make_all_due(ticker)

        ticker.run(max_ticks=5)

        assert game.tick_number == 5
        assert ticker.frames == 5
        assert player.get_move.call_count == 5
        assert sleep.call_count == 5

    def test_run_stops_at_max_rounds(self):
        game = SnakeGame(rng=random.Random(0))
        ticker, sleep = _scheduler(game=game)
        _make_all_due(ticker)
        sleep.side_effect = lambda _: _make_all_due(ticker)

        ticker.run(max_rounds=1)

        assert game.rounds_played == 1
        assert game.tick_number == 7
        assert game.food is not None
