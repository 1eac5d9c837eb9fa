"""
Tests for the domain entities: grid, directions, snake and snapshots.
"""

import pytest
import sys
import os
from collections import deque

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    Direction,
    DirectionState,
    GameState,
    GridConfig,
    Position,
    Size,
    Snake,
)


class TestGridConfig:
    """Tests for grid bounds."""

    def test_default_is_ten_by_ten(self):
        grid = GridConfig()
        assert (grid.width, grid.height) == (10, 10)

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5)])
    def test_non_positive_dimensions_raise(self, width, height):
        with pytest.raises(ValueError):
            GridConfig(width, height)

    def test_contains(self):
        grid = GridConfig(10, 10)
        assert grid.contains(Position(0, 0))
        assert grid.contains(Position(9, 9))
        assert not grid.contains(Position(10, 3))
        assert not grid.contains(Position(3, -1))

    def test_cells_covers_grid(self):
        grid = GridConfig(3, 2)
        cells = list(grid.cells())
        assert len(cells) == grid.cell_count == 6
        assert Position(2, 1) in cells


class TestPosition:
    """Tests for the Position value type."""

    def test_positions_compare_by_value(self):
        assert Position(1, 2) == Position(1, 2)
        assert len({Position(1, 2), Position(1, 2)}) == 1

    def test_step_uses_unit_deltas(self):
        origin = Position(5, 5)
        assert origin.step(Direction.LEFT) == Position(4, 5)
        assert origin.step(Direction.RIGHT) == Position(6, 5)
        assert origin.step(Direction.UP) == Position(5, 6)
        assert origin.step(Direction.DOWN) == Position(5, 4)

    def test_size_square(self):
        assert Size.square(0.65) == Size(0.65, 0.65)


class TestDirection:
    """Tests for Direction and its opposite mapping."""

    def test_opposites(self):
        assert Direction.LEFT.opposite() == Direction.RIGHT
        assert Direction.RIGHT.opposite() == Direction.LEFT
        assert Direction.UP.opposite() == Direction.DOWN
        assert Direction.DOWN.opposite() == Direction.UP

    def test_parse_is_case_insensitive(self):
        assert Direction.parse(" up ") == Direction.UP
        assert Direction.parse("Left") == Direction.LEFT
        assert Direction.parse(Direction.DOWN) == Direction.DOWN

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError):
            Direction.parse("sideways")


class TestDirectionState:
    """Tests for the reversal-filtering direction state machine."""

    def test_starts_with_same_committed_and_pending(self):
        state = DirectionState(Direction.RIGHT)
        assert state.committed == state.pending == Direction.RIGHT

    @pytest.mark.parametrize("direction", list(Direction))
    def test_reversal_request_is_a_no_op(self, direction):
        """Requesting the opposite of the committed direction never sticks."""
        state = DirectionState(direction)
        assert state.set_pending(direction.opposite()) is False
        assert state.pending == direction

    def test_turn_request_is_accepted(self):
        state = DirectionState(Direction.RIGHT)
        assert state.set_pending(Direction.UP) is True
        assert state.pending == Direction.UP
        assert state.committed == Direction.RIGHT

    def test_reversal_filtered_against_committed_not_pending(self):
        """A quick UP then LEFT from RIGHT is still blocked for LEFT."""
        state = DirectionState(Direction.RIGHT)
        state.set_pending(Direction.UP)
        assert state.set_pending(Direction.LEFT) is False
        assert state.pending == Direction.UP

    def test_commit_copies_pending(self):
        state = DirectionState(Direction.RIGHT)
        state.set_pending(Direction.DOWN)
        assert state.commit() == Direction.DOWN
        assert state.committed == Direction.DOWN
        # LEFT is no longer a reversal once DOWN is committed
        assert state.set_pending(Direction.LEFT) is True


class TestSnake:
    """Tests for the Snake class."""

    def test_default_snake(self):
        snake = Snake.default()
        assert list(snake.positions) == [Position(3, 3), Position(3, 2)]
        assert snake.committed_direction == Direction.RIGHT
        assert snake.pending_direction == Direction.RIGHT
        assert snake.last_tail_position is None

    def test_accepts_tuples(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)], "right")
        assert snake.head == Position(5, 5)
        assert snake.tail == Position(3, 5)
        assert len(snake) == 3

    def test_positions_is_deque(self):
        """Snake positions are stored as a deque for cheap head/tail updates."""
        assert isinstance(Snake.default().positions, deque)

    @pytest.mark.parametrize("positions", [[], [(1, 1)]])
    def test_fewer_than_two_segments_raises(self, positions):
        with pytest.raises(ValueError):
            Snake(positions)

    def test_empty_body_lookup_is_a_programming_error(self):
        snake = Snake.default()
        snake.positions.clear()
        with pytest.raises(RuntimeError):
            snake.head

    def test_occupies(self):
        snake = Snake([(5, 5), (4, 5)])
        assert snake.occupies(Position(4, 5))
        assert not snake.occupies(Position(6, 5))

    def test_renderables_sizes(self):
        items = Snake([(5, 5), (4, 5), (3, 5)]).renderables()
        assert [r.kind for r in items] == ["head", "segment", "segment"]
        assert items[0].size == Size.square(0.8)
        assert items[1].size == Size.square(0.65)
        assert items[2].position == Position(3, 5)


class TestGameState:
    """Tests for the GameState snapshot."""

    def _state(self, **overrides):
        values = dict(
            tick_number=4,
            snake_positions=[(3, 3), (3, 2)],
            direction="RIGHT",
            food=(5, 5),
            width=10,
            height=10,
            score=2,
            rounds_played=1,
        )
        values.update(overrides)
        return GameState(**values)

    def test_print_board_marks_head_body_and_food(self):
        lines = self._state().print_board().split("\n")
        # Rows are printed top (y=9) to bottom (y=0), then the x-axis
        assert len(lines) == 11
        row_y3 = lines[9 - 3].split()
        row_y2 = lines[9 - 2].split()
        row_y5 = lines[9 - 5].split()
        assert row_y3[0] == "3" and row_y3[1 + 3] == "H"
        assert row_y2[1 + 3] == "T"
        assert row_y5[1 + 5] == "F"

    def test_print_board_skips_head_outside_board(self):
        board = self._state(snake_positions=[(10, 3), (9, 3)], food=None).print_board()
        assert "H" not in board
        assert "T" in board

    def test_to_dict(self):
        data = self._state().to_dict()
        assert data["snake_positions"] == [[3, 3], [3, 2]]
        assert data["food"] == [5, 5]
        assert data["score"] == 2

    def test_repr(self):
        repr_str = repr(self._state())
        assert "tick=4" in repr_str
        assert "length=2" in repr_str
