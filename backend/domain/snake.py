"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Optional, Tuple, Union

from .constants import START_HEAD, START_BODY, START_DIRECTION, HEAD_SIZE, SEGMENT_SIZE
from .direction import Direction, DirectionState
from .grid import Position, Renderable, Size

PositionLike = Union[Position, Tuple[int, int]]

MIN_LENGTH = 2


def _as_position(value: PositionLike) -> Position:
    if isinstance(value, Position):
        return value
    x, y = value
    return Position(x, y)


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Position from head at index 0 to tail at the end
        direction: committed/pending direction state
        last_tail_position: cell the tail vacated on the most recent move
    """

    def __init__(
        self,
        positions: Iterable[PositionLike],
        direction: Union[Direction, str] = START_DIRECTION,
    ):
        self.positions = deque(_as_position(p) for p in positions)
        if len(self.positions) < MIN_LENGTH:
            raise ValueError(
                f"A snake needs at least {MIN_LENGTH} segments, got {len(self.positions)}."
            )
        self.direction = DirectionState(Direction.parse(direction))
        self.last_tail_position: Optional[Position] = None

    @classmethod
    def default(cls) -> "Snake":
        """A fresh two-segment snake at the start position."""
        return cls([START_HEAD] + START_BODY, START_DIRECTION)

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        if not self.positions:
            raise RuntimeError("Snake body is empty; it must always hold a head.")
        return self.positions[0]

    @property
    def tail(self) -> Position:
        if not self.positions:
            raise RuntimeError("Snake body is empty; it must always hold a tail.")
        return self.positions[-1]

    @property
    def committed_direction(self) -> Direction:
        return self.direction.committed

    @property
    def pending_direction(self) -> Direction:
        return self.direction.pending

    def occupies(self, position: Position) -> bool:
        return position in self.positions

    def renderables(self) -> List[Renderable]:
        head_size = Size.square(HEAD_SIZE)
        segment_size = Size.square(SEGMENT_SIZE)
        return [
            Renderable("head" if i == 0 else "segment", pos, head_size if i == 0 else segment_size)
            for i, pos in enumerate(self.positions)
        ]

    def __len__(self):
        return len(self.positions)

    def __repr__(self):
        return (
            f"<Snake head={self.head.as_tuple()} length={len(self)} "
            f"direction={self.committed_direction.value}>"
        )
