"""
Movement directions and the reversal-filtering direction state.
"""

from enum import Enum
from typing import Tuple, Union


class Direction(str, Enum):
    LEFT = "LEFT"
    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step as (dx, dy). Up => y + 1."""
        return _DELTAS[self]

    @classmethod
    def parse(cls, value: Union[str, "Direction"]) -> "Direction":
        """Accept 'up', 'UP', ' Up ' or a Direction; raise ValueError otherwise."""
        if isinstance(value, Direction):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            valid = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown direction '{value}'. Expected one of: {valid}") from None


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
}


class DirectionState:
    """
    Tracks the direction requested by input against the direction actually moved.

    Attributes:
        committed: direction used by the most recent movement tick
        pending: latest accepted request, never the opposite of `committed`
    """

    def __init__(self, direction: Direction):
        self.committed = direction
        self.pending = direction

    def set_pending(self, requested: Direction) -> bool:
        """
        Store `requested` unless it would reverse into the neck.

        Returns:
            True if the request was accepted, False if it was filtered out.
        """
        if requested == self.committed.opposite():
            return False
        self.pending = requested
        return True

    def commit(self) -> Direction:
        self.committed = self.pending
        return self.committed

    def __repr__(self):
        return f"<DirectionState committed={self.committed.value} pending={self.pending.value}>"
