"""
Grid primitives: arena bounds, cell positions and logical sizes.
"""

from dataclasses import dataclass

from .constants import ARENA_WIDTH, ARENA_HEIGHT


@dataclass(frozen=True)
class Position:
    """A grid cell. May sit outside the arena for the tick a wall hit is detected."""

    x: int
    y: int

    def step(self, direction) -> "Position":
        """Return the neighbouring cell one unit step in `direction`."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)

    def as_tuple(self):
        return (self.x, self.y)


@dataclass(frozen=True)
class Size:
    """Square scale factor relative to one arena cell."""

    width: float
    height: float

    @classmethod
    def square(cls, value: float) -> "Size":
        return cls(value, value)


@dataclass(frozen=True)
class GridConfig:
    """
    Static arena dimensions.

    Attributes:
        width: number of columns, x in [0, width)
        height: number of rows, y in [0, height)
    """

    width: int = ARENA_WIDTH
    height: int = ARENA_HEIGHT

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}."
            )

    def contains(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def cells(self):
        """Iterate every in-bounds cell, row by row from the bottom."""
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)


@dataclass(frozen=True)
class Renderable:
    """What the presentation layer needs to draw one cell-sized thing."""

    kind: str  # 'head', 'segment' or 'food'
    position: Position
    size: Size
