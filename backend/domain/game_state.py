"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Optional


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: movement ticks processed so far (0-based)
        snake_positions: list of (x, y) from head to tail
        direction: committed direction name, e.g. 'RIGHT'
        food: (x, y) of the active food, or None
        width, height: board dimensions
        score: food eaten in the current round
        rounds_played: number of completed rounds (game overs)
    """

    def __init__(
        self,
        tick_number: int,
        snake_positions: List[Tuple[int, int]],
        direction: str,
        food: Optional[Tuple[int, int]],
        width: int,
        height: int,
        score: int = 0,
        rounds_played: int = 0,
    ):
        self.tick_number = tick_number
        self.snake_positions = snake_positions
        self.direction = direction
        self.food = food
        self.width = width
        self.height = height
        self.score = score
        self.rounds_played = rounds_played

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        T = snake body
        H = snake head
        (0,0) is at the bottom left with x-axis labels at the bottom.
        Cells outside the board (a head that just hit the wall) are skipped.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        # Tail first so the head wins when it overlaps its own body
        for pos_idx in range(len(self.snake_positions) - 1, -1, -1):
            x, y = self.snake_positions[pos_idx]
            if 0 <= x < self.width and 0 <= y < self.height:
                board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = []
        for y in range(self.height - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> dict:
        return {
            "tick_number": self.tick_number,
            "snake_positions": [list(p) for p in self.snake_positions],
            "direction": self.direction,
            "food": list(self.food) if self.food is not None else None,
            "width": self.width,
            "height": self.height,
            "score": self.score,
            "rounds_played": self.rounds_played,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, food={self.food}, "
            f"length={len(self.snake_positions)}, score={self.score}>"
        )
