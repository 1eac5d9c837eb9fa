"""
Base player interface - the source of direction requests.
"""

from typing import Optional

from domain.direction import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for whatever steers the snake.

    A player is sampled once per frame; returning None means "no input",
    which leaves the pending direction unchanged.
    """

    name = "player"

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return a direction request given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, or None for no input this frame
        """
        raise NotImplementedError
