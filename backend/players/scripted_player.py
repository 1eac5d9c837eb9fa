"""
Scripted player - replays a fixed list of direction requests.
"""

from typing import Iterable, List, Optional, Union

from domain.direction import Direction
from domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):
    """
    Returns one queued direction per call, then None once the script runs out.
    """

    name = "scripted"

    def __init__(self, moves: Iterable[Union[str, Direction]] = ()):
        self.moves: List[Direction] = [Direction.parse(m) for m in moves]
        self._index = 0

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        if self._index >= len(self.moves):
            return None
        move = self.moves[self._index]
        self._index += 1
        return move

    @property
    def remaining(self) -> int:
        return len(self.moves) - self._index
