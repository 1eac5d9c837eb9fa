"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.direction import Direction
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a direction avoiding walls, its own body
    and an immediate reversal.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]
        current = Direction(game_state.direction)

        # Filter out moves that:
        # 1. Reverse into the neck (the engine would ignore them anyway)
        # 2. Hit walls
        # 3. Hit own body; the tail cell counts, it is checked before the shift
        valid_moves: List[Direction] = []
        for move in Direction:
            if move == current.opposite():
                continue

            dx, dy = move.delta
            new_x, new_y = head_x + dx, head_y + dy
            if (new_x < 0 or new_x >= game_state.width or
                new_y < 0 or new_y >= game_state.height):
                continue

            if (new_x, new_y) in snake_positions[1:]:
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return current

        # Head for the food when one of the safe moves gets closer
        if game_state.food is not None:
            fx, fy = game_state.food
            closer = [
                m for m in valid_moves
                if abs(head_x + m.delta[0] - fx) + abs(head_y + m.delta[1] - fy)
                < abs(head_x - fx) + abs(head_y - fy)
            ]
            if closer:
                return self.rng.choice(closer)

        return self.rng.choice(valid_moves)
