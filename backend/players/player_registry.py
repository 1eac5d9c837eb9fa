"""
Registry for player implementations.

Maps player keys (e.g., 'random', 'scripted') to player classes.
To add a player, create the module, import it here, and add an entry
to PLAYER_LOADERS.
"""

from typing import Callable, Dict, Type, Optional
from .base import Player


# Lazy imports to avoid circular dependencies
def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_scripted_player() -> Type[Player]:
    from .scripted_player import ScriptedPlayer
    return ScriptedPlayer


PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "random": _get_random_player,
    "scripted": _get_scripted_player,
}

AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of 'random', 'scripted'. If None or empty, returns 'random'.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = "random"

    player_key = player_key.strip().lower()

    if player_key not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_LOADERS[player_key]()


def list_players() -> list:
    """
    Return metadata about all available players.
    """
    return [
        {"key": "random", "description": "Autopilot that picks safe moves, preferring ones toward the food"},
        {"key": "scripted", "description": "Replays a fixed list of directions, then stops giving input"},
    ]
