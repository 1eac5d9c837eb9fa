"""
Player implementations.

This module contains the player abstraction and implementations
that feed direction requests into the game.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .player_registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
