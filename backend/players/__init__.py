"""
Player implementations for HexSnake.

This module contains the automated pilots that steer the snake in
headless runs.
"""

from .base import Player, safe_turns
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .variant_registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'safe_turns',
    'RandomPlayer',
    'GreedyPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
