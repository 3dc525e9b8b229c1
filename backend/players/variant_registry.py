"""
Registry for automated pilots.

Maps player keys (e.g., 'random', 'greedy') to player classes. To add a
pilot, create a module with a Player subclass, import it here, and add an
entry to PLAYER_LOADERS.
"""

from typing import Callable, Dict, List, Optional, Type

from .base import Player


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_greedy_player() -> Type[Player]:
    from .greedy_player import GreedyPlayer
    return GreedyPlayer


# Registry: maps player key -> callable that returns the player class
PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "random": _get_random_player,
    "greedy": _get_greedy_player,
}

# Canonical list of available player keys (for CLI choices)
AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())


def get_player_class(key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        key: One of 'random', 'greedy'. If None or empty, returns 'greedy'.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If key is not recognized.
    """
    if not key or key.strip() == "":
        key = "greedy"

    key = key.strip().lower()

    if key not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{key}'. Available players: {available}"
        )

    return PLAYER_LOADERS[key]()


def list_players() -> List[Dict[str, str]]:
    """
    Return metadata about all available pilots.

    Returns:
        List of dicts with 'key' and 'description' for each player.
    """
    return [
        {"key": "random", "description": "Random safe turn each tick"},
        {"key": "greedy", "description": "Safe turn closest to the food, crossing faces via portals"},
    ]
