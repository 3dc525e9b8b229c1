"""
Random player implementation - picks random safe turns.
"""

import random
from typing import Optional

from domain.game_state import GameState
from .base import Player, TURN_CHOICES, safe_turns


class RandomPlayer(Player):
    """
    A random pilot that picks a turn that avoids walls and self-collisions.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_turn(self, game_state: GameState) -> int:
        valid_turns = safe_turns(game_state)

        # If no valid turns, just return a random one (we'll die anyway)
        if not valid_turns:
            return self.rng.choice(TURN_CHOICES)

        return self.rng.choice(valid_turns)
