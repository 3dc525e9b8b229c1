"""
Greedy player implementation - heads for the food along safe turns.
"""

import random
from typing import Optional

from domain.game_state import GameState
from domain.hex_geometry import HexCell, hex_distance
from domain.topology import BoardTopology, StepKind, WrapAxis
from .base import Player, STRAIGHT, TURN_CHOICES, preview_turns, safe_turns


def portal_distance(cell: HexCell, topology: BoardTopology) -> int:
    """Steps from cell to the nearest portal edge."""
    if topology.axis is WrapAxis.HORIZONTAL:
        return topology.radius - abs(cell.q)
    if topology.axis is WrapAxis.DIAGONAL1:
        return topology.radius - abs(cell.r)
    return topology.radius - abs(cell.s)


class GreedyPlayer(Player):
    """
    Picks the safe turn that brings the head closest to the food.

    When the food sits on the other face, the closest portal edge is the
    target instead. Ties prefer going straight, then break at random.
    """

    name = "greedy"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_turn(self, game_state: GameState) -> int:
        valid_turns = safe_turns(game_state)
        if not valid_turns:
            return self.rng.choice(TURN_CHOICES)

        topology = game_state.topology
        food = game_state.food
        outcomes = preview_turns(game_state)
        food_on_other_face = game_state.snake.head.face != food.face
        # Farther than any two cells on the board.
        leave_food_face = 2 * topology.radius + 1

        def cost(delta: int) -> int:
            outcome = outcomes[delta]
            if outcome.kind is StepKind.PORTAL:
                return -1 if food_on_other_face else leave_food_face
            if food_on_other_face:
                return portal_distance(outcome.cell, topology)
            return hex_distance(outcome.cell, food.cell)

        best = min(cost(d) for d in valid_turns)
        candidates = [d for d in valid_turns if cost(d) == best]
        if STRAIGHT in candidates:
            return STRAIGHT
        return self.rng.choice(candidates)
