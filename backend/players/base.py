"""
Base player interface for the game engine.
"""

from typing import Dict, List

from domain.constants import TURN_LEFT, TURN_RIGHT
from domain.game_state import GameState
from domain.heading import rotate
from domain.topology import StepKind, StepOutcome

# Turn choices a pilot may return: left, straight on, right.
STRAIGHT = 0
TURN_CHOICES = (TURN_LEFT, STRAIGHT, TURN_RIGHT)


def preview_turns(game_state: GameState) -> Dict[int, StepOutcome]:
    """Return the step outcome for each of the three turn choices."""
    topology = game_state.topology
    head = game_state.snake.head
    outcomes = {}
    for delta in TURN_CHOICES:
        heading = game_state.heading if delta == STRAIGHT else rotate(game_state.heading, delta)
        outcomes[delta] = topology.classify_step(head.cell, heading)
    return outcomes


def landing_face(game_state: GameState, outcome: StepOutcome) -> int:
    face = game_state.snake.head.face
    return 1 - face if outcome.kind is StepKind.PORTAL else face


def safe_turns(game_state: GameState) -> List[int]:
    """
    Turns that survive the next tick.

    A turn is unsafe if it runs into a wall, onto any current body
    segment (the tail included, since it only moves after the check), or
    through a portal whose landing cell is still off the board.
    """
    topology = game_state.topology
    safe = []
    for delta, outcome in preview_turns(game_state).items():
        if outcome.is_fatal or not topology.is_on_board(outcome.cell):
            continue
        if game_state.snake.occupies(outcome.cell, landing_face(game_state, outcome)):
            continue
        safe.append(delta)
    return safe


class Player:
    """
    Base class/interface for automated pilots.

    Each player returns a turn (-1 left, 0 straight, +1 right) given the
    current game state. The session applies it before the next tick.
    """

    name = "base"

    def get_turn(self, game_state: GameState) -> int:
        """
        Return a turn given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: -1, 0, 1
        """
        raise NotImplementedError
