"""
Domain entities for the HexSnake game engine.

This module contains the board topology, the snake and food entities and
the per-tick transition function. None of it does any I/O.
"""

from .constants import BOARD_RADIUS, TICK_MS, FOOD_SCORE, FACE_A, FACE_B
from .hex_geometry import HexCell, is_on_board, iter_board_cells
from .heading import Heading, rotate, unit_vector
from .topology import BoardTopology, WrapAxis, StepKind, StepOutcome
from .snake import BodySegment, Snake
from .food import Food, FoodSpawner
from .game_state import GameState, Lifecycle, FoodEatenEvent
from .engine import new_game, tick, turn

__all__ = [
    'BOARD_RADIUS', 'TICK_MS', 'FOOD_SCORE', 'FACE_A', 'FACE_B',
    'HexCell', 'is_on_board', 'iter_board_cells',
    'Heading', 'rotate', 'unit_vector',
    'BoardTopology', 'WrapAxis', 'StepKind', 'StepOutcome',
    'BodySegment', 'Snake',
    'Food', 'FoodSpawner',
    'GameState', 'Lifecycle', 'FoodEatenEvent',
    'new_game', 'tick', 'turn',
]
