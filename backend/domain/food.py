"""
Food placement across both faces of the board.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import BOARD_RADIUS, FACE_A, FACES
from .hex_geometry import HexCell, ORIGIN, iter_board_cells
from .snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Food:
    cell: HexCell
    face: int

    @property
    def key(self) -> Tuple[int, int, int]:
        return (self.cell.q, self.cell.r, self.face)


# Returned only when no free (cell, face) pair is left.
FALLBACK_FOOD = Food(ORIGIN, FACE_A)


class FoodSpawner:
    """
    Places food on a random free (cell, face) pair.

    Attributes:
        rng: random source used for every placement
        radius: board radius
    """

    def __init__(self, rng: Optional[random.Random] = None, radius: int = BOARD_RADIUS):
        self.rng = rng or random.Random()
        self.radius = radius

    def free_positions(self, snake: Snake, restrict_to_face: Optional[int] = None) -> List[Food]:
        faces = FACES if restrict_to_face is None else (restrict_to_face,)
        candidates: List[Food] = []
        for cell in iter_board_cells(self.radius):
            for face in faces:
                if not snake.occupies(cell, face):
                    candidates.append(Food(cell, face))
        return candidates

    def spawn(self, snake: Snake, restrict_to_face: Optional[int] = None) -> Food:
        """
        Return food on a uniformly chosen unoccupied position.

        Args:
            snake: current snake; its segments are never chosen
            restrict_to_face: only consider this face when given

        Returns:
            A Food. If the board (or the requested face) is full, the origin
            on face A is returned and a warning is logged.
        """
        candidates = self.free_positions(snake, restrict_to_face)
        if not candidates:
            logger.warning(
                "No free cell left for food (snake length %d, face %s); "
                "falling back to the origin",
                len(snake),
                "any" if restrict_to_face is None else restrict_to_face,
            )
            return FALLBACK_FOOD
        return self.rng.choice(candidates)
