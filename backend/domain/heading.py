"""
Headings on the hex grid.

The six headings are cyclically ordered clockwise starting from RIGHT, so
turning right is +1 and turning left is -1 (mod 6).
"""

from enum import IntEnum
from typing import Tuple

from .constants import VALID_TURNS
from .hex_geometry import HexCell


class Heading(IntEnum):
    RIGHT = 0
    DOWN_RIGHT = 1
    DOWN_LEFT = 2
    LEFT = 3
    UP_LEFT = 4
    UP_RIGHT = 5


# Axial (dq, dr) offsets, indexed by Heading
DIRECTION_VECTORS: Tuple[Tuple[int, int], ...] = (
    (1, 0),    # RIGHT
    (0, 1),    # DOWN_RIGHT
    (-1, 1),   # DOWN_LEFT
    (-1, 0),   # LEFT
    (0, -1),   # UP_LEFT
    (1, -1),   # UP_RIGHT
)


def rotate(heading: Heading, delta: int) -> Heading:
    """
    Turn one step left (-1) or right (+1).

    Raises:
        ValueError: if delta is anything other than -1 or +1. Absolute jumps
            between headings are not allowed.
    """
    if delta not in VALID_TURNS:
        raise ValueError(f"Invalid turn {delta!r}; expected -1 or +1")
    return Heading((int(heading) + delta + 6) % 6)


def unit_vector(heading: Heading) -> Tuple[int, int]:
    return DIRECTION_VECTORS[int(heading)]


def opposite(heading: Heading) -> Heading:
    return Heading((int(heading) + 3) % 6)


def step(cell: HexCell, heading: Heading) -> HexCell:
    """Return the neighbour of cell in the given heading (may be off-board)."""
    dq, dr = unit_vector(heading)
    return HexCell(cell.q + dq, cell.r + dr)
