"""
Hexagonal board geometry in axial coordinates.

A cell is addressed by (q, r) with the implicit third cube coordinate
s = -q - r. The board is the regular hexagon of the given radius centred
on (0, 0).
"""

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from .constants import BOARD_RADIUS, HEX_SIZE


@dataclass(frozen=True)
class HexCell:
    """
    Immutable axial hex coordinate.

    Attributes:
        q: column coordinate
        r: row coordinate
    """

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def as_tuple(self) -> Tuple[int, int]:
        return (self.q, self.r)

    def __repr__(self):
        return f"({self.q}, {self.r})"


ORIGIN = HexCell(0, 0)


def is_on_board(cell: HexCell, radius: int = BOARD_RADIUS) -> bool:
    """Return True if the cell lies inside the hexagon of the given radius."""
    return (
        abs(cell.q) <= radius
        and abs(cell.r) <= radius
        and abs(cell.q + cell.r) <= radius
    )


def iter_board_cells(radius: int = BOARD_RADIUS) -> Iterator[HexCell]:
    """Iterate over every on-board cell, column by column."""
    for q in range(-radius, radius + 1):
        r1 = max(-radius, -q - radius)
        r2 = min(radius, -q + radius)
        for r in range(r1, r2 + 1):
            yield HexCell(q, r)



def hex_distance(a: HexCell, b: HexCell) -> int:
    """Number of steps between two cells on the same face."""
    return max(abs(a.q - b.q), abs(a.r - b.r), abs(a.s - b.s))


def hex_to_pixel(cell: HexCell, size: float = HEX_SIZE) -> Tuple[float, float]:
    """Project a flat-topped hex cell to the 2-D position of its centre."""
    x = size * (3 / 2 * cell.q)
    y = size * (math.sqrt(3) / 2 * cell.q + math.sqrt(3) * cell.r)
    return x, y
