"""
Board topology: which boundary edges are portals and where they lead.

The board has three pairs of opposite edges. One pair (the session's
WrapAxis) acts as a portal to the other face; every other boundary edge
is a wall. Crossing a portal mirrors the head across the axis of symmetry
between the two edges and reflects its heading back into the board.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from .constants import BOARD_RADIUS
from .heading import Heading, opposite, step
from .hex_geometry import HexCell, is_on_board

logger = logging.getLogger(__name__)


class WrapAxis(Enum):
    HORIZONTAL = "horizontal"   # edges q = -R and q = R
    DIAGONAL1 = "diagonal1"     # edges r = R and r = -R
    DIAGONAL2 = "diagonal2"     # edges s = R and s = -R

    @classmethod
    def from_name(cls, name: str) -> "WrapAxis":
        key = str(name).strip().lower()
        for axis in cls:
            if axis.value == key:
                return axis
        available = ", ".join(a.value for a in cls)
        raise ValueError(f"Unknown wrap axis '{name}'. Available axes: {available}")


EdgeCheck = Callable[[HexCell, int], bool]

EDGE_CHECKS: Dict[WrapAxis, Tuple[EdgeCheck, EdgeCheck]] = {
    WrapAxis.HORIZONTAL: (
        lambda c, radius: c.q == -radius,
        lambda c, radius: c.q == radius,
    ),
    WrapAxis.DIAGONAL1: (
        lambda c, radius: c.r == radius,
        lambda c, radius: c.r == -radius,
    ),
    WrapAxis.DIAGONAL2: (
        lambda c, radius: c.s == radius,
        lambda c, radius: c.s == -radius,
    ),
}

# Mirror image of a heading across each axis, indexed by Heading.
HEADING_REFLECTIONS: Dict[WrapAxis, Tuple[int, ...]] = {
    WrapAxis.HORIZONTAL: (3, 2, 1, 0, 5, 4),
    WrapAxis.DIAGONAL1: (0, 5, 4, 3, 2, 1),
    WrapAxis.DIAGONAL2: (4, 3, 2, 1, 0, 5),
}


def mirror_raw(cell: HexCell, axis: WrapAxis) -> HexCell:
    """Reflect a cell across the axis of symmetry (no clamping)."""
    if axis is WrapAxis.HORIZONTAL:
        return HexCell(-cell.q, cell.r)
    if axis is WrapAxis.DIAGONAL1:
        return HexCell(cell.q, -cell.r)
    return HexCell(-cell.r, -cell.q)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class StepKind(Enum):
    NORMAL = "normal"
    BLOCKED = "blocked"
    PORTAL = "portal"


@dataclass(frozen=True)
class StepOutcome:
    """
    Result of trying to move one cell forward.

    Attributes:
        kind: NORMAL, BLOCKED or PORTAL
        cell: the cell the head lands on (None when BLOCKED)
        heading: heading after the step (None when BLOCKED)
    """

    kind: StepKind
    cell: Optional[HexCell] = None
    heading: Optional[Heading] = None

    @property
    def is_fatal(self) -> bool:
        return self.kind is StepKind.BLOCKED


class BoardTopology:
    """
    The two-faced hex board with one fixed pair of portal edges.

    Attributes:
        axis: the WrapAxis whose edges are portals
        radius: board radius
    """

    def __init__(self, axis: WrapAxis, radius: int = BOARD_RADIUS):
        self.axis = axis
        self.radius = radius

    @classmethod
    def random(cls, rng: random.Random, radius: int = BOARD_RADIUS) -> "BoardTopology":
        """Pick the portal axis uniformly at random."""
        axis = rng.choice(list(WrapAxis))
        logger.debug("Selected wrap axis %s", axis.value)
        return cls(axis, radius)

    def is_on_board(self, cell: HexCell) -> bool:
        return is_on_board(cell, self.radius)

    def is_portal_cell(self, cell: HexCell) -> bool:
        return any(check(cell, self.radius) for check in EDGE_CHECKS[self.axis])

    def is_boundary_cell(self, cell: HexCell) -> bool:
        """True for cells on any of the six edges, portal or wall."""
        return any(
            check(cell, self.radius)
            for checks in EDGE_CHECKS.values()
            for check in checks
        )

    def is_wall_cell(self, cell: HexCell) -> bool:
        return self.is_boundary_cell(cell) and not self.is_portal_cell(cell)

    def mirror(self, cell: HexCell) -> HexCell:
        """
        Mirror a cell across the portal axis, landing on the board.

        At the extreme corners the reflected cell can fall outside the
        hexagon; it is then moved one step toward the origin on each
        nonzero axis.
        """
        mirrored = mirror_raw(cell, self.axis)
        if not self.is_on_board(mirrored):
            mirrored = HexCell(
                mirrored.q - _sign(mirrored.q),
                mirrored.r - _sign(mirrored.r),
            )
        return mirrored

    def reflect_heading(self, heading: Heading) -> Heading:
        """Mirror the heading across the axis, then point it back inward."""
        reflected = Heading(HEADING_REFLECTIONS[self.axis][int(heading)])
        return opposite(reflected)

    def classify_step(self, cell: HexCell, heading: Heading) -> StepOutcome:
        nxt = step(cell, heading)
        if self.is_on_board(nxt):
            return StepOutcome(StepKind.NORMAL, nxt, heading)
        if self.is_portal_cell(cell):
            return StepOutcome(StepKind.PORTAL, self.mirror(cell), self.reflect_heading(heading))
        return StepOutcome(StepKind.BLOCKED)

    def __repr__(self):
        return f"<BoardTopology axis={self.axis.value}, radius={self.radius}>"
