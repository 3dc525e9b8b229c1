"""
Snake entity for the game engine.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Set, Tuple

from .constants import FACE_A, INITIAL_SNAKE
from .hex_geometry import HexCell


@dataclass(frozen=True)
class BodySegment:
    """One cell of the snake's body on one face."""

    cell: HexCell
    face: int

    @property
    def key(self) -> Tuple[int, int, int]:
        return (self.cell.q, self.cell.r, self.face)

    def __repr__(self):
        return f"({self.cell.q}, {self.cell.r}, {self.face})"


class Snake:
    """
    Represents the snake on the two-faced board.

    Instances are immutable: moving the snake returns a new Snake.

    Attributes:
        segments: tuple of BodySegment from head at index 0 to tail at the end
    """

    __slots__ = ("segments", "_occupied")

    def __init__(self, segments: Iterable[BodySegment]):
        self.segments: Tuple[BodySegment, ...] = tuple(segments)
        if not self.segments:
            raise ValueError("A snake needs at least one segment.")
        self._occupied: Set[Tuple[int, int, int]] = {s.key for s in self.segments}

    @classmethod
    def initial(cls) -> "Snake":
        return cls(BodySegment(HexCell(q, r), FACE_A) for q, r in INITIAL_SNAKE)

    @classmethod
    def from_tuples(cls, positions: Iterable[Tuple[int, int, int]]) -> "Snake":
        """Build a snake from (q, r, face) triples, head first."""
        return cls(BodySegment(HexCell(q, r), face) for q, r, face in positions)

    @property
    def head(self) -> BodySegment:
        """Return the head segment (first element)."""
        return self.segments[0]

    def occupies(self, cell: HexCell, face: int) -> bool:
        return (cell.q, cell.r, face) in self._occupied

    def advance(self, new_head: BodySegment, grow: bool) -> "Snake":
        """Prepend a head; drop the tail unless growing."""
        body = self.segments if grow else self.segments[:-1]
        return Snake((new_head,) + body)

    def to_list(self) -> List[Tuple[int, int, int]]:
        return [s.key for s in self.segments]

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[BodySegment]:
        return iter(self.segments)

    def __eq__(self, other) -> bool:
        return isinstance(other, Snake) and self.segments == other.segments

    def __hash__(self) -> int:
        return hash(self.segments)

    def __repr__(self):
        return f"<Snake length={len(self.segments)}, head={self.head}>"
