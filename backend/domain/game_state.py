"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .constants import BOARD_RADIUS, FACE_A, FACE_NAMES
from .food import Food
from .heading import Heading
from .hex_geometry import HexCell, is_on_board
from .snake import Snake
from .topology import BoardTopology, WrapAxis


class Lifecycle(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class FoodEatenEvent:
    """
    Transient record of the last food eaten, shown until it expires.

    Attributes:
        cell, face: where the head was when it ate
        x, y: pixel position of that cell for the effect overlay
        timestamp: when it was eaten (ms)
        expires_at: when the renderer should stop showing it (ms)
    """

    cell: HexCell
    face: int
    x: float
    y: float
    timestamp: int
    expires_at: int

    def is_active(self, now_ms: int) -> bool:
        return now_ms < self.expires_at


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        snake: the snake, head first
        food: the single food item
        heading: current heading of the head
        axis: portal axis, fixed for the whole session
        current_face: face being displayed; flips only when the snake wraps
        score: points so far (multiples of 10)
        lifecycle: NOT_STARTED, RUNNING or OVER
        wrap_grace: set to 1 on a wrap and counted down on the next tick
        eat_event: food-eaten effect, or None
        tick_count: ticks processed so far
        death_reason: 'wall' or 'self' once the game is over
        radius: board radius
    """

    snake: Snake
    food: Food
    heading: Heading
    axis: WrapAxis
    current_face: int = FACE_A
    score: int = 0
    lifecycle: Lifecycle = Lifecycle.RUNNING
    wrap_grace: int = 0
    eat_event: Optional[FoodEatenEvent] = None
    tick_count: int = 0
    death_reason: Optional[str] = None
    radius: int = BOARD_RADIUS

    @property
    def is_running(self) -> bool:
        return self.lifecycle is Lifecycle.RUNNING

    @property
    def is_over(self) -> bool:
        return self.lifecycle is Lifecycle.OVER

    @property
    def topology(self) -> BoardTopology:
        return BoardTopology(self.axis, self.radius)

    def evolve(self, **changes) -> "GameState":
        return replace(self, **changes)

    def clear_expired_event(self, now_ms: int) -> "GameState":
        """Drop the food-eaten event once its display time is over."""
        if self.eat_event is not None and not self.eat_event.is_active(now_ms):
            return replace(self, eat_event=None)
        return self

    def print_board(self, face: Optional[int] = None) -> str:
        """
        Returns a string representation of one face of the board with:
        . = empty cell
        # = wall cell
        ~ = portal cell
        * = food
        ? = food on the other face
        @ = snake head
        o = snake body
        Each row r is indented so that neighbouring rows interlock.
        """
        if face is None:
            face = self.current_face
        topology = self.topology
        radius = self.radius

        marks: Dict[Tuple[int, int], str] = {}
        for idx, segment in enumerate(self.snake):
            if segment.face != face:
                continue
            key = segment.cell.as_tuple()
            if idx == 0:
                marks[key] = "@"
            else:
                marks.setdefault(key, "o")
        food_key = self.food.cell.as_tuple()
        if food_key not in marks:
            marks[food_key] = "*" if self.food.face == face else "?"

        result = [f"Face {FACE_NAMES.get(face, face)} (axis {self.axis.value}, score {self.score})"]
        for r in range(-radius, radius + 1):
            row = []
            for q in range(-radius, radius + 1):
                cell = HexCell(q, r)
                if not is_on_board(cell, radius):
                    continue
                mark = marks.get((q, r))
                if mark is None:
                    if topology.is_portal_cell(cell):
                        mark = "~"
                    elif topology.is_wall_cell(cell):
                        mark = "#"
                    else:
                        mark = "."
                row.append(mark)
            result.append(" " * abs(r) + " ".join(row))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation used for replays."""
        return {
            "tick": self.tick_count,
            "snake": self.snake.to_list(),
            "food": list(self.food.key),
            "heading": self.heading.name,
            "axis": self.axis.value,
            "current_face": self.current_face,
            "score": self.score,
            "lifecycle": self.lifecycle.value,
            "wrap_grace": self.wrap_grace,
            "death_reason": self.death_reason,
            "eat_event": None if self.eat_event is None else {
                "cell": list(self.eat_event.cell.as_tuple()),
                "face": self.eat_event.face,
                "x": self.eat_event.x,
                "y": self.eat_event.y,
                "timestamp": self.eat_event.timestamp,
                "expires_at": self.eat_event.expires_at,
            },
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_count}, lifecycle={self.lifecycle.value}, "
            f"head={self.snake.head}, heading={self.heading.name}, "
            f"food={self.food.key}, score={self.score}>"
        )
