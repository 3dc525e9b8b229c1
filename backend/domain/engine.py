"""
Per-tick state transitions for HexSnake.

Every function here is pure with respect to GameState: it takes a state and
returns a new one. Randomness only enters through the injected rng or
FoodSpawner, so a seeded random.Random makes whole games reproducible.
"""

import logging
import random
import time
from typing import Optional

from .constants import (
    BOARD_RADIUS,
    DEATH_SELF,
    DEATH_WALL,
    EAT_EFFECT_MS,
    FACE_A,
    FOOD_SCORE,
)
from .food import Food, FoodSpawner
from .game_state import FoodEatenEvent, GameState, Lifecycle
from .heading import Heading, rotate
from .hex_geometry import hex_to_pixel
from .snake import BodySegment, Snake
from .topology import BoardTopology, StepKind, WrapAxis, mirror_raw

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def new_game(
    rng: Optional[random.Random] = None,
    axis: Optional[WrapAxis] = None,
    radius: int = BOARD_RADIUS,
    lifecycle: Lifecycle = Lifecycle.RUNNING,
    spawner: Optional[FoodSpawner] = None,
) -> GameState:
    """
    Create the canonical starting state.

    Args:
        rng: random source for the axis choice and the first food
        axis: portal axis; drawn uniformly from rng when omitted
        radius: board radius
        lifecycle: RUNNING for start/restart, NOT_STARTED for a title screen
        spawner: food spawner; built from rng when omitted
    """
    rng = rng or random.Random()
    if axis is None:
        axis = BoardTopology.random(rng, radius).axis
    spawner = spawner or FoodSpawner(rng, radius)

    snake = Snake.initial()
    state = GameState(
        snake=snake,
        food=spawner.spawn(snake),
        heading=Heading.RIGHT,
        axis=axis,
        current_face=FACE_A,
        lifecycle=lifecycle,
        radius=radius,
    )
    logger.info("New game on axis %s, food at %s", axis.value, state.food.key)
    return state


def turn(state: GameState, delta: int) -> GameState:
    """Rotate the heading one step; ignored unless the game is running."""
    if not state.is_running:
        return state
    return state.evolve(heading=rotate(state.heading, delta))


def _food_after_wrap(
    food: Food,
    topology: BoardTopology,
    snake: Snake,
    face: int,
    spawner: FoodSpawner,
) -> Food:
    """Carry the food through a wrap so it keeps its place relative to the board."""
    mirrored = mirror_raw(food.cell, topology.axis)
    if topology.is_on_board(mirrored):
        return Food(mirrored, face)
    return spawner.spawn(snake, face)


def tick(
    state: GameState,
    spawner: FoodSpawner,
    now_ms: Optional[int] = None,
) -> GameState:
    """
    Advance the game by one step.

    1) Classify the head's next step (normal, portal or wall)
    2) End the game on a wall or on the snake's own body
    3) Move the head, wrapping to the other face through a portal
    4) Carry the food through a wrap
    5) Eat (grow + score + new food) or drop the tail

    The spawner is required: it carries the game's seeded rng.
    """
    if not state.is_running:
        logger.debug("Ignoring tick while %s", state.lifecycle.value)
        return state

    topology = state.topology

    head = state.snake.head
    outcome = topology.classify_step(head.cell, state.heading)

    if outcome.kind is StepKind.BLOCKED:
        logger.info("Game over: hit the wall at %s heading %s", head, state.heading.name)
        return state.evolve(lifecycle=Lifecycle.OVER, death_reason=DEATH_WALL)

    wrapped = outcome.kind is StepKind.PORTAL
    new_face = 1 - head.face if wrapped else head.face
    new_head = BodySegment(outcome.cell, new_face)

    if state.snake.occupies(new_head.cell, new_head.face):
        logger.info("Game over: ran into itself at %s", new_head)
        return state.evolve(lifecycle=Lifecycle.OVER, death_reason=DEATH_SELF)

    grown = state.snake.advance(new_head, grow=True)

    food = state.food
    wrap_grace = state.wrap_grace
    if wrapped:
        wrap_grace = 1
        food = _food_after_wrap(state.food, topology, grown, new_face, spawner)
        logger.debug(
            "Wrapped %s -> %s, heading %s -> %s",
            head, new_head, state.heading.name, outcome.heading.name,
        )
    elif wrap_grace > 0:
        wrap_grace -= 1

    score = state.score
    eat_event = state.eat_event
    if new_head.key == state.food.key:
        score += FOOD_SCORE
        snake = grown
        food = spawner.spawn(snake)
        now_ms = _now_ms() if now_ms is None else now_ms
        x, y = hex_to_pixel(new_head.cell)
        eat_event = FoodEatenEvent(
            cell=new_head.cell,
            face=new_face,
            x=x,
            y=y,
            timestamp=now_ms,
            expires_at=now_ms + EAT_EFFECT_MS,
        )
        logger.debug("Ate food at %s, score %d", new_head, score)
    else:
        snake = state.snake.advance(new_head, grow=False)

    return state.evolve(
        snake=snake,
        food=food,
        heading=outcome.heading,
        current_face=new_face if wrapped else state.current_face,
        score=score,
        wrap_grace=wrap_grace,
        eat_event=eat_event,
        tick_count=state.tick_count + 1,
    )
