"""
Tests for domain.engine - the per-tick state transition.

These tests pin down movement, wrapping, collisions, growth and food
handling on the radius-15 board.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import DEATH_SELF, DEATH_WALL, EAT_EFFECT_MS
from domain.engine import new_game, tick, turn
from domain.food import Food, FoodSpawner
from domain.game_state import GameState, Lifecycle
from domain.heading import Heading
from domain.hex_geometry import HexCell, hex_to_pixel
from domain.snake import BodySegment, Snake
from domain.topology import WrapAxis


def make_state(body, food, heading=Heading.RIGHT, axis=WrapAxis.HORIZONTAL, **kwargs):
    """Build a running state from (q, r, face) triples."""
    return GameState(
        snake=Snake.from_tuples(body),
        food=Food(HexCell(food[0], food[1]), food[2]),
        heading=heading,
        axis=axis,
        **kwargs,
    )


@pytest.fixture
def spawner():
    return FoodSpawner(random.Random(1234))


class TestNewGame:
    """Tests for the starting state."""

    def test_canonical_start(self):
        state = new_game(random.Random(1))
        assert state.snake.to_list() == [(0, 0, 0), (-1, 0, 0), (-2, 0, 0)]
        assert state.heading is Heading.RIGHT
        assert state.score == 0
        assert state.lifecycle is Lifecycle.RUNNING
        assert state.current_face == 0
        assert state.wrap_grace == 0
        assert state.eat_event is None
        assert not state.snake.occupies(state.food.cell, state.food.face)

    def test_axis_is_drawn_from_rng(self):
        """The same seed picks the same axis and food."""
        a = new_game(random.Random(99))
        b = new_game(random.Random(99))
        assert a.axis is b.axis
        assert a.food == b.food

    def test_explicit_axis(self):
        assert new_game(random.Random(0), axis=WrapAxis.DIAGONAL1).axis is WrapAxis.DIAGONAL1

    def test_not_started_lifecycle(self):
        state = new_game(random.Random(0), lifecycle=Lifecycle.NOT_STARTED)
        assert not state.is_running


class TestTurn:

    def test_turn_left_and_right(self):
        state = new_game(random.Random(0))
        assert turn(state, -1).heading is Heading.UP_RIGHT
        assert turn(state, 1).heading is Heading.DOWN_RIGHT

    def test_turn_returns_new_state(self):
        state = new_game(random.Random(0))
        turned = turn(state, 1)
        assert turned is not state
        assert state.heading is Heading.RIGHT

    def test_turn_ignored_when_over(self):
        state = new_game(random.Random(0)).evolve(lifecycle=Lifecycle.OVER)
        assert turn(state, 1) is state

    def test_turn_rejects_big_jumps(self):
        with pytest.raises(ValueError):
            turn(new_game(random.Random(0)), 3)


class TestNormalMove:
    """Tests for ticks that stay on one face."""

    def test_move_keeps_length_and_score(self, spawner):
        state = make_state([(0, 0, 0), (-1, 0, 0), (-2, 0, 0)], (5, 5, 1))
        new_state = tick(state, spawner, now_ms=0)

        assert new_state.snake.to_list() == [(1, 0, 0), (0, 0, 0), (-1, 0, 0)]
        assert new_state.score == 0
        assert len(new_state.snake) == len(state.snake)
        assert new_state.food == state.food
        assert new_state.heading is Heading.RIGHT
        assert new_state.lifecycle is Lifecycle.RUNNING
        assert new_state.tick_count == 1

    def test_original_state_untouched(self, spawner):
        state = make_state([(0, 0, 0), (-1, 0, 0), (-2, 0, 0)], (5, 5, 1))
        tick(state, spawner, now_ms=0)
        assert state.snake.to_list() == [(0, 0, 0), (-1, 0, 0), (-2, 0, 0)]
        assert state.tick_count == 0

    def test_grace_counts_down(self, spawner):
        state = make_state([(0, 0, 0), (-1, 0, 0), (-2, 0, 0)], (5, 5, 1), wrap_grace=1)
        assert tick(state, spawner, now_ms=0).wrap_grace == 0

    def test_grace_stays_at_zero(self, spawner):
        state = make_state([(0, 0, 0), (-1, 0, 0), (-2, 0, 0)], (5, 5, 1))
        assert tick(state, spawner, now_ms=0).wrap_grace == 0

    def test_display_face_unchanged_without_wrap(self, spawner):
        """current_face only follows the snake when it wraps."""
        state = make_state([(0, 0, 1), (-1, 0, 1), (-2, 0, 1)], (5, 5, 1), current_face=0)
        assert tick(state, spawner, now_ms=0).current_face == 0


class TestEating:
    """Tests for food consumption and growth."""

    def test_eat_on_first_tick(self, spawner):
        """Head moves onto food: score +10, length +1, new food elsewhere."""
        state = make_state([(0, 0, 0), (-1, 0, 0), (-2, 0, 0)], (1, 0, 0))
        new_state = tick(state, spawner, now_ms=1000)

        assert new_state.score == 10
        assert len(new_state.snake) == 4
        assert new_state.snake.to_list() == [(1, 0, 0), (0, 0, 0), (-1, 0, 0), (-2, 0, 0)]
        assert new_state.food != state.food
        assert not new_state.snake.occupies(new_state.food.cell, new_state.food.face)

    def test_eat_event(self, spawner):
        state = make_state([(0, 0, 0), (-1, 0, 0), (-2, 0, 0)], (1, 0, 0))
        event = tick(state, spawner, now_ms=1000).eat_event

        assert event is not None
        assert event.cell == HexCell(1, 0)
        assert event.face == 0
        assert (event.x, event.y) == hex_to_pixel(HexCell(1, 0))
        assert event.timestamp == 1000
        assert event.expires_at == 1000 + EAT_EFFECT_MS
        assert event.is_active(1200)
        assert not event.is_active(1000 + EAT_EFFECT_MS)

    def test_food_on_other_face_is_not_eaten(self, spawner):
        state = make_state([(0, 0, 0), (-1, 0, 0), (-2, 0, 0)], (1, 0, 1))
        new_state = tick(state, spawner, now_ms=0)
        assert new_state.score == 0
        assert len(new_state.snake) == 3
        assert new_state.food == state.food

    def test_clear_expired_event(self, spawner):
        state = make_state([(0, 0, 0), (-1, 0, 0), (-2, 0, 0)], (1, 0, 0))
        eaten = tick(state, spawner, now_ms=1000)
        assert eaten.clear_expired_event(1100) is eaten
        assert eaten.clear_expired_event(1000 + EAT_EFFECT_MS).eat_event is None


class TestWrap:
    """Tests for portal crossings."""

    def test_wrap_to_other_face(self, spawner):
        """Head at (15, 0) heading RIGHT reappears at (-15, 0) on the other face."""
        state = make_state([(15, 0, 0), (14, 0, 0), (13, 0, 0)], (3, 4, 0))
        new_state = tick(state, spawner, now_ms=0)

        assert new_state.snake.head == BodySegment(HexCell(-15, 0), 1)
        assert new_state.snake.to_list() == [(-15, 0, 1), (15, 0, 0), (14, 0, 0)]
        assert new_state.heading is Heading.RIGHT
        assert new_state.current_face == 1
        assert new_state.wrap_grace == 1
        assert new_state.lifecycle is Lifecycle.RUNNING

    def test_food_follows_the_wrap(self, spawner):
        """Food is mirrored with the board and moved to the new face."""
        state = make_state([(15, 0, 0), (14, 0, 0), (13, 0, 0)], (3, 4, 0))
        new_state = tick(state, spawner, now_ms=0)
        assert new_state.food == Food(HexCell(-3, 4), 1)

    def test_food_respawns_when_mirror_is_off_board(self, spawner):
        """(10, -10) mirrors off the board, so food is respawned on the new face."""
        state = make_state([(15, 0, 0), (14, 0, 0), (13, 0, 0)], (10, -10, 0))
        new_state = tick(state, spawner, now_ms=0)
        assert new_state.food.face == 1
        assert not new_state.snake.occupies(new_state.food.cell, new_state.food.face)

    def test_wrap_from_face_b_returns_to_face_a(self, spawner):
        state = make_state([(-15, 0, 1), (-14, 0, 1), (-13, 0, 1)], (0, 5, 0), heading=Heading.LEFT, current_face=1)
        new_state = tick(state, spawner, now_ms=0)
        assert new_state.snake.head == BodySegment(HexCell(15, 0), 0)
        assert new_state.heading is Heading.LEFT
        assert new_state.current_face == 0

    def test_grace_after_wrap_then_decrements(self, spawner):
        state = make_state([(15, 0, 0), (14, 0, 0), (13, 0, 0)], (3, 4, 0))
        wrapped = tick(state, spawner, now_ms=0)
        after = tick(wrapped, spawner, now_ms=0)
        assert after.wrap_grace == 0
        assert after.snake.head == BodySegment(HexCell(-14, 0), 1)
        assert after.current_face == 1

    def test_wrap_and_eat(self, spawner):
        """Food waiting at the landing cell on the other face is eaten."""
        state = make_state([(15, 0, 0), (14, 0, 0), (13, 0, 0)], (-15, 0, 1))
        new_state = tick(state, spawner, now_ms=0)
        assert new_state.score == 10
        assert len(new_state.snake) == 4
        assert new_state.eat_event is not None
        assert new_state.eat_event.face == 1

    def test_diagonal2_wrap_reflects_heading(self, spawner):
        state = make_state(
            [(-15, 0, 0), (-15, 1, 0), (-15, 2, 0)],
            (5, 5, 1),
            heading=Heading.UP_LEFT,
            axis=WrapAxis.DIAGONAL2,
        )
        new_state = tick(state, spawner, now_ms=0)
        assert new_state.snake.head == BodySegment(HexCell(0, 15), 1)
        assert new_state.heading is Heading.LEFT


class TestGameOver:
    """Tests for fatal ticks."""

    def test_wall_ends_game_and_nothing_else_changes(self, spawner):
        """Crossing a non-portal edge only flips the lifecycle."""
        state = make_state(
            [(0, -15, 0), (0, -14, 0), (0, -13, 0)],
            (5, 5, 0),
            heading=Heading.UP_RIGHT,
            score=30,
            wrap_grace=1,
        )
        new_state = tick(state, spawner, now_ms=0)

        assert new_state.lifecycle is Lifecycle.OVER
        assert new_state.death_reason == DEATH_WALL
        assert new_state == state.evolve(lifecycle=Lifecycle.OVER, death_reason=DEATH_WALL)

    def test_self_collision(self, spawner):
        """Running into the tail is fatal: it has not moved yet."""
        state = make_state([(0, 0, 0), (0, -1, 0), (1, -1, 0), (1, 0, 0)], (5, 5, 0))
        new_state = tick(state, spawner, now_ms=0)

        assert new_state.lifecycle is Lifecycle.OVER
        assert new_state.death_reason == DEATH_SELF
        assert new_state.snake == state.snake
        assert new_state.score == state.score

    def test_body_on_other_face_is_not_a_collision(self, spawner):
        state = make_state([(0, 0, 0), (0, -1, 0), (1, -1, 0), (1, 0, 1)], (5, 5, 0))
        new_state = tick(state, spawner, now_ms=0)
        assert new_state.lifecycle is Lifecycle.RUNNING
        assert new_state.snake.head == BodySegment(HexCell(1, 0), 0)

    def test_tick_after_game_over_is_a_no_op(self, spawner):
        state = make_state([(0, 0, 0), (-1, 0, 0), (-2, 0, 0)], (5, 5, 0), lifecycle=Lifecycle.OVER)
        assert tick(state, spawner) is state

    def test_tick_before_start_is_a_no_op(self, spawner):
        state = make_state([(0, 0, 0), (-1, 0, 0), (-2, 0, 0)], (5, 5, 0), lifecycle=Lifecycle.NOT_STARTED)
        assert tick(state, spawner) is state

    def test_spawner_is_required(self):
        state = make_state([(0, 0, 0), (-1, 0, 0), (-2, 0, 0)], (5, 5, 0))
        with pytest.raises(TypeError):
            tick(state)

    def test_seeded_spawner_repeats_respawned_food(self):
        """Same seed, same food after eating."""
        state = make_state([(0, 0, 0), (-1, 0, 0), (-2, 0, 0)], (1, 0, 0))
        first = tick(state, FoodSpawner(random.Random(7)), now_ms=0)
        second = tick(state, FoodSpawner(random.Random(7)), now_ms=0)
        assert first.score == 10
        assert first.food == second.food


class TestLongRun:

    def test_invariants_hold_over_many_ticks(self):
        """Length and score only change together; no segment is duplicated."""
        rng = random.Random(7)
        spawner = FoodSpawner(rng)
        state = new_game(rng, axis=WrapAxis.DIAGONAL2, spawner=spawner)
        now = 0
        for _ in range(400):
            if not state.is_running:
                break
            if rng.random() < 0.3:
                state = turn(state, rng.choice((-1, 1)))
            before = state
            now += 120
            state = tick(state, spawner, now_ms=now)
            if not state.is_running:
                break
            keys = state.snake.to_list()
            assert len(keys) == len(set(keys))
            assert state.score % 10 == 0
            if state.score > before.score:
                assert state.score == before.score + 10
                assert len(state.snake) == len(before.snake) + 1
            else:
                assert len(state.snake) == len(before.snake)
