"""
Session driver for HexSnake.

HexSnakeSession owns the current GameState and is the only place that
replaces it. It handles the commands that come from outside the core
(start, restart, pause, turns) and the fixed-cadence tick, and keeps a
history of states for replays.
"""

import json
import logging
import os
import random
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from domain.constants import BOARD_RADIUS, TICK_MS, TURN_LEFT, TURN_RIGHT, VALID_TURNS
from domain.engine import new_game, tick, turn
from domain.food import FoodSpawner
from domain.game_state import GameState, Lifecycle
from domain.topology import WrapAxis
from players.base import Player

logger = logging.getLogger(__name__)


class HexSnakeSession:
    """
    Manages:
      - Current game state
      - Pending turn (last command before a tick wins)
      - Pause / restart
      - History for replay

    The wrap axis is drawn from rng at every start/restart unless a fixed
    axis is given, in which case every game in the session uses it.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        axis: Optional[WrapAxis] = None,
        radius: int = BOARD_RADIUS,
        game_id: Optional[str] = None,
    ):
        self.rng = rng or random.Random()
        self.fixed_axis = axis
        self.radius = radius
        self.spawner = FoodSpawner(self.rng, radius)
        self.game_id = game_id or str(uuid.uuid4())
        self.state: GameState = new_game(
            self.rng,
            axis=axis,
            radius=radius,
            lifecycle=Lifecycle.NOT_STARTED,
            spawner=self.spawner,
        )
        self.pending_turn: Optional[int] = None
        self.paused = False
        self.start_time = time.time()
        self.history: List[GameState] = []

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start(self) -> GameState:
        """Begin a fresh game with a new snake, food and (maybe) axis."""
        self.state = new_game(
            self.rng,
            axis=self.fixed_axis,
            radius=self.radius,
            spawner=self.spawner,
        )
        self.pending_turn = None
        self.paused = False
        self.start_time = time.time()
        self.history = [self.state]
        logger.info("Game %s started on axis %s", self.game_id, self.state.axis.value)
        return self.state

    def restart(self) -> GameState:
        self.game_id = str(uuid.uuid4())
        return self.start()

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def queue_turn(self, delta: int) -> None:
        """
        Register a turn for the next tick.

        Only the most recent turn before a tick is applied. Turns are ignored
        unless the game is running.
        """
        if delta not in VALID_TURNS:
            raise ValueError(f"Invalid turn {delta!r}; expected -1 or +1")
        if not self.state.is_running or self.paused:
            return
        self.pending_turn = delta

    def turn_left(self) -> None:
        self.queue_turn(TURN_LEFT)

    def turn_right(self) -> None:
        self.queue_turn(TURN_RIGHT)

    # ------------------------------------------------------------------
    # Ticking
    # ------------------------------------------------------------------

    def tick(self, now_ms: Optional[int] = None) -> GameState:
        """
        Execute one tick:
          1) If the game is not running or is paused, do nothing
          2) Expire a finished food-eaten effect
          3) Apply the pending turn
          4) Advance the state and record it
        """
        if not self.state.is_running or self.paused:
            logger.debug("Tick ignored (lifecycle=%s, paused=%s)", self.state.lifecycle.value, self.paused)
            return self.state

        now_ms = int(time.time() * 1000) if now_ms is None else now_ms
        state = self.state.clear_expired_event(now_ms)

        if self.pending_turn is not None:
            state = turn(state, self.pending_turn)
            self.pending_turn = None

        self.state = tick(state, self.spawner, now_ms)
        self.record_history()

        if self.state.is_over:
            logger.info(
                "Game %s over after %d ticks (%s). Score: %d",
                self.game_id, self.state.tick_count, self.state.death_reason, self.state.score,
            )
        return self.state

    def run(self, max_ticks: int, player: Optional[Player] = None, sleep: bool = False) -> GameState:
        """
        Headless loop: start if needed, then tick until the game ends or
        max_ticks is reached.
        """
        if self.state.lifecycle is not Lifecycle.RUNNING:
            self.start()

        for _ in range(max_ticks):
            if not self.state.is_running:
                break
            if player is not None:
                delta = player.get_turn(self.state)
                if delta:
                    self.queue_turn(delta)
            self.tick()
            if sleep:
                time.sleep(TICK_MS / 1000)

        return self.state

    def record_history(self):
        self.history.append(self.state)

    # ------------------------------------------------------------------
    # Replays
    # ------------------------------------------------------------------

    def serialize_history(self, history: List[GameState]) -> List[Dict[str, Any]]:
        """
        Convert the list of GameState objects to a JSON-serializable list of dicts.
        """
        return [state.to_dict() for state in history]

    def summary(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "axis": self.state.axis.value,
            "final_score": self.state.score,
            "ticks": self.state.tick_count,
            "snake_length": len(self.state.snake),
            "lifecycle": self.state.lifecycle.value,
            "death_reason": self.state.death_reason,
        }

    def save_history_to_json(self, directory: str = "completed_games", filename: Optional[str] = None) -> str:
        """Write the replay to <directory>/hexsnake_<game_id>.json and return its path."""
        if filename is None:
            filename = f"hexsnake_{self.game_id}.json"

        metadata = dict(self.summary())
        metadata.update({
            "start_time": datetime.fromtimestamp(self.start_time, timezone.utc).isoformat(),
            "end_time": datetime.now(timezone.utc).isoformat(),
            "radius": self.radius,
            "tick_ms": TICK_MS,
        })

        data = {
            "metadata": metadata,
            "rounds": self.serialize_history(self.history),
        }

        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, filename)
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
        logger.info("Saved replay for game %s to %s", self.game_id, path)
        return path
