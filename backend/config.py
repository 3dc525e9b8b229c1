"""
Runtime settings for HexSnake, read from the environment and an optional .env.

Board radius and tick cadence are fixed in domain.constants; only the
operational knobs live here.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _get_completed_games_dir() -> str:
    d = os.getenv("HEXSNAKE_COMPLETED_GAMES_DIR", "completed_games").strip()
    return d or "completed_games"


def _get_seed() -> Optional[int]:
    raw = os.getenv("HEXSNAKE_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer HEXSNAKE_SEED=%r", raw)
        return None


@dataclass
class Settings:
    seed: Optional[int] = None
    axis: Optional[str] = None
    completed_games_dir: str = "completed_games"
    log_level: str = "INFO"


def load_settings() -> Settings:
    axis = os.getenv("HEXSNAKE_AXIS", "").strip() or None
    return Settings(
        seed=_get_seed(),
        axis=axis,
        completed_games_dir=_get_completed_games_dir(),
        log_level=os.getenv("HEXSNAKE_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
