"""
Runtime configuration, read from the environment (and a .env file if present).

Variables:
    SNAKE_ARENA_WIDTH / SNAKE_ARENA_HEIGHT  board size (default 10x10)
    SNAKE_MOVE_INTERVAL                     seconds per movement tick (default 0.25)
    SNAKE_FOOD_INTERVAL                     seconds per food-spawn tick (default 1)
    SNAKE_FRAME_INTERVAL                    seconds per input frame (default 1/60)
    SNAKE_LOG_LEVEL                         logging level name (default INFO)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import (
    ARENA_WIDTH,
    ARENA_HEIGHT,
    MOVE_INTERVAL,
    FOOD_INTERVAL,
    FRAME_INTERVAL,
)

load_dotenv()


def _sanitize_env_value(value: Optional[str]) -> Optional[str]:
    """Strip whitespace and one pair of wrapping quotes from an env value."""
    if value is None:
        return None
    cleaned = value.strip()
    if len(cleaned) >= 2 and (
        (cleaned[0] == '"' and cleaned[-1] == '"') or (cleaned[0] == "'" and cleaned[-1] == "'")
    ):
        cleaned = cleaned[1:-1].strip()
    return cleaned or None


def _env_int(name: str, default: int) -> int:
    raw = _sanitize_env_value(os.getenv(name))
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None


def _env_float(name: str, default: float) -> float:
    raw = _sanitize_env_value(os.getenv(name))
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got '{raw}'") from None


@dataclass
class GameConfig:
    width: int = ARENA_WIDTH
    height: int = ARENA_HEIGHT
    move_interval: float = MOVE_INTERVAL
    food_interval: float = FOOD_INTERVAL
    frame_interval: float = FRAME_INTERVAL
    log_level: str = "INFO"

    def __post_init__(self):
        for name in ("move_interval", "food_interval", "frame_interval"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")


def load_config() -> GameConfig:
    """Build a GameConfig from SNAKE_* environment variables."""
    return GameConfig(
        width=_env_int("SNAKE_ARENA_WIDTH", ARENA_WIDTH),
        height=_env_int("SNAKE_ARENA_HEIGHT", ARENA_HEIGHT),
        move_interval=_env_float("SNAKE_MOVE_INTERVAL", MOVE_INTERVAL),
        food_interval=_env_float("SNAKE_FOOD_INTERVAL", FOOD_INTERVAL),
        frame_interval=_env_float("SNAKE_FRAME_INTERVAL", FRAME_INTERVAL),
        log_level=(_sanitize_env_value(os.getenv("SNAKE_LOG_LEVEL")) or "INFO").upper(),
    )
