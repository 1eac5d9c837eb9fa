"""
Per-tick notifications raised by the engine.

Signals live for exactly one tick: they are returned by the phase that
raised them, observed by the later phases of that tick, then dropped.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from domain.grid import Position


@dataclass(frozen=True)
class GameOverSignal:
    reason: str  # 'wall' or 'self'
    position: Position


@dataclass(frozen=True)
class GrowthSignal:
    """Grow by one segment at `position` (None if the tail never moved)."""

    position: Optional[Position]


def game_over_signals(signals: Iterable[object]) -> List[GameOverSignal]:
    return [s for s in signals if isinstance(s, GameOverSignal)]
