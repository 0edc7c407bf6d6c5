"""
Game model for the Subber sideline tracker.

This module contains the Period and Game dataclasses which represent the
game clock as a sequence of running intervals, and the GameState enum
derived from them.
"""
import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class GameState(str, Enum):
    """Derived classification of a game."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    PAUSED = "paused"
    FINISHED = "finished"

    def __str__(self) -> str:
        return self.value


@dataclass
class Period:
    """
    One contiguous interval during which the game clock was running.

    Attributes:
        start_ts: Epoch seconds when the period started (display only)
        start_mono: Monotonic reading when the period started
        end_ts: Epoch seconds when the period ended, None while open
        end_mono: Monotonic reading when the period ended, None while open
    """
    start_ts: float
    start_mono: float
    end_ts: Optional[float] = None
    end_mono: Optional[float] = None

    def is_open(self) -> bool:
        return self.end_ts is None

    def close(self, now: float, now_mono: float) -> None:
        self.end_ts = now
        self.end_mono = now_mono

    def elapsed_seconds(self, now_mono: float) -> float:
        """Seconds the period ran, measured to ``now_mono`` while open."""
        end = self.end_mono if self.end_mono is not None else now_mono
        return max(0.0, end - self.start_mono)

    def to_dict(self) -> Dict[str, Any]:
        return {"start_ts": self.start_ts, "end_ts": self.end_ts}


@dataclass
class Game:
    """
    The game clock.

    Only the last period may be open. The game state is never stored, it is
    derived from the periods and the overall timestamps on every call.

    Attributes:
        overall_start_ts: Epoch seconds when the game was started
        overall_end_ts: Epoch seconds when the game was ended
        periods: Running intervals in the order they happened
    """
    overall_start_ts: Optional[float] = None
    overall_end_ts: Optional[float] = None
    periods: List[Period] = field(default_factory=list)

    def state(self) -> GameState:
        if not self.periods:
            return GameState.NOT_STARTED
        if self.periods[-1].is_open():
            return GameState.IN_PROGRESS
        if self.overall_start_ts is not None and self.overall_end_ts is not None:
            return GameState.FINISHED
        return GameState.PAUSED

    def current_period(self) -> Optional[Period]:
        """Return the last period, or None before the game has started."""
        if not self.periods:
            return None
        return self.periods[-1]

    @property
    def period_count(self) -> int:
        return len(self.periods)

    def elapsed_seconds(self, now_mono: float) -> float:
        """Total running time of the game clock across all periods."""
        return sum(p.elapsed_seconds(now_mono) for p in self.periods)

    def copy(self) -> "Game":
        return copy.deepcopy(self)

    def to_dict(self, now_mono: Optional[float] = None) -> Dict[str, Any]:
        """
        Convert game to dictionary for JSON serialization.

        Args:
            now_mono: Monotonic reading used to measure an open period

        Returns:
            Dictionary representation of the game
        """
        data = {
            "state": self.state().value,
            "overall_start_ts": self.overall_start_ts,
            "overall_end_ts": self.overall_end_ts,
            "periods": [p.to_dict() for p in self.periods],
        }
        if now_mono is not None:
            data["elapsed_seconds"] = self.elapsed_seconds(now_mono)
        return data
