"""
Player model for the Subber sideline tracker.

This module contains the Player dataclass which represents a roster player
and their playing time bookkeeping.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Player:
    """
    Represents a roster player with substitution and playing time tracking.

    Attributes:
        name: Player's name (used as unique identifier)
        number: Player's jersey number
        play_count: Number of times the player has been subbed on
        play_duration: Completed on-field time in seconds, excluding the
            stint in progress
        playing: Whether the player is currently on the field
        play_started: Monotonic reading taken when the current stint began
    """
    name: str
    number: int = 0
    play_count: int = 0
    play_duration: float = 0.0
    playing: bool = False
    play_started: Optional[float] = None

    def reset(self) -> None:
        """Zero the playing statistics and take the player off the field."""
        self.play_count = 0
        self.play_duration = 0.0
        self.playing = False
        self.play_started = None

    def sub_on(self, now_mono: float, commit_elapsed: bool = False) -> None:
        """
        Put the player on the field and count the substitution.

        A player who is already playing has their stint restarted. Unless
        ``commit_elapsed`` is set, the time since the previous sub on is lost.

        Args:
            now_mono: Current monotonic clock reading
            commit_elapsed: Add the running stint to play_duration first
        """
        if commit_elapsed:
            self.play_duration += self.current_stint_seconds(now_mono)
        self.playing = True
        self.play_count += 1
        self.play_started = now_mono

    def sub_off(self, now_mono: float) -> None:
        """
        Take the player off the field, committing the running stint.

        Args:
            now_mono: Current monotonic clock reading
        """
        self.play_duration += self.current_stint_seconds(now_mono)
        self.playing = False
        self.play_started = None

    def current_stint_seconds(self, now_mono: float) -> float:
        """
        Calculate seconds played in the current stint.

        Args:
            now_mono: Current monotonic clock reading

        Returns:
            Seconds since the stint started, or 0 if no stint is running
        """
        if self.play_started is not None:
            return max(0.0, now_mono - self.play_started)
        return 0.0

    def live_duration(self, now_mono: float) -> float:
        """Stored duration plus the running stint, without committing it."""
        return self.play_duration + self.current_stint_seconds(now_mono)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert player to dictionary for JSON serialization.

        The monotonic ``play_started`` reading is meaningless outside this
        process and is left out.

        Returns:
            Dictionary representation of the player
        """
        return {
            "name": self.name,
            "number": self.number,
            "play_count": self.play_count,
            "play_duration": self.play_duration,
            "playing": self.playing,
        }
