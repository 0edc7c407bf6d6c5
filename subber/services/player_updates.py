"""
Parsing and validation of manual player statistic updates.

The web form for correcting a player's statistics submits parallel lists of
names, play counts and play durations. Every row is parsed before any row is
applied, so a single bad value rejects the whole request.
"""
import math
import numbers
from dataclasses import dataclass
from typing import List, Sequence

from ..utils import parse_duration


class MalformedInputError(ValueError):
    """Raised when a caller supplies statistics that cannot be applied."""
    pass


@dataclass(frozen=True)
class PlayerUpdate:
    """A validated replacement for a player's play count and duration."""
    name: str
    play_count: int
    play_duration: float


def validate_statistics(play_count: int, play_duration: float) -> None:
    """
    Check replacement statistics are usable.

    Raises:
        MalformedInputError: If the count is not a non-negative integer or
            the duration is not a finite, non-negative number of seconds
    """
    if isinstance(play_count, bool) or not isinstance(play_count, numbers.Integral):
        raise MalformedInputError(f"play count must be an integer, got {play_count!r}")
    if isinstance(play_duration, bool) or not isinstance(play_duration, numbers.Real):
        raise MalformedInputError(f"play duration must be a number, got {play_duration!r}")
    if not math.isfinite(play_duration):
        raise MalformedInputError(f"play duration must be finite, got {play_duration!r}")
    if play_count < 0:
        raise MalformedInputError(f"play count must not be negative, got {play_count}")
    if play_duration < 0:
        raise MalformedInputError(f"play duration must not be negative, got {play_duration}")


def parse_player_update(name: str, play_count: str, play_duration: str) -> PlayerUpdate:
    """
    Parse one row of form values.

    Args:
        name: Player name
        play_count: Play count as submitted, e.g. "3"
        play_duration: Duration as submitted, e.g. "12m30s" or "12:30"

    Returns:
        Validated PlayerUpdate

    Raises:
        MalformedInputError: If a value is missing, non-numeric or negative
    """
    if not name:
        raise MalformedInputError("player name not provided")

    try:
        count = int(play_count.strip())
    except (AttributeError, ValueError):
        raise MalformedInputError(
            f"parsing play count, name: {name} value: {play_count!r}"
        ) from None

    try:
        duration = parse_duration(play_duration)
    except ValueError as e:
        raise MalformedInputError(f"parsing duration, name: {name} error: {e}") from None

    validate_statistics(count, duration)
    return PlayerUpdate(name=name, play_count=count, play_duration=duration)


def parse_player_updates(
    names: Sequence[str],
    play_counts: Sequence[str],
    play_durations: Sequence[str],
) -> List[PlayerUpdate]:
    """
    Parse parallel lists of form values into updates.

    Raises:
        MalformedInputError: If the lists are empty or differ in length, or
            any row fails to parse
    """
    if not names:
        raise MalformedInputError("player names not provided")
    if not (len(names) == len(play_counts) == len(play_durations)):
        raise MalformedInputError("all player values not provided")

    return [
        parse_player_update(name, count, duration)
        for name, count, duration in zip(names, play_counts, play_durations)
    ]
