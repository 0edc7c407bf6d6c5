"""
Tracker service for the Subber sideline tracker.

The Tracker owns the game clock and the roster for the lifetime of the
process. Request handlers share one instance and go through its operations
for every read and write. A single reader/writer lock covers both the Game
and the roster: game operations always touch players too, so they hold the
write lock for the whole operation.
"""
import logging
from dataclasses import replace
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from ..models import Game, GameState, Period, Player
from ..utils import monotonic_ts, now_ts
from .player_updates import validate_statistics
from .rw_lock import ReadWriteLock

logger = logging.getLogger(__name__)


class OpResult(str, Enum):
    """Outcome of a Tracker operation."""
    OK = "ok"
    UNKNOWN_PLAYER = "unknown_player"
    INVALID_TRANSITION = "invalid_transition"

    @property
    def ok(self) -> bool:
        return self is OpResult.OK


class Tracker:
    """
    Game clock and per-player playing time accounting.

    Unknown player names and out-of-order game transitions are reported via
    the returned OpResult and never raised.
    """

    def __init__(self, players: Iterable[Player] = (), commit_on_resub: bool = False):
        """
        Initialize the tracker with its roster.

        Args:
            players: Initial roster; later entries replace earlier ones with
                the same name
            commit_on_resub: When subbing on a player who is already playing,
                keep the running stint instead of discarding it
        """
        self.commit_on_resub = commit_on_resub
        self._lock = ReadWriteLock()
        self._game = Game()
        self._players: Dict[str, Player] = {}
        for player in players:
            self._players[player.name] = replace(player)

    # ------------------------------------------------------------------
    # Game operations
    # ------------------------------------------------------------------
    def start_game(self) -> OpResult:
        """Start the game clock and reset all player statistics."""
        with self._lock.write_locked():
            now, now_mono = now_ts(), monotonic_ts()
            self._game.periods.append(Period(start_ts=now, start_mono=now_mono))
            self._game.overall_start_ts = now
            self._game.overall_end_ts = None

            for player in self._players.values():
                player.reset()

        logger.info("game started")
        return OpResult.OK

    def pause_game(self) -> OpResult:
        """Pause the game clock and sub off all players."""
        with self._lock.write_locked():
            if not self._game.periods:
                logger.warning("attempt to pause a game that has not started")
                return OpResult.INVALID_TRANSITION

            self._game.periods[-1].close(now_ts(), monotonic_ts())
            self._sub_off_all()

        logger.info("game paused")
        return OpResult.OK

    def resume_game(self) -> OpResult:
        """
        Resume the game clock with a new period.

        A period left open by a repeated resume is closed first so only the
        last period is ever open.
        """
        with self._lock.write_locked():
            now, now_mono = now_ts(), monotonic_ts()
            self._sub_off_all()

            current = self._game.current_period()
            if current is not None and current.is_open():
                current.close(now, now_mono)
            self._game.periods.append(Period(start_ts=now, start_mono=now_mono))

        logger.info("game resumed")
        return OpResult.OK

    def end_game(self) -> OpResult:
        """Stop the game clock and sub off all players. Statistics are kept."""
        with self._lock.write_locked():
            if not self._game.periods:
                logger.warning("attempt to end a game that has not started")
                return OpResult.INVALID_TRANSITION

            now = now_ts()
            self._game.periods[-1].close(now, monotonic_ts())
            self._game.overall_end_ts = now
            self._sub_off_all()

        logger.info("game ended")
        return OpResult.OK

    def reset_game(self) -> OpResult:
        """Clear the game clock and reset all player statistics."""
        with self._lock.write_locked():
            self._game.overall_start_ts = None
            self._game.overall_end_ts = None
            self._game.periods = []

            for player in self._players.values():
                player.reset()

        logger.info("game reset")
        return OpResult.OK

    def game_state(self) -> GameState:
        with self._lock.read_locked():
            return self._game.state()

    def game_snapshot(self) -> Game:
        """Return a copy of the game that is safe to read without the lock."""
        with self._lock.read_locked():
            return self._game.copy()

    # ------------------------------------------------------------------
    # Player operations
    # ------------------------------------------------------------------
    def player_reset(self, name: str) -> OpResult:
        """Zero a player's play count and duration."""
        with self._lock.write_locked():
            player = self._players.get(name)
            if player is None:
                logger.warning(f"attempt to reset non-existent player: {name!r}")
                return OpResult.UNKNOWN_PLAYER
            player.reset()
        return OpResult.OK

    def player_set(self, name: str, play_count: int, play_duration: float) -> OpResult:
        """
        Overwrite a player's play count and duration.

        Whether the player is on the field is left untouched. Unknown names
        are ignored without logging.

        Raises:
            MalformedInputError: If either value is negative, non-numeric
                or not finite
        """
        validate_statistics(play_count, play_duration)

        with self._lock.write_locked():
            player = self._players.get(name)
            if player is None:
                return OpResult.UNKNOWN_PLAYER
            player.play_count = play_count
            player.play_duration = float(play_duration)
        return OpResult.OK

    def player_sub_on(self, name: str) -> OpResult:
        """Sub a player on, counting the substitution and starting their stint."""
        with self._lock.write_locked():
            player = self._players.get(name)
            if player is None:
                logger.warning(f"attempt to sub on non-existent player: {name!r}")
                return OpResult.UNKNOWN_PLAYER
            player.sub_on(monotonic_ts(), commit_elapsed=self.commit_on_resub)
        return OpResult.OK

    def player_sub_off(self, name: str) -> OpResult:
        """Sub a player off, adding their running stint to their play duration."""
        with self._lock.write_locked():
            player = self._players.get(name)
            if player is None:
                logger.warning(f"attempt to sub off non-existent player: {name!r}")
                return OpResult.UNKNOWN_PLAYER
            player.sub_off(monotonic_ts())
        return OpResult.OK

    def list_players(self) -> List[Player]:
        """
        Return every player's statistics sorted by name.

        Players on the field report their stored duration plus the running
        stint. The stored records are not modified.
        """
        with self._lock.read_locked():
            now_mono = monotonic_ts()
            players = [self._project(p, now_mono) for p in self._players.values()]

        players.sort(key=lambda p: p.name)
        return players

    def get_player(self, name: str) -> Optional[Player]:
        """Return one player's projected statistics, or None if unknown."""
        with self._lock.read_locked():
            player = self._players.get(name)
            if player is None:
                return None
            return self._project(player, monotonic_ts())

    def player_names(self) -> List[str]:
        with self._lock.read_locked():
            return sorted(self._players)

    def snapshot(self) -> Tuple[Game, List[Player]]:
        """Return the game and the sorted, projected roster read together."""
        with self._lock.read_locked():
            now_mono = monotonic_ts()
            game = self._game.copy()
            players = [self._project(p, now_mono) for p in self._players.values()]

        players.sort(key=lambda p: p.name)
        return game, players

    # ------------------------------------------------------------------
    # Internal helpers, called with the lock held
    # ------------------------------------------------------------------
    def _sub_off_all(self) -> None:
        now_mono = monotonic_ts()
        for player in self._players.values():
            player.sub_off(now_mono)

    @staticmethod
    def _project(player: Player, now_mono: float) -> Player:
        return replace(player, play_duration=player.live_duration(now_mono))
