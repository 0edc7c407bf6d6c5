"""
Configuration loading for the Subber sideline tracker.

This module reads the JSON configuration document that seeds the roster.
Keys are matched case-insensitively, so ``"Players"`` and ``"players"`` are
equivalent.
"""
import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, TextIO

from ..models import Player

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration document cannot be used."""
    pass


@dataclass(frozen=True)
class PlayerConfig:
    """A roster entry as written in the configuration."""
    name: str
    number: int = 0


@dataclass
class Config:
    """
    Application configuration.

    Attributes:
        players: Roster entries in configuration order
        commit_on_resub: Keep the running stint when a playing player is
            subbed on again
    """
    players: List[PlayerConfig] = field(default_factory=list)
    commit_on_resub: bool = False

    def to_players(self) -> List[Player]:
        """Build fresh Player records for the roster."""
        return [Player(name=p.name, number=p.number) for p in self.players]


def default_configuration() -> Config:
    """Return the default configuration values."""
    return Config()


def _lower_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    return {str(k).lower(): v for k, v in data.items()}


def _parse_player(index: int, raw: Any) -> PlayerConfig:
    if not isinstance(raw, dict):
        raise ConfigError(f"players[{index}] must be an object")

    data = _lower_keys(raw)
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ConfigError(f"players[{index}].name must be a non-empty string")

    number = data.get("number", 0)
    if isinstance(number, bool) or not isinstance(number, int):
        raise ConfigError(f"players[{index}].number must be an integer")

    return PlayerConfig(name=name, number=number)


def parse_config(data: Any) -> Config:
    """
    Validate a decoded configuration document.

    Args:
        data: Decoded JSON value

    Returns:
        Config ready for use by the application

    Raises:
        ConfigError: If the document does not describe a valid configuration
    """
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a JSON object")

    cfg = default_configuration()
    data = _lower_keys(data)

    raw_players = data.get("players")
    if raw_players is not None:
        if not isinstance(raw_players, list):
            raise ConfigError("players must be a list")

        seen = set()
        for index, raw in enumerate(raw_players):
            player = _parse_player(index, raw)
            if player.name in seen:
                raise ConfigError(f"duplicate player name: {player.name!r}")
            seen.add(player.name)
            cfg.players.append(player)

    commit_on_resub = data.get("commit_on_resub", False)
    if not isinstance(commit_on_resub, bool):
        raise ConfigError("commit_on_resub must be true or false")
    cfg.commit_on_resub = commit_on_resub

    return cfg


def load_config(stream: TextIO) -> Config:
    """
    Read and validate a configuration document from a text stream.

    Raises:
        ConfigError: If the stream holds invalid JSON or an invalid document
    """
    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        raise ConfigError(f"failed to parse json config: {e}") from e

    return parse_config(data)


def load_config_file(file_path: str) -> Config:
    """
    Load configuration from a JSON file.

    A missing file is not an error: the default configuration is returned.

    Args:
        file_path: Path to the JSON file to load

    Returns:
        Config instance

    Raises:
        ConfigError: If the file cannot be read or holds an invalid document
    """
    if not os.path.exists(file_path):
        logger.info(f"no configuration file at {file_path}, using defaults")
        return default_configuration()

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            cfg = load_config(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"failed to read config file: {e}") from e

    logger.info(f"loaded configuration from file {file_path} ({len(cfg.players)} players)")
    return cfg
