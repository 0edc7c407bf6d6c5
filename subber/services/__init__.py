"""
Services package for the Subber sideline tracker.

This package contains the classes and functions that hold business logic.
"""
from .config_service import (
    Config, ConfigError, PlayerConfig, default_configuration,
    load_config, load_config_file, parse_config
)
from .player_updates import MalformedInputError, PlayerUpdate, parse_player_updates
from .rw_lock import ReadWriteLock
from .tracker_service import OpResult, Tracker

__all__ = [
    "Config", "ConfigError", "PlayerConfig", "default_configuration",
    "load_config", "load_config_file", "parse_config",
    "MalformedInputError", "PlayerUpdate", "parse_player_updates",
    "ReadWriteLock", "OpResult", "Tracker"
]
