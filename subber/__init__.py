"""
Subber

A sideline tool that tracks the game clock and every player's playing time
and substitution count, served through a small Flask web interface.
"""
__version__ = "1.0.0"

from .models import Game, GameState, Period, Player
from .services import Config, ConfigError, OpResult, Tracker, load_config_file
from .utils import fmt_mmss, now_ts, APP_TITLE

__all__ = [
    "Game", "GameState", "Period", "Player",
    "Config", "ConfigError", "OpResult", "Tracker", "load_config_file",
    "fmt_mmss", "now_ts", "APP_TITLE"
]
