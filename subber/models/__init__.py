"""
Models package for the Subber sideline tracker.

This package contains the core data models used throughout the application.
"""
from .player import Player
from .game import Game, GameState, Period

__all__ = ["Player", "Game", "GameState", "Period"]
