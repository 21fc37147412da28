"""Game configuration module."""

from .game_config import GameConfig, default_config, MIN_PLAYERS_FLOOR, SPY_COUNT_CEILING
from .config_loader import load_config, load_config_from_yaml

__all__ = [
    'GameConfig',
    'default_config',
    'MIN_PLAYERS_FLOOR',
    'SPY_COUNT_CEILING',
    'load_config',
    'load_config_from_yaml',
]
