"""
Configuration loader for YAML-based game configurations.
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import yaml

from .game_config import GameConfig, default_config

logger = logging.getLogger(__name__)


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Load game configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        GameConfig instance with values from YAML file

    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the YAML file is invalid
        ValueError: If a setting breaks the game rules
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r') as f:
        config_dict = yaml.safe_load(f)

    # Fresh copy so callers may mutate it without touching the shared default
    config = replace(default_config)

    if config_dict is None:
        return config

    if not isinstance(config_dict, dict):
        raise ValueError(f"Config file must be a mapping of settings: {config_path}")

    for key, value in config_dict.items():
        if hasattr(config, key):
            setattr(config, key, value)
        else:
            # Warn about unknown keys but don't fail
            logger.warning("Unknown config key '%s' in YAML file", key)

    config.validate()
    return config


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load configuration from YAML file or return default.

    Args:
        config_path: Optional path to YAML config file. If None, returns a copy of the default config.

    Returns:
        GameConfig instance
    """
    if config_path is None:
        return replace(default_config)

    return load_config_from_yaml(config_path)
