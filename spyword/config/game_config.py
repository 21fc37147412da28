"""
Game configuration and constants.
"""

from dataclasses import dataclass
from typing import Optional

# Hard limits of the game rules; config files may not go beyond these
MIN_PLAYERS_FLOOR = 3
SPY_COUNT_CEILING = 2


@dataclass
class GameConfig:
    """Configuration for game parameters."""

    # Round settings
    round_seconds: int = 300  # Countdown length (5 minutes)
    min_players: int = MIN_PLAYERS_FLOOR
    spy_count: int = 1  # Spies requested before the round starts
    max_spy_count: int = SPY_COUNT_CEILING

    # Content
    categories_file: Optional[str] = None  # YAML mapping of category -> words
    messages_file: Optional[str] = None  # YAML mapping of message id -> text

    # Misc
    log_level: str = "INFO"
    random_seed: Optional[int] = None  # Random seed for reproducible spy/word selection

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Check the round settings against the game rules.

        Raises:
            ValueError: If a setting would allow an invalid deal or countdown
        """
        for name in ("round_seconds", "min_players", "spy_count", "max_spy_count"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")

        if self.round_seconds <= 0:
            raise ValueError(f"round_seconds must be positive, got {self.round_seconds}")
        if self.min_players < MIN_PLAYERS_FLOOR:
            raise ValueError(f"min_players must be at least {MIN_PLAYERS_FLOOR}, got {self.min_players}")
        if not 1 <= self.max_spy_count <= SPY_COUNT_CEILING:
            raise ValueError(f"max_spy_count must be between 1 and {SPY_COUNT_CEILING}, got {self.max_spy_count}")
        if not 1 <= self.spy_count <= self.max_spy_count:
            raise ValueError(f"spy_count must be between 1 and {self.max_spy_count}, got {self.spy_count}")


# Default configuration instance
default_config = GameConfig()
