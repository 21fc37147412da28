"""
Role and outcome definitions for the Spy Word game.
"""

from enum import Enum


class Role(Enum):
    """Hidden role dealt to a player at round start."""
    PLAYER = "player"  # Knows the secret word
    SPY = "spy"  # Must guess the word

    def __str__(self) -> str:
        return self.value

    @property
    def is_spy(self) -> bool:
        """Check if role is a spy."""
        return self == Role.SPY


class Outcome(Enum):
    """How a round was decided."""
    PLAYERS_WIN = "players-win"
    SPIES_WIN = "spies-win"
