"""
Exceptions for game rule violations.
"""


class SpyWordError(Exception):
    """Base class for game errors."""


class InsufficientPlayersError(SpyWordError):
    """Raised when a round is started with too few players on the roster."""

    def __init__(self, player_count: int, min_players: int, message: str = ""):
        self.player_count = player_count
        self.min_players = min_players
        self.message = message or f"At least {min_players} players are needed to start a round, got {player_count}"
        super().__init__(self.message)
