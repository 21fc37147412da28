"""
Core game components: session state, players, roles and the round clock.
"""

from .session import GameSession, GamePhase, format_time
from .player import Player
from .roles import Role, Outcome
from .clock import AsyncioClock
from .exceptions import SpyWordError, InsufficientPlayersError

__all__ = [
    'GameSession',
    'GamePhase',
    'format_time',
    'Player',
    'Role',
    'Outcome',
    'AsyncioClock',
    'SpyWordError',
    'InsufficientPlayersError',
]
