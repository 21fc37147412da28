"""
Pytest fixtures for Spy Word tests.
"""

import random

import pytest
from unittest.mock import Mock

from spyword.core import GameSession, GamePhase
from spyword.config import GameConfig
from spyword.content import Category, CategorySource
from spyword.events import EventEmitter


class FakeClock:
    """Clock stand-in that fires only when told to."""

    def __init__(self):
        self.callback = None
        self.start_count = 0

    @property
    def is_running(self) -> bool:
        return self.callback is not None

    def start(self, callback):
        self.cancel()
        self.callback = callback
        self.start_count += 1

    def cancel(self):
        self.callback = None

    def advance(self, seconds: int) -> None:
        """Fire the scheduled callback once per second while it stays scheduled."""
        for _ in range(seconds):
            if self.callback is None:
                return
            self.callback()


@pytest.fixture
def game_config():
    """Test game configuration."""
    return GameConfig(random_seed=1234)


@pytest.fixture
def content():
    """Small deterministic category source."""
    return CategorySource([
        Category("Fruit", ["Apple", "Banana", "Cherry"]),
        Category("Colors", ["Red", "Blue"]),
    ])


@pytest.fixture
def listener():
    """Mock notification listener."""
    return Mock()


@pytest.fixture
def event_emitter(listener):
    return EventEmitter([listener])


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(game_config, content, event_emitter, clock):
    """Create a fresh session with an empty roster."""
    return GameSession(
        config=game_config,
        content=content,
        event_emitter=event_emitter,
        clock=clock,
        rng=random.Random(game_config.random_seed),
    )


@pytest.fixture
def seated_session(session):
    """Session with five players in setup."""
    for name in ["Alice", "Bob", "Carol", "Dave", "Eve"]:
        session.add_player(name)
    return session


def _reveal_all(session: GameSession) -> None:
    """Walk every player through the private reveal."""
    while session.phase == GamePhase.REVEAL:
        session.reveal_role()
        session.advance_to_next_player()


@pytest.fixture
def reveal_all():
    return _reveal_all


@pytest.fixture
def playing_session(seated_session):
    """Five-player session with one spy, past the reveal phase."""
    seated_session.start_round()
    _reveal_all(seated_session)
    return seated_session


@pytest.fixture
def vote_out():
    """Vote a player out from the playing phase and show the result."""
    def _vote_out(session: GameSession, player_id: str) -> None:
        assert session.start_voting()
        assert session.cast_vote(player_id)
    return _vote_out
