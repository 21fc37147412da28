"""
Tests for round start: word selection and spy assignment.
"""

import random

import pytest
from spyword.core import GameSession, GamePhase, Role, InsufficientPlayersError
from spyword.config import GameConfig


def _session_with(n, spy_count, content, seed):
    session = GameSession(config=GameConfig(spy_count=spy_count), content=content, rng=random.Random(seed))
    for i in range(n):
        session.add_player(f"Player {i + 1}")
    return session


@pytest.mark.parametrize("n", [3, 4, 5, 8, 12])
@pytest.mark.parametrize("spy_count", [1, 2])
def test_spy_count_matches_request(n, spy_count, content):
    """Test exactly min(k, N - 1) distinct spies are dealt."""
    for seed in range(25):
        session = _session_with(n, spy_count, content, seed)
        session.start_round()

        spies = [p for p in session.players if p.role == Role.SPY]
        assert len(spies) == min(spy_count, n - 1)
        assert len({p.id for p in spies}) == len(spies)
        assert all(p.role in (Role.SPY, Role.PLAYER) for p in session.players)


def test_two_spies_leave_a_player_in_smallest_game(content):
    """Test the smallest roster with two spies still keeps one non-spy."""
    session = _session_with(3, 2, content, seed=7)

    session.start_round()

    assert session.effective_spy_count == 2
    assert sum(p.is_spy for p in session.players) == 2
    assert session.remaining_players == 1


def test_config_changed_after_construction_is_rejected(content):
    """Test loosening the rules on a live config doesn't deal a bad round."""
    session = _session_with(2, 1, content, seed=7)
    session.config.min_players = 1

    with pytest.raises(ValueError):
        session.start_round()

    assert session.phase == GamePhase.SETUP
    assert all(p.role == Role.PLAYER for p in session.players)


def test_every_position_can_be_spy(content):
    """Test selection reaches every roster position."""
    seen = set()
    for seed in range(200):
        session = _session_with(4, 1, content, seed)
        session.start_round()
        seen.update(i for i, p in enumerate(session.players) if p.is_spy)
    assert seen == {0, 1, 2, 3}


def test_start_round_state(seated_session, content):
    """Test round start resets reveal and timer state."""
    assert seated_session.start_round() is True

    assert seated_session.phase == GamePhase.REVEAL
    assert seated_session.reveal_index == 0
    assert seated_session.role_visible is False
    assert seated_session.time_left == 300
    assert seated_session.timer_active is False
    assert seated_session.outcome is None
    assert seated_session.voted_player is None

    category = content.get(seated_session.category)
    assert category is not None
    assert seated_session.word in category.words
    assert all(not p.has_seen_role and not p.is_eliminated for p in seated_session.players)


@pytest.mark.parametrize("n", [0, 1, 2])
def test_insufficient_players(session, n):
    """Test starting with fewer than three players is rejected."""
    for i in range(n):
        session.add_player(f"P{i}")

    with pytest.raises(InsufficientPlayersError) as exc_info:
        session.start_round()

    assert exc_info.value.player_count == n
    assert exc_info.value.min_players == 3
    assert session.phase == GamePhase.SETUP
    assert session.word == ""
    assert all(p.role == Role.PLAYER for p in session.players)


def test_start_round_only_from_setup(playing_session):
    word = playing_session.word
    assert playing_session.start_round() is False
    assert playing_session.phase == GamePhase.PLAYING
    assert playing_session.word == word


def test_same_seed_same_deal(content):
    """Test a seeded rng reproduces word and spies."""
    first = _session_with(6, 2, content, seed=99)
    second = _session_with(6, 2, content, seed=99)
    first.start_round()
    second.start_round()

    assert first.word == second.word
    assert [p.role for p in first.players] == [p.role for p in second.players]
