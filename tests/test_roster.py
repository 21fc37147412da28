"""
Tests for roster management and spy count selection.
"""

import pytest
from spyword.core import GamePhase, Role


def test_add_player(session):
    """Test adding a player trims the name and sets defaults."""
    player = session.add_player("  Alice  ")

    assert player is not None
    assert player.name == "Alice"
    assert player.role == Role.PLAYER
    assert player.has_seen_role is False
    assert player.is_eliminated is False
    assert len(session.players) == 1


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
def test_add_blank_name_is_ignored(session, name):
    """Test blank names don't add anyone."""
    assert session.add_player(name) is None
    assert session.players == []


def test_duplicate_names_allowed_with_unique_ids(session):
    """Test names may repeat but ids never do."""
    for _ in range(20):
        session.add_player("Sam")

    ids = [p.id for p in session.players]
    assert len(ids) == 20
    assert len(set(ids)) == 20


def test_roster_keeps_insertion_order(seated_session):
    names = [p.name for p in seated_session.roster]
    assert names == ["Alice", "Bob", "Carol", "Dave", "Eve"]


def test_roster_is_a_snapshot(seated_session):
    """Test mutating the snapshot doesn't touch the session."""
    snapshot = seated_session.roster
    snapshot[0].name = "Mallory"
    snapshot[0].is_eliminated = True
    snapshot.pop()

    assert seated_session.players[0].name == "Alice"
    assert seated_session.players[0].is_eliminated is False
    assert len(seated_session.players) == 5


def test_remove_player(seated_session):
    bob = seated_session.players[1]

    assert seated_session.remove_player(bob.id) is True
    assert [p.name for p in seated_session.players] == ["Alice", "Carol", "Dave", "Eve"]


def test_remove_unknown_player_is_noop(seated_session):
    assert seated_session.remove_player("nope") is False
    assert len(seated_session.players) == 5


def test_roster_locked_outside_setup(playing_session):
    """Test players can't be added or removed mid-round."""
    first = playing_session.players[0]

    assert playing_session.remove_player(first.id) is False
    assert playing_session.add_player("Latecomer") is None
    assert len(playing_session.players) == 5
    assert playing_session.phase == GamePhase.PLAYING


@pytest.mark.parametrize("count", [1, 2])
def test_set_spy_count(session, count):
    assert session.set_spy_count(count) is True
    assert session.spy_count == count


@pytest.mark.parametrize("count", [0, 3, -1])
def test_set_spy_count_out_of_range(session, count):
    assert session.set_spy_count(count) is False
    assert session.spy_count == 1


def test_set_spy_count_only_in_setup(playing_session):
    assert playing_session.set_spy_count(2) is False
    assert playing_session.spy_count == 1
