"""
Game session managing the hidden roles, phase transitions and round timer.
"""

import logging
import random
from dataclasses import replace
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol

from .exceptions import InsufficientPlayersError
from .player import Player, generate_player_id
from .roles import Outcome, Role
from ..config.game_config import GameConfig, default_config
from ..content.categories import CategorySource
from ..events.event_emitter import EventEmitter

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Current game phase."""
    SETUP = "setup"
    REVEAL = "reveal"
    PLAYING = "playing"
    VOTING = "voting"
    ELIMINATION_RESULT = "elimination_result"
    SUMMARY = "summary"


class Clock(Protocol):
    """Anything able to call a function once a second until cancelled."""

    def start(self, callback: Callable[[], object]) -> None: ...

    def cancel(self) -> None: ...


def format_time(seconds: int) -> str:
    """Format seconds as ``M:SS``."""
    minutes, secs = divmod(max(seconds, 0), 60)
    return f"{minutes}:{secs:02d}"


class GameSession:
    """
    Complete state of one pass-the-device game.

    Every action method checks the phase it is valid from and returns False
    without changing anything when called out of turn. The only action that
    raises is ``start_round`` with too few players.
    """

    def __init__(
        self,
        config: GameConfig = default_config,
        content: Optional[CategorySource] = None,
        event_emitter: Optional[EventEmitter] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
    ):
        config.validate()
        self.config = config
        self.content = content or CategorySource()
        self.event_emitter = event_emitter
        self.clock = clock
        self.rng = rng or random.Random(config.random_seed)

        self.phase = GamePhase.SETUP
        self.players: List[Player] = []
        self.spy_count = config.spy_count

        # Round
        self.category = ""
        self.word = ""
        self.reveal_index = 0
        self.role_visible = False
        self.outcome: Optional[Outcome] = None
        self._voted_player_id: Optional[str] = None

        # Timer
        self.time_left = config.round_seconds
        self.timer_active = False

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------

    def add_player(self, name: str) -> Optional[Player]:
        """
        Append a player to the roster.

        Blank names are ignored. Duplicate names are allowed.

        Returns:
            The new player, or None if nothing was added
        """
        if not self._in_phase("add_player", GamePhase.SETUP):
            return None
        name = (name or "").strip()
        if not name:
            return None

        taken = {p.id for p in self.players}
        player_id = generate_player_id()
        while player_id in taken:
            player_id = generate_player_id()

        player = Player(name=name, id=player_id)
        self.players.append(player)
        logger.debug("Added player %s", player)
        return replace(player)

    def remove_player(self, player_id: str) -> bool:
        """Remove a player by id. Only possible during setup."""
        if not self._in_phase("remove_player", GamePhase.SETUP):
            return False
        player = self.get_player(player_id)
        if player is None:
            return False
        self.players.remove(player)
        logger.debug("Removed player %s", player)
        return True

    def set_spy_count(self, count: int) -> bool:
        """Choose how many spies the next round should have."""
        if not self._in_phase("set_spy_count", GamePhase.SETUP):
            return False
        if not 1 <= count <= self.config.max_spy_count:
            logger.debug("Rejected spy count %s", count)
            return False
        self.spy_count = count
        return True

    def get_player(self, player_id: str) -> Optional[Player]:
        """Get player by id."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    # ------------------------------------------------------------------
    # Round start
    # ------------------------------------------------------------------

    def start_round(self) -> bool:
        """
        Pick a word and deal roles, then begin the reveal phase.

        Raises:
            InsufficientPlayersError: If the roster is smaller than ``min_players``
            ValueError: If the config was changed to break the game rules
        """
        if not self._in_phase("start_round", GamePhase.SETUP):
            return False
        self.config.validate()
        if len(self.players) < self.config.min_players:
            raise InsufficientPlayersError(len(self.players), self.config.min_players)

        self.category, self.word = self.content.pick(self.rng)

        spy_indices = self._choose_spy_indices(self.effective_spy_count)
        for index, player in enumerate(self.players):
            player.deal(Role.SPY if index in spy_indices else Role.PLAYER)

        self.reveal_index = 0
        self.role_visible = False
        self.outcome = None
        self._voted_player_id = None
        self.time_left = self.config.round_seconds
        self.timer_active = False
        logger.info("Round started: %d players, %d spies, category '%s'",
                    len(self.players), len(spy_indices), self.category)
        self._set_phase(GamePhase.REVEAL)
        return True

    @property
    def effective_spy_count(self) -> int:
        """Requested spies, silently capped so at least one non-spy remains."""
        return max(0, min(self.spy_count, len(self.players) - 1))

    def _choose_spy_indices(self, count: int) -> List[int]:
        """Draw distinct roster positions, discarding repeats."""
        indices: List[int] = []
        while len(indices) < count:
            index = self.rng.randrange(len(self.players))
            if index not in indices:
                indices.append(index)
        return indices

    # ------------------------------------------------------------------
    # Reveal
    # ------------------------------------------------------------------

    def reveal_role(self) -> bool:
        """Show the current player's role."""
        if not self._in_phase("reveal_role", GamePhase.REVEAL):
            return False
        self.role_visible = True
        return True

    def advance_to_next_player(self) -> bool:
        """
        Hide the current role and hand over to the next player.

        After the last player, the game moves to ``playing`` and the timer starts.
        """
        if not self._in_phase("advance_to_next_player", GamePhase.REVEAL):
            return False
        if not self.role_visible:
            logger.debug("Cannot advance before the current role is shown")
            return False

        self.players[self.reveal_index].mark_seen()

        if self.reveal_index < len(self.players) - 1:
            self.reveal_index += 1
            self.role_visible = False
            return True

        self.role_visible = False
        self.timer_active = self.time_left > 0
        self._set_phase(GamePhase.PLAYING)
        if self.event_emitter:
            self.event_emitter.emit_round_started(self.category, len(self.players))
        return True

    @property
    def current_player(self) -> Optional[Player]:
        """Player whose turn it is to look at the device (reveal phase only)."""
        if self.phase != GamePhase.REVEAL:
            return None
        return replace(self.players[self.reveal_index])

    def get_role_card(self) -> Optional[Dict[str, Any]]:
        """
        What the current player may see, or None while their role is hidden.

        Spies are not given the word.
        """
        if self.phase != GamePhase.REVEAL or not self.role_visible:
            return None
        player = self.players[self.reveal_index]
        return {
            "player_id": player.id,
            "name": player.name,
            "is_spy": player.is_spy,
            "word": None if player.is_spy else self.word,
        }

    # ------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------

    def toggle_timer(self) -> bool:
        """Pause or resume the countdown."""
        if not self._in_phase("toggle_timer", GamePhase.PLAYING):
            return False
        if not self.timer_active and self.time_left <= 0:
            return False
        self.timer_active = not self.timer_active
        self._sync_clock()
        return True

    def tick(self) -> bool:
        """Advance the countdown by one second."""
        if self.phase != GamePhase.PLAYING or not self.timer_active or self.time_left <= 0:
            self._sync_clock()
            return False
        self.time_left -= 1
        if self.time_left == 0:
            logger.info("Time is up")
            self.timer_active = False
            self._sync_clock()
        return True

    @property
    def formatted_time(self) -> str:
        """Remaining time as ``M:SS``."""
        return format_time(self.time_left)

    def _sync_clock(self) -> None:
        """Make the clock match the session: ticking only while playing with time left."""
        if self.clock is None:
            return
        if self.phase == GamePhase.PLAYING and self.timer_active and self.time_left > 0:
            self.clock.start(self.tick)
        else:
            self.clock.cancel()

    # ------------------------------------------------------------------
    # Voting
    # ------------------------------------------------------------------

    def start_voting(self) -> bool:
        """Stop discussion and open the vote. The countdown does not run while voting."""
        if not self._in_phase("start_voting", GamePhase.PLAYING):
            return False
        self._set_phase(GamePhase.VOTING)
        return True

    def cancel_voting(self) -> bool:
        """Go back to discussion without voting anyone out."""
        if not self._in_phase("cancel_voting", GamePhase.VOTING):
            return False
        self._set_phase(GamePhase.PLAYING)
        return True

    def cast_vote(self, player_id: str) -> bool:
        """Eliminate the chosen player and show the result."""
        if not self._in_phase("cast_vote", GamePhase.VOTING):
            return False
        player = self.get_player(player_id)
        if player is None or player.is_eliminated:
            logger.debug("Rejected vote for %s", player_id)
            return False

        player.eliminate()
        self._voted_player_id = player.id
        self.timer_active = False
        logger.info("%s was voted out (%s)", player.name, player.role)
        self._set_phase(GamePhase.ELIMINATION_RESULT)

        if player.is_spy and self.event_emitter:
            self.event_emitter.emit_spy_caught(player)
        return True

    def continue_after_elimination(self) -> bool:
        """Decide whether the game is over or discussion resumes."""
        if not self._in_phase("continue_after_elimination", GamePhase.ELIMINATION_RESULT):
            return False

        outcome = self.check_win_condition()
        if outcome is not None:
            self.outcome = outcome
            logger.info("Game over: %s", outcome.value)
            self._set_phase(GamePhase.SUMMARY)
            return True

        self._voted_player_id = None
        # A spent countdown stays stopped
        self.timer_active = self.time_left > 0
        self._set_phase(GamePhase.PLAYING)
        return True

    def check_win_condition(self) -> Optional[Outcome]:
        """
        Check if the round has been decided.

        Players win when no spy is left; spies win on reaching parity.
        Returns None if the game continues.
        """
        remaining_spies = self.remaining_spies
        if remaining_spies == 0:
            return Outcome.PLAYERS_WIN
        if self.remaining_players <= remaining_spies:
            return Outcome.SPIES_WIN
        return None

    # ------------------------------------------------------------------
    # End and reset
    # ------------------------------------------------------------------

    def end_game(self) -> bool:
        """Stop the round early and reveal the spies without declaring a winner."""
        if not self._in_phase("end_game", GamePhase.PLAYING):
            return False
        self.timer_active = False
        self.outcome = None
        logger.info("Game ended manually")
        self._set_phase(GamePhase.SUMMARY)
        if self.event_emitter:
            self.event_emitter.emit_game_ended()
        return True

    def reset_game(self) -> bool:
        """Return to setup, keeping the roster but clearing all round state."""
        if not self._in_phase("reset_game", GamePhase.SUMMARY):
            return False
        for player in self.players:
            player.clear()
        self.category = ""
        self.word = ""
        self.reveal_index = 0
        self.role_visible = False
        self.outcome = None
        self._voted_player_id = None
        self.timer_active = False
        self.time_left = self.config.round_seconds
        self._set_phase(GamePhase.SETUP)
        return True

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def roster(self) -> List[Player]:
        """Snapshot of the roster in turn order."""
        return [replace(p) for p in self.players]

    @property
    def alive_players(self) -> List[Player]:
        """Players not yet voted out."""
        return [replace(p) for p in self.players if p.is_active]

    @property
    def remaining_spies(self) -> int:
        return sum(1 for p in self.players if p.is_spy and p.is_active)

    @property
    def remaining_players(self) -> int:
        return sum(1 for p in self.players if not p.is_spy and p.is_active)

    @property
    def eliminated_count(self) -> int:
        return sum(1 for p in self.players if p.is_eliminated)

    @property
    def voted_player(self) -> Optional[Player]:
        """The player most recently voted out, if the result is still on display."""
        if self._voted_player_id is None:
            return None
        player = self.get_player(self._voted_player_id)
        return replace(player) if player else None

    @property
    def spy_players(self) -> List[Player]:
        """The round's spies. Empty until the summary is shown."""
        if self.phase != GamePhase.SUMMARY:
            return []
        return [replace(p) for p in self.players if p.is_spy]

    def get_game_summary(self) -> Dict[str, Any]:
        """Get a summary of the current game state."""
        return {
            "phase": self.phase.value,
            "category": self.category,
            "word": self.word,
            "outcome": self.outcome.value if self.outcome else None,
            "spies": [p.name for p in self.spy_players],
            "players": len(self.players),
            "remaining_players": self.remaining_players,
            "remaining_spies": self.remaining_spies,
            "eliminated": self.eliminated_count,
            "time_left": self.formatted_time,
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _in_phase(self, action: str, *phases: GamePhase) -> bool:
        if self.phase in phases:
            return True
        logger.debug("Ignored %s during %s phase", action, self.phase.value)
        return False

    def _set_phase(self, phase: GamePhase) -> None:
        """Transition to ``phase`` and bring the clock in line with it."""
        logger.debug("Phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase
        self._sync_clock()
        if self.event_emitter:
            self.event_emitter.emit_phase_change(phase.value)
