"""
Text shown by front ends, keyed by a fixed set of message identifiers.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

import yaml

from .categories import ContentError

logger = logging.getLogger(__name__)


class MessageId(Enum):
    TITLE = "title"
    SUBTITLE = "subtitle"
    PLAYER_NAME_PLACEHOLDER = "player_name_placeholder"
    SPY_COUNT = "spy_count"
    START_GAME = "start_game"
    MIN_PLAYERS = "min_players"
    REVEAL_ROLE = "reveal_role"
    YOU_ARE_SPY = "you_are_spy"
    SPY_GOAL = "spy_goal"
    YOUR_WORD = "your_word"
    NEXT_PLAYER = "next_player"
    CATEGORY = "category"
    TIMER = "timer"
    VOTE_BUTTON = "vote_button"
    END_GAME = "end_game"
    PLAYERS = "players"
    VOTE_TITLE = "vote_title"
    BACK = "back"
    ELIMINATED = "eliminated"
    WAS_SPY = "was_spy"
    WAS_NOT_SPY = "was_not_spy"
    CONTINUE_GAME = "continue_game"
    VICTORY_PLAYERS = "victory_players"
    VICTORY_SPIES = "victory_spies"
    SPIES_WERE = "spies_were"
    SPY_WAS = "spy_was"
    RESET_GAME = "reset_game"


DEFAULT_MESSAGES: Dict[MessageId, str] = {
    MessageId.TITLE: "Spy Word",
    MessageId.SUBTITLE: "Who among you is the spy?",
    MessageId.PLAYER_NAME_PLACEHOLDER: "Player name",
    MessageId.SPY_COUNT: "Number of spies",
    MessageId.START_GAME: "Start game",
    MessageId.MIN_PLAYERS: "At least 3 players are needed",
    MessageId.REVEAL_ROLE: "Pass the device to",
    MessageId.YOU_ARE_SPY: "You are the spy!",
    MessageId.SPY_GOAL: "Work out the secret word without getting caught",
    MessageId.YOUR_WORD: "Your word is",
    MessageId.NEXT_PLAYER: "Next player",
    MessageId.CATEGORY: "Category",
    MessageId.TIMER: "Time left",
    MessageId.VOTE_BUTTON: "Vote",
    MessageId.END_GAME: "End game",
    MessageId.PLAYERS: "Players",
    MessageId.VOTE_TITLE: "Who is the spy?",
    MessageId.BACK: "Back",
    MessageId.ELIMINATED: "Eliminated",
    MessageId.WAS_SPY: "was a spy!",
    MessageId.WAS_NOT_SPY: "was not a spy",
    MessageId.CONTINUE_GAME: "Continue",
    MessageId.VICTORY_PLAYERS: "The players win!",
    MessageId.VICTORY_SPIES: "The spies win!",
    MessageId.SPIES_WERE: "The spies were",
    MessageId.SPY_WAS: "The spy was",
    MessageId.RESET_GAME: "Play again",
}


class MessageCatalog:
    """Resolves message identifiers to display strings."""

    def __init__(self, overrides: Optional[Dict[MessageId, str]] = None):
        self._messages = dict(DEFAULT_MESSAGES)
        if overrides:
            self._messages.update(overrides)

    def get(self, message_id: MessageId) -> str:
        """Get the text for a message identifier."""
        return self._messages[message_id]

    __getitem__ = get


def load_messages_from_yaml(path: str) -> MessageCatalog:
    """
    Load message overrides (e.g. a translation) from a YAML mapping.

    Keys are message identifier values such as ``start_game``; keys not in
    ``MessageId`` are warned about and skipped.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ContentError: If the file isn't a mapping
    """
    messages_file = Path(path)

    if not messages_file.exists():
        raise FileNotFoundError(f"Messages file not found: {path}")

    with open(messages_file, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ContentError(f"Messages file must map message ids to text: {path}")

    overrides = {}
    for key, text in data.items():
        try:
            overrides[MessageId(key)] = str(text)
        except ValueError:
            logger.warning("Unknown message id '%s' in %s", key, path)

    return MessageCatalog(overrides)
