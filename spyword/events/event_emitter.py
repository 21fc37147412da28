"""
Event emitter delivering celebration signals to the presentation layer.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.player import Player

logger = logging.getLogger(__name__)

Listener = Callable[[str, Dict[str, Any]], None]


class Celebration(Enum):
    """Fire-and-forget hints for celebratory effects."""
    SPY_CAUGHT = "spy-caught"
    ROUND_STARTED = "round-started"
    GAME_ENDED = "game-ended"


class EventEmitter:
    """Fans game events out to subscribed listeners."""

    def __init__(self, listeners: Optional[List[Listener]] = None):
        self._listeners: List[Listener] = list(listeners or [])

    def subscribe(self, listener: Listener) -> None:
        """Register a callable receiving ``(event_type, data)``."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a previously registered listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event_type: str, data: Dict[str, Any]) -> None:
        """Emit an event to every listener."""
        for listener in list(self._listeners):
            try:
                listener(event_type, data)
            except Exception:
                # Don't let presentation errors break the game
                logger.exception("Listener failed handling '%s' event", event_type)

    def emit_round_started(self, category: str, player_count: int) -> None:
        """Emit round start celebration (everyone has seen their role)."""
        self._emit(Celebration.ROUND_STARTED.value, {
            "category": category,
            "player_count": player_count,
        })

    def emit_spy_caught(self, player: 'Player') -> None:
        """Emit celebration for a spy being voted out."""
        self._emit(Celebration.SPY_CAUGHT.value, {
            "player_id": player.id,
            "name": player.name,
        })

    def emit_game_ended(self) -> None:
        """Emit the neutral celebration for a manually ended game."""
        self._emit(Celebration.GAME_ENDED.value, {})

    def emit_phase_change(self, phase: str) -> None:
        """Emit phase change event."""
        self._emit("phase_change", {
            "phase": phase,
        })
