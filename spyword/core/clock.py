"""
Countdown scheduling for the round timer.

The session owns the remaining time; a clock only decides *when* to call
``GameSession.tick``. A clock must cancel any outstanding callback before
scheduling a new one, so at most one countdown is ever live.
"""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class AsyncioClock:
    """Recurring one-second wake-up driven by an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None, interval: float = 1.0):
        self.loop = loop
        self.interval = interval
        self._callback: Optional[Callable[[], object]] = None
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def is_running(self) -> bool:
        """Check if a callback is currently scheduled."""
        return self._handle is not None

    def start(self, callback: Callable[[], object]) -> None:
        """Start calling ``callback`` every interval, replacing any previous schedule."""
        self.cancel()
        if self.loop is None:
            self.loop = asyncio.get_running_loop()
        self._callback = callback
        self._handle = self.loop.call_later(self.interval, self._fire)

    def cancel(self) -> None:
        """Tear down the scheduled callback, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._callback = None

    def _fire(self) -> None:
        callback = self._callback
        if callback is None:
            return
        # Reschedule first so the callback is free to cancel us
        self._handle = self.loop.call_later(self.interval, self._fire)
        try:
            callback()
        except Exception:
            logger.exception("Timer callback failed, stopping clock")
            self.cancel()
