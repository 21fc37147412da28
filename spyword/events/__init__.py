"""
Notifications sent from the game core to front ends.
"""

from .event_emitter import EventEmitter, Celebration

__all__ = ['EventEmitter', 'Celebration']
