"""
Player class representing a participant sharing the device.
"""

import uuid
from dataclasses import dataclass, field

from .roles import Role


def generate_player_id() -> str:
    """Generate a short opaque player identifier."""
    return uuid.uuid4().hex[:9]


@dataclass
class Player:
    """Represents a player on the roster."""
    name: str
    id: str = field(default_factory=generate_player_id)
    role: Role = Role.PLAYER  # Meaningless until a round is started
    has_seen_role: bool = False
    is_eliminated: bool = False

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"

    @property
    def is_spy(self) -> bool:
        """Check if player was dealt the spy role."""
        return self.role.is_spy

    @property
    def is_active(self) -> bool:
        """Check if player is still in the round."""
        return not self.is_eliminated

    def mark_seen(self) -> None:
        """Record that the player has viewed their role."""
        self.has_seen_role = True

    def eliminate(self) -> None:
        """Mark player as voted out."""
        self.is_eliminated = True

    def deal(self, role: Role) -> None:
        """Give the player a fresh role for a new round."""
        self.role = role
        self.has_seen_role = False
        self.is_eliminated = False

    def clear(self) -> None:
        """Return the player to the pre-round state."""
        self.deal(Role.PLAYER)
