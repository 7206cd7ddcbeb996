"""
Player domain model.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """
    A rated player on a pelada roster.

    This is a pure domain model with no infrastructure dependencies. Only
    ``rating`` takes part in balancing; ``email`` and ``position`` travel
    along for display.
    """

    id: str
    name: str
    rating: float = 0.0
    email: str = ""
    position: str | None = None  # e.g. "GOLEIRO", "ZAGUEIRO", "MEIA"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "rating": self.rating,
            "position": self.position,
        }

    def __str__(self) -> str:
        return f"{self.name} ({self.rating:g})"
