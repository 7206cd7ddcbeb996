"""
Team domain model.
"""

from domain.models.player import Player


class Team:
    """
    Represents one side of a sorted match.

    This is a pure domain model with no infrastructure dependencies.
    Player order is the order players were assigned in.
    """

    def __init__(self, name: str, players: list[Player]):
        self.name = name
        self.players = list(players)

    def get_total_rating(self) -> float:
        """Sum of member ratings."""
        return sum(p.rating for p in self.players)

    def get_average_rating(self) -> float:
        """Mean member rating, or 0.0 for an empty team."""
        if not self.players:
            return 0.0
        return self.get_total_rating() / len(self.players)

    def get_position_counts(self) -> dict[str, int]:
        """
        Count players per declared position.

        Players without a position are grouped under "unknown".
        """
        counts: dict[str, int] = {}
        for player in self.players:
            key = player.position or "unknown"
            counts[key] = counts.get(key, 0) + 1
        return counts

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "players": [p.to_dict() for p in self.players],
            "totalRating": self.get_total_rating(),
            "averageRating": self.get_average_rating(),
        }

    def __len__(self) -> int:
        return len(self.players)

    def __repr__(self) -> str:
        return f"Team(name={self.name!r}, players={len(self.players)}, total={self.get_total_rating():g})"
