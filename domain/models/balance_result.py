"""
Balance result domain model and algorithm selector.
"""

from dataclasses import dataclass
from enum import Enum

from config import DEFAULT_ALGORITHM
from domain.models.team import Team


class BalanceAlgorithm(Enum):
    """
    Team sorting algorithms.

    GREEDY keeps the "GENETIC" label clients already send, even though it is
    a plain sorted alternating split with no population search.
    """

    GREEDY = "GENETIC"
    SIMULATED_ANNEALING = "SIMULATED_ANNEALING"

    @classmethod
    def default(cls) -> "BalanceAlgorithm":
        """Configured default (DEFAULT_ALGORITHM), greedy when unset or unknown."""
        label = DEFAULT_ALGORITHM.strip().upper()
        for member in cls:
            if member.value == label or member.name == label:
                return member
        return cls.GREEDY

    @classmethod
    def parse(cls, value: "str | BalanceAlgorithm | None") -> "BalanceAlgorithm":
        """
        Resolve a wire label to an algorithm.

        None falls back to the default. Labels are matched case-insensitively.

        Raises:
            ValueError: If the label names no known algorithm
        """
        if value is None:
            return cls.default()
        if isinstance(value, cls):
            return value
        label = str(value).strip().upper()
        for member in cls:
            if member.value == label or member.name == label:
                return member
        valid = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown algorithm '{value}'. Expected one of: {valid}")


@dataclass
class BalanceResult:
    """Two sorted teams plus how they were produced and how even they are."""

    teams: tuple[Team, Team]
    algorithm: BalanceAlgorithm
    quality: float
    predicted_winner: str = "DRAW"

    @property
    def team1(self) -> Team:
        return self.teams[0]

    @property
    def team2(self) -> Team:
        return self.teams[1]

    @property
    def rating_gap(self) -> float:
        return abs(self.team1.get_total_rating() - self.team2.get_total_rating())

    def to_dict(self) -> dict:
        return {
            "teams": [team.to_dict() for team in self.teams],
            "algorithm": self.algorithm.value,
            "quality": self.quality,
            "predictedWinner": self.predicted_winner,
        }
