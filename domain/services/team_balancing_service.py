"""
Team balancing domain service.

Handles rating gap calculations and balance scoring.
"""

from config import BALANCER_SETTINGS
from domain.models.team import Team

DRAW = "DRAW"
TEAM1 = "TEAM1"
TEAM2 = "TEAM2"

MAX_QUALITY = 100.0

# Position groups behind a "GK-DF-MF-FW" formation string
FORMATION_GROUPS = (
    ("GOLEIRO",),
    ("ZAGUEIRO", "LATERAL"),
    ("MEIA",),
    ("ATACANTE",),
)


class TeamBalancingService:
    """
    Pure domain service for team balancing logic.

    Responsibilities:
    - Measure the rating gap between two teams
    - Convert the gap into a 0-100 quality score
    - Call the likely winner of a matchup
    """

    def __init__(
        self,
        quality_scale: float | None = None,
        draw_margin: float | None = None,
    ):
        """
        Initialize team balancing service.

        Args:
            quality_scale: Rating points of imbalance that cost one quality point
            draw_margin: Total-rating gap below which a matchup is called a draw

        Raises:
            ValueError: If quality_scale is not positive
        """
        settings = BALANCER_SETTINGS
        self.quality_scale = (
            quality_scale if quality_scale is not None else settings["quality_scale"]
        )
        self.draw_margin = draw_margin if draw_margin is not None else settings["draw_margin"]
        if self.quality_scale <= 0:
            raise ValueError(f"quality_scale must be positive, got {self.quality_scale}")

    def calculate_rating_gap(self, team1: Team, team2: Team) -> float:
        """Absolute difference between the two teams' total ratings."""
        return abs(team1.get_total_rating() - team2.get_total_rating())

    def calculate_quality(self, team1: Team, team2: Team) -> float:
        """
        Score how evenly matched two teams are.

        quality = 100 - min(gap / quality_scale, 100), so a perfect split
        scores 100 and the score never drops below 0.

        Args:
            team1: First team
            team2: Second team

        Returns:
            Balance quality in [0, 100]
        """
        gap = self.calculate_rating_gap(team1, team2)
        return MAX_QUALITY - min(gap / self.quality_scale, MAX_QUALITY)

    def predict_winner(self, team1: Team, team2: Team) -> str:
        """
        Call the stronger side of a matchup.

        Returns:
            "DRAW" when the gap is inside the draw margin, else "TEAM1" or "TEAM2"
        """
        diff = team1.get_total_rating() - team2.get_total_rating()
        if abs(diff) < self.draw_margin:
            return DRAW
        return TEAM1 if diff > 0 else TEAM2

    def describe_balance(self, quality: float) -> str:
        """Human readable verdict for a quality score."""
        if quality >= 90:
            return "Perfectly balanced teams! Expect a very close game."
        if quality >= 75:
            return "Well balanced teams. Should be a competitive game."
        if quality >= 50:
            return "Noticeable gap between the teams. The match may be lopsided."
        return "Teams are very unbalanced. Consider sorting again."

    def get_team_stats(self, team: Team) -> dict:
        """
        Get display stats for a team.

        Args:
            team: Team to analyze

        Returns:
            Dictionary with total, average, size, position counts and formation
        """
        return {
            "total_rating": team.get_total_rating(),
            "average_rating": team.get_average_rating(),
            "size": len(team.players),
            "positions": team.get_position_counts(),
            "formation": self.suggest_formation(team),
        }

    def suggest_formation(self, team: Team) -> str:
        """
        Summarize declared positions as "GK-DF-MF-FW", e.g. "1-2-1-1".

        Zagueiros and laterais both count as defenders. Players without a
        position are left out.
        """
        counts = team.get_position_counts()
        return "-".join(
            str(sum(counts.get(position, 0) for position in group)) for group in FORMATION_GROUPS
        )
