"""
Balanced team sorting algorithms.
"""

import logging
import math
import random
from dataclasses import dataclass

from config import BALANCER_SETTINGS, MIN_PLAYERS
from domain.models.balance_result import BalanceAlgorithm, BalanceResult
from domain.models.player import Player
from domain.models.team import Team
from domain.services.team_balancing_service import TeamBalancingService

logger = logging.getLogger("pelada_bot.balancer")

TEAM1_NAME = "Team 1"
TEAM2_NAME = "Team 2"


class InsufficientPlayersError(ValueError):
    """Raised when a roster is too small to split into two teams."""

    def __init__(self, minimum: int, actual: int):
        self.minimum = minimum
        self.actual = actual
        super().__init__(f"Minimum {minimum} players required (got {actual}).")


@dataclass
class AnnealingState:
    """Working and best-known partitions threaded through the annealing loop."""

    team1: list[Player]
    team2: list[Player]
    sum1: float
    sum2: float
    best_team1: list[Player]
    best_team2: list[Player]
    best_diff: float

    @property
    def diff(self) -> float:
        return abs(self.sum1 - self.sum2)

    @classmethod
    def from_split(cls, team1: list[Player], team2: list[Player]) -> "AnnealingState":
        sum1 = sum(p.rating for p in team1)
        sum2 = sum(p.rating for p in team2)
        return cls(
            team1=list(team1),
            team2=list(team2),
            sum1=sum1,
            sum2=sum2,
            best_team1=list(team1),
            best_team2=list(team2),
            best_diff=abs(sum1 - sum2),
        )


class TeamBalancer:
    """
    Splits a rated roster into two balanced teams.

    Offers a deterministic greedy split and a simulated annealing refiner
    that searches for a smaller rating gap.
    """

    def __init__(
        self,
        min_players: int | None = None,
        iterations: int | None = None,
        temperature_floor: float | None = None,
        balancing_service: TeamBalancingService | None = None,
    ):
        """
        Initialize the balancer.

        Args:
            min_players: Smallest roster accepted (default 4)
            iterations: Annealing iterations per run (default 1000)
            temperature_floor: Offset added to the temperature in the acceptance rule (default 0.01)
            balancing_service: Scorer used for quality and winner prediction
        """
        settings = BALANCER_SETTINGS
        self.min_players = min_players if min_players is not None else MIN_PLAYERS
        self.iterations = (
            iterations if iterations is not None else settings["annealing_iterations"]
        )
        self.temperature_floor = (
            temperature_floor
            if temperature_floor is not None
            else settings["temperature_floor"]
        )
        self.balancing_service = balancing_service or TeamBalancingService()

    def validate_roster(self, players: list[Player]) -> None:
        """
        Check that the roster can form two teams.

        Raises:
            InsufficientPlayersError: If fewer than min_players are given
        """
        if len(players) < self.min_players:
            raise InsufficientPlayersError(self.min_players, len(players))

    def greedy_split(self, players: list[Player]) -> tuple[Team, Team]:
        """
        Alternate players into two teams by descending rating.

        The sort is stable, so equal ratings keep their input order and the
        result is fully deterministic for a given roster.

        Args:
            players: Roster to split

        Returns:
            Tuple of (Team1, Team2)
        """
        sorted_players = sorted(players, key=lambda p: p.rating, reverse=True)

        team1_players: list[Player] = []
        team2_players: list[Player] = []
        for i, player in enumerate(sorted_players):
            if i % 2 == 0:
                team1_players.append(player)
            else:
                team2_players.append(player)

        return Team(TEAM1_NAME, team1_players), Team(TEAM2_NAME, team2_players)

    def annealing_split(
        self, players: list[Player], rng: random.Random | None = None
    ) -> tuple[Team, Team]:
        """
        Refine an ordered half split with simulated annealing.

        Starts from the first ceil(n/2) players against the rest and performs
        one-for-one swaps, so team sizes never change. A swap is kept when it
        beats the best gap seen so far, or otherwise with probability
        exp(-gap / (temperature + floor)) where the temperature decays
        linearly from 1 to 0. The best partition seen is returned, not the
        final working one.

        Args:
            players: Roster to split
            rng: Random source; a fresh unseeded one is used when omitted

        Returns:
            Tuple of (Team1, Team2) for the best partition found
        """
        rng = rng or random.Random()
        split = math.ceil(len(players) / 2)
        state = AnnealingState.from_split(players[:split], players[split:])
        initial_diff = state.best_diff

        if state.team1 and state.team2:
            for iteration in range(self.iterations):
                temperature = 1 - iteration / self.iterations
                self._anneal_step(state, temperature, rng)

        logger.debug(
            f"Annealing finished: initial gap {initial_diff:.1f}, best gap {state.best_diff:.1f}"
        )
        return Team(TEAM1_NAME, state.best_team1), Team(TEAM2_NAME, state.best_team2)

    def _anneal_step(self, state: AnnealingState, temperature: float, rng: random.Random) -> None:
        """Try one random cross-team swap and update the state in place."""
        i = rng.randrange(len(state.team1))
        j = rng.randrange(len(state.team2))

        delta = state.team2[j].rating - state.team1[i].rating
        new_sum1 = state.sum1 + delta
        new_sum2 = state.sum2 - delta
        new_diff = abs(new_sum1 - new_sum2)

        improved = new_diff < state.best_diff
        accepted = improved or rng.random() < math.exp(
            -new_diff / (temperature + self.temperature_floor)
        )
        if not accepted:
            # Rejected swaps were never applied
            return

        state.team1[i], state.team2[j] = state.team2[j], state.team1[i]
        state.sum1 = new_sum1
        state.sum2 = new_sum2

        if improved:
            # Exact sums before recording a new best
            state.sum1 = sum(p.rating for p in state.team1)
            state.sum2 = sum(p.rating for p in state.team2)
            if state.diff < state.best_diff:
                state.best_team1 = list(state.team1)
                state.best_team2 = list(state.team2)
                state.best_diff = state.diff

    def split(
        self,
        players: list[Player],
        algorithm: BalanceAlgorithm,
        rng: random.Random | None = None,
    ) -> tuple[Team, Team]:
        """Dispatch to the split for the given algorithm."""
        if algorithm is BalanceAlgorithm.SIMULATED_ANNEALING:
            return self.annealing_split(players, rng)
        return self.greedy_split(players)

    def balance(
        self,
        players: list[Player],
        algorithm: BalanceAlgorithm | None = None,
        rng: random.Random | None = None,
    ) -> BalanceResult:
        """
        Validate, split and score a roster.

        Args:
            players: Roster to split (at least min_players)
            algorithm: Sorting algorithm, greedy by default
            rng: Random source for the annealing refiner

        Returns:
            BalanceResult with both teams, the algorithm and the quality score

        Raises:
            InsufficientPlayersError: If the roster is too small
        """
        algorithm = algorithm or BalanceAlgorithm.default()
        self.validate_roster(players)

        team1, team2 = self.split(players, algorithm, rng)
        quality = self.balancing_service.calculate_quality(team1, team2)
        predicted_winner = self.balancing_service.predict_winner(team1, team2)

        logger.info(
            f"Balanced {len(players)} players with {algorithm.value}: "
            f"{team1.get_total_rating():.1f} vs {team2.get_total_rating():.1f} "
            f"(quality {quality:.1f})"
        )
        return BalanceResult(
            teams=(team1, team2),
            algorithm=algorithm,
            quality=quality,
            predicted_winner=predicted_winner,
        )
