"""
Application service for sorting pelada rosters into teams.

Sits between callers (the JSON request boundary and the Discord commands)
and the TeamBalancer engine: parses and validates input, seeds the random
source, and turns expected failures into Result objects.
"""

import logging
import random

from config import MAX_ROSTER_SIZE, SORT_OPTIONS_COUNT, SORT_OPTIONS_MAX
from domain.models.balance_result import BalanceAlgorithm, BalanceResult
from domain.models.player import Player
from services import error_codes
from services.result import Result
from team_balancer import InsufficientPlayersError, TeamBalancer
from utils.roster_parser import coerce_rating

logger = logging.getLogger("pelada_bot.services.balance")

GENERIC_ERROR_MESSAGE = "Error generating teams"


class BalanceService:
    """Orchestrates roster validation, team sorting and option ranking."""

    def __init__(
        self,
        balancer: TeamBalancer,
        max_roster_size: int | None = None,
        options_count: int | None = None,
        options_max: int | None = None,
    ):
        self.balancer = balancer
        self.max_roster_size = max_roster_size if max_roster_size is not None else MAX_ROSTER_SIZE
        self.options_count = options_count if options_count is not None else SORT_OPTIONS_COUNT
        self.options_max = options_max if options_max is not None else SORT_OPTIONS_MAX

    @staticmethod
    def _make_rng(seed: int | None) -> random.Random:
        return random.Random(seed) if seed is not None else random.Random()

    def _insufficient(self, exc: InsufficientPlayersError) -> Result:
        return Result.fail(
            f"Minimum {exc.minimum} players required.",
            code=error_codes.INSUFFICIENT_PLAYERS,
            details={"minimum": exc.minimum, "actual": exc.actual},
        )

    def balance_players(
        self,
        players: list[Player],
        algorithm: "BalanceAlgorithm | str | None" = None,
        seed: int | None = None,
    ) -> Result[BalanceResult]:
        """
        Split a roster into two balanced teams.

        Args:
            players: Parsed roster
            algorithm: Algorithm or wire label; greedy when omitted
            seed: Optional seed for reproducible annealing runs

        Returns:
            Result.ok(BalanceResult) or a failure with INSUFFICIENT_PLAYERS /
            VALIDATION_ERROR
        """
        try:
            selected = BalanceAlgorithm.parse(algorithm)
        except ValueError as exc:
            return Result.fail(str(exc), code=error_codes.VALIDATION_ERROR)

        try:
            result = self.balancer.balance(players, selected, rng=self._make_rng(seed))
        except InsufficientPlayersError as exc:
            logger.warning(f"Sort rejected: {exc}")
            return self._insufficient(exc)

        return Result.ok(result)

    def generate_options(
        self,
        players: list[Player],
        algorithm: "BalanceAlgorithm | str | None" = None,
        count: int | None = None,
        seed: int | None = None,
    ) -> Result[list[BalanceResult]]:
        """
        Sort several shuffled copies of the roster and rank them.

        Each option balances an independently shuffled roster, so ties and
        annealing runs differ between options. Options come back ordered by
        quality, best first.

        Args:
            players: Parsed roster
            algorithm: Algorithm or wire label; greedy when omitted
            count: Number of options (defaults to config.SORT_OPTIONS_COUNT)
            seed: Optional seed making the whole batch reproducible

        Returns:
            Result.ok(list of BalanceResult) or a failure
        """
        count = count if count is not None else self.options_count
        if not 1 <= count <= self.options_max:
            return Result.fail(
                f"Option count must be between 1 and {self.options_max}.",
                code=error_codes.VALIDATION_ERROR,
            )
        try:
            selected = BalanceAlgorithm.parse(algorithm)
        except ValueError as exc:
            return Result.fail(str(exc), code=error_codes.VALIDATION_ERROR)

        rng = self._make_rng(seed)
        options: list[BalanceResult] = []
        try:
            for _ in range(count):
                shuffled = list(players)
                rng.shuffle(shuffled)
                options.append(self.balancer.balance(shuffled, selected, rng=rng))
        except InsufficientPlayersError as exc:
            logger.warning(f"Sort options rejected: {exc}")
            return self._insufficient(exc)

        options.sort(key=lambda option: option.quality, reverse=True)
        return Result.ok(options)

    def parse_players(self, raw_players) -> Result[list[Player]]:
        """
        Build Players from decoded JSON.

        A missing roster is treated as empty so the minimum-size rule reports
        it. Every entry needs a finite numeric "rating" ("elo" is accepted as
        an alias); ids default to the 1-based position.

        Returns:
            Result.ok(players) or Result.fail(message, code=VALIDATION_ERROR)
        """
        if raw_players is None:
            return Result.ok([])
        if not isinstance(raw_players, list):
            return Result.fail("'players' must be a list.", code=error_codes.VALIDATION_ERROR)
        if len(raw_players) > self.max_roster_size:
            return Result.fail(
                f"Too many players: {len(raw_players)} (max {self.max_roster_size}).",
                code=error_codes.VALIDATION_ERROR,
            )

        players: list[Player] = []
        for index, raw in enumerate(raw_players, 1):
            if not isinstance(raw, dict):
                return Result.fail(
                    f"Player {index} must be an object.", code=error_codes.VALIDATION_ERROR
                )
            raw_rating = raw.get("rating", raw.get("elo"))
            # JSON numbers only; numeric strings are a text-roster convenience
            if isinstance(raw_rating, str):
                return Result.fail(
                    f"Player {index}: rating must be a number, got {raw_rating!r}",
                    code=error_codes.VALIDATION_ERROR,
                )
            try:
                rating = coerce_rating(raw_rating)
            except ValueError as exc:
                return Result.fail(f"Player {index}: {exc}", code=error_codes.VALIDATION_ERROR)

            player_id = str(raw.get("id", index))
            position = raw.get("position")
            players.append(
                Player(
                    id=player_id,
                    name=str(raw.get("name") or player_id),
                    rating=rating,
                    email=str(raw.get("email") or ""),
                    position=str(position) if position else None,
                )
            )
        return Result.ok(players)

    def handle_sort_request(self, body) -> tuple[int, dict]:
        """
        JSON boundary for team sorting.

        Accepts {"players": [...], "algorithm"?: "GENETIC" | "SIMULATED_ANNEALING",
        "seed"?: int} and returns (status, payload). Expected failures map to
        400, anything unexpected to 500; a response never carries one team
        without the other.
        """
        try:
            result = self._sort_from_body(body)
        except Exception as exc:
            logger.error(f"Error generating teams: {exc}", exc_info=True)
            return 500, {"error": GENERIC_ERROR_MESSAGE, "code": error_codes.INTERNAL_ERROR}

        if not result.success:
            payload = {"error": result.error, "code": result.error_code}
            payload.update(result.details or {})
            return error_codes.STATUS_BY_CODE.get(result.error_code, 400), payload

        return 200, result.value.to_dict()

    def _sort_from_body(self, body) -> Result[BalanceResult]:
        if not isinstance(body, dict):
            return Result.fail("Request body must be a JSON object.", code=error_codes.VALIDATION_ERROR)

        seed = body.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            return Result.fail("'seed' must be an integer.", code=error_codes.VALIDATION_ERROR)

        parsed = self.parse_players(body.get("players"))
        if not parsed.success:
            return parsed

        return self.balance_players(parsed.value, body.get("algorithm"), seed=seed)
