"""
Service container for dependency injection and initialization.

Usage:
    container = ServiceContainer(ServiceConfig())
    container.initialize()

    balance_service = container.balance_service
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from config import (
    BALANCER_SETTINGS,
    MAX_ROSTER_SIZE,
    MIN_PLAYERS,
    SORT_OPTIONS_COUNT,
    SORT_OPTIONS_MAX,
)
from domain.services.team_balancing_service import TeamBalancingService
from services.balance_service import BalanceService
from team_balancer import TeamBalancer

logger = logging.getLogger("pelada_bot.infrastructure.container")


@dataclass
class ServiceConfig:
    """Configuration for service initialization."""

    # Roster rules
    min_players: int = MIN_PLAYERS
    max_roster_size: int = MAX_ROSTER_SIZE

    # Algorithm tuning
    annealing_iterations: int = field(
        default_factory=lambda: BALANCER_SETTINGS["annealing_iterations"]
    )
    temperature_floor: float = field(default_factory=lambda: BALANCER_SETTINGS["temperature_floor"])

    # Scoring
    quality_scale: float = field(default_factory=lambda: BALANCER_SETTINGS["quality_scale"])
    draw_margin: float = field(default_factory=lambda: BALANCER_SETTINGS["draw_margin"])

    # Sort options
    options_count: int = SORT_OPTIONS_COUNT
    options_max: int = SORT_OPTIONS_MAX


class ServiceContainer:
    """
    Central container for the application services.

    Builds the scorer, the balancing engine and the application service in
    dependency order and hands them to the bot.
    """

    def __init__(self, config: ServiceConfig | None = None):
        self.config = config or ServiceConfig()
        self._initialized = False
        self._services: dict[str, Any] = {}

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """
        Create all services.

        This method is idempotent - calling it multiple times has no effect.
        """
        if self._initialized:
            logger.debug("ServiceContainer already initialized, skipping")
            return

        logger.info("Initializing ServiceContainer...")
        cfg = self.config

        scorer = TeamBalancingService(
            quality_scale=cfg.quality_scale,
            draw_margin=cfg.draw_margin,
        )
        balancer = TeamBalancer(
            min_players=cfg.min_players,
            iterations=cfg.annealing_iterations,
            temperature_floor=cfg.temperature_floor,
            balancing_service=scorer,
        )
        self._services["team_balancing_service"] = scorer
        self._services["team_balancer"] = balancer
        self._services["balance_service"] = BalanceService(
            balancer,
            max_roster_size=cfg.max_roster_size,
            options_count=cfg.options_count,
            options_max=cfg.options_max,
        )

        self._initialized = True
        logger.info("ServiceContainer initialization complete")

    @property
    def team_balancing_service(self) -> TeamBalancingService | None:
        return self._services.get("team_balancing_service")

    @property
    def team_balancer(self) -> TeamBalancer | None:
        return self._services.get("team_balancer")

    @property
    def balance_service(self) -> BalanceService | None:
        return self._services.get("balance_service")

    def expose_to_bot(self, bot) -> None:
        """Attach services to the bot so cog setup() functions can find them."""
        for name, service in self._services.items():
            setattr(bot, name, service)
