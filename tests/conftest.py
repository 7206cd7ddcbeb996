"""
Pytest fixtures for tests.

Centralizes roster builders and seeded random sources so tests can replay
annealing runs deterministically.
"""

import random

import pytest

from domain.models.player import Player
from domain.services.team_balancing_service import TeamBalancingService
from services.balance_service import BalanceService
from team_balancer import TeamBalancer


def make_players(ratings, positions=None):
    """Build a roster with ids "p0", "p1", ... and the given ratings."""
    positions = positions or [None] * len(ratings)
    return [
        Player(id=f"p{i}", name=f"Player{i}", rating=rating, email=f"p{i}@pelada.test", position=pos)
        for i, (rating, pos) in enumerate(zip(ratings, positions))
    ]


@pytest.fixture
def sample_players():
    """Ten players with spread-out ratings."""
    return make_players([1500, 1420, 1380, 1300, 1250, 1210, 1180, 1100, 1020, 950])


@pytest.fixture
def seeded_rng():
    """Random source with a fixed seed."""
    return random.Random(1234)


@pytest.fixture
def balancer():
    """Balancer with default settings."""
    return TeamBalancer(balancing_service=TeamBalancingService(quality_scale=10.0, draw_margin=50.0))


@pytest.fixture
def balance_service(balancer):
    """Application service around the default balancer."""
    return BalanceService(balancer, max_roster_size=40, options_count=3, options_max=5)
