"""
Domain models - pure data structures representing business entities.
"""

from domain.models.balance_result import BalanceAlgorithm, BalanceResult
from domain.models.player import Player
from domain.models.team import Team

__all__ = ["BalanceAlgorithm", "BalanceResult", "Player", "Team"]
