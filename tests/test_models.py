"""
Tests for domain models: Player, Team, BalanceAlgorithm and BalanceResult.
"""

import dataclasses

import pytest

from domain.models.balance_result import BalanceAlgorithm, BalanceResult
from domain.models.player import Player
from domain.models.team import Team
from tests.conftest import make_players


class TestPlayer:
    def test_defaults(self):
        player = Player(id="1", name="Ana")
        assert player.rating == 0.0
        assert player.email == ""
        assert player.position is None

    def test_is_immutable(self):
        player = Player(id="1", name="Ana", rating=1200)
        with pytest.raises(dataclasses.FrozenInstanceError):
            player.rating = 1300

    def test_to_dict(self):
        player = Player(id="7", name="Bia", rating=1100.5, email="bia@pelada.test", position="MEIA")
        assert player.to_dict() == {
            "id": "7",
            "name": "Bia",
            "email": "bia@pelada.test",
            "rating": 1100.5,
            "position": "MEIA",
        }

    def test_str(self):
        assert str(Player(id="1", name="Ana", rating=1200)) == "Ana (1200)"


class TestTeam:
    def test_totals(self):
        team = Team("Team 1", make_players([1000, 800, 600]))
        assert team.get_total_rating() == 2400
        assert team.get_average_rating() == 800
        assert len(team) == 3

    def test_empty_team_average_is_zero(self):
        team = Team("Team 2", [])
        assert team.get_total_rating() == 0
        assert team.get_average_rating() == 0.0

    def test_copies_player_list(self):
        players = make_players([1, 2])
        team = Team("Team 1", players)
        players.append(Player(id="x", name="X"))
        assert len(team) == 2

    def test_to_dict_uses_wire_keys(self):
        team = Team("Team 1", make_players([1000, 900]))
        data = team.to_dict()

        assert data["name"] == "Team 1"
        assert data["totalRating"] == 1900
        assert data["averageRating"] == 950
        assert [p["id"] for p in data["players"]] == ["p0", "p1"]

    def test_position_counts(self):
        team = Team("Team 1", make_players([1, 2, 3], ["GOLEIRO", "GOLEIRO", None]))
        assert team.get_position_counts() == {"GOLEIRO": 2, "unknown": 1}


class TestBalanceAlgorithm:
    def test_default_is_greedy_with_genetic_label(self):
        assert BalanceAlgorithm.default() is BalanceAlgorithm.GREEDY
        assert BalanceAlgorithm.GREEDY.value == "GENETIC"

    @pytest.mark.parametrize(
        "label,expected",
        [
            (None, BalanceAlgorithm.GREEDY),
            ("GENETIC", BalanceAlgorithm.GREEDY),
            ("genetic", BalanceAlgorithm.GREEDY),
            ("GREEDY", BalanceAlgorithm.GREEDY),
            ("SIMULATED_ANNEALING", BalanceAlgorithm.SIMULATED_ANNEALING),
            (" simulated_annealing ", BalanceAlgorithm.SIMULATED_ANNEALING),
            (BalanceAlgorithm.SIMULATED_ANNEALING, BalanceAlgorithm.SIMULATED_ANNEALING),
        ],
    )
    def test_parse(self, label, expected):
        assert BalanceAlgorithm.parse(label) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            BalanceAlgorithm.parse("BRUTE_FORCE")


class TestBalanceResult:
    def test_to_dict(self):
        team1 = Team("Team 1", make_players([1000, 800]))
        team2 = Team("Team 2", make_players([900, 700]))
        result = BalanceResult(
            teams=(team1, team2),
            algorithm=BalanceAlgorithm.GREEDY,
            quality=80.0,
            predicted_winner="TEAM1",
        )

        data = result.to_dict()
        assert data["algorithm"] == "GENETIC"
        assert data["quality"] == 80.0
        assert data["predictedWinner"] == "TEAM1"
        assert [t["name"] for t in data["teams"]] == ["Team 1", "Team 2"]
        assert result.rating_gap == 200
        assert result.team1 is team1
        assert result.team2 is team2
