"""Tests for utils/formatting.py."""

import pytest

from domain.models.balance_result import BalanceAlgorithm
from utils.formatting import (
    format_algorithm,
    format_names,
    format_player_line,
    format_quality_bar,
    format_rating,
)


class TestFormatRating:
    @pytest.mark.parametrize(
        "rating,expected",
        [(1200, "1200"), (1200.0, "1200"), (1100.5, "1100.5"), (99.25, "99.2"), (0, "0")],
    )
    def test_format(self, rating, expected):
        assert format_rating(rating) == expected


class TestFormatPlayerLine:
    def test_with_position(self):
        assert format_player_line(1, "Ana", 1200, "GOLEIRO") == "1. Ana [1200] 🧤"

    def test_without_position(self):
        assert format_player_line(3, "Bia", 1100.5, None) == "3. Bia [1100.5]"

    def test_unknown_position_has_no_emoji(self):
        assert format_player_line(2, "Caio", 900, "PIVO") == "2. Caio [900]"


class TestFormatQualityBar:
    def test_eighty_percent(self):
        assert format_quality_bar(80) == "▰▰▰▰▰▰▰▰▱▱ 80%"

    def test_bounds(self):
        assert format_quality_bar(0) == "▱▱▱▱▱▱▱▱▱▱ 0%"
        assert format_quality_bar(100, width=4) == "▰▰▰▰ 100%"


def test_format_algorithm():
    assert format_algorithm(BalanceAlgorithm.GREEDY) == "Greedy"
    assert format_algorithm(BalanceAlgorithm.SIMULATED_ANNEALING) == "Simulated annealing"


def test_format_names():
    assert format_names(["Ana", "Bia"]) == "Ana, Bia"
    assert format_names([]) == "—"
