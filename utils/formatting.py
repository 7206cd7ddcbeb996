"""
Shared formatting helpers and position constants.
"""

from collections.abc import Iterable

from domain.models.balance_result import BalanceAlgorithm

# Pelada positions with emojis for team listings
POSITION_EMOJIS = {
    "GOLEIRO": "🧤",
    "ZAGUEIRO": "🛡️",
    "LATERAL": "↔️",
    "MEIA": "🎯",
    "ATACANTE": "⚽",
}

ALGORITHM_NAMES = {
    BalanceAlgorithm.GREEDY: "Greedy",
    BalanceAlgorithm.SIMULATED_ANNEALING: "Simulated annealing",
}

WINNER_LABELS = {
    "TEAM1": "Team 1 favored",
    "TEAM2": "Team 2 favored",
    "DRAW": "Too close to call",
}


def format_rating(rating: float) -> str:
    """Ratings are usually whole numbers; drop the trailing .0 when they are."""
    if float(rating).is_integer():
        return str(int(rating))
    return f"{rating:.1f}"


def format_player_line(index: int, name: str, rating: float, position: str | None) -> str:
    """Return a numbered roster line such as '1. Ana [1200] 🧤'."""
    line = f"{index}. {name} [{format_rating(rating)}]"
    emoji = POSITION_EMOJIS.get(position or "", "")
    if emoji:
        line += f" {emoji}"
    return line


def format_quality_bar(quality: float, width: int = 10) -> str:
    """Render quality (0-100) as a block bar, e.g. '▰▰▰▰▰▰▰▰▱▱ 80%'."""
    filled = max(0, min(width, round(quality / 100 * width)))
    return f"{'▰' * filled}{'▱' * (width - filled)} {quality:.0f}%"


def format_algorithm(algorithm: BalanceAlgorithm) -> str:
    return ALGORITHM_NAMES.get(algorithm, algorithm.value)


def format_names(names: Iterable[str]) -> str:
    """Comma-separated names, or a dash when there are none."""
    joined = ", ".join(names)
    return joined or "—"
