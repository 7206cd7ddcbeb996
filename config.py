"""
Centralized configuration for the Pelada team sorter bot.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _parse_positive_float(env_var: str, default: float) -> float:
    value = _parse_float(env_var, default)
    return value if value > 0 else default


def _parse_bool(env_var: str, default: bool) -> bool:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


DISCORD_BOT_TOKEN = os.getenv("DISCORD_BOT_TOKEN")
SYNC_COMMANDS_ON_READY = _parse_bool("SYNC_COMMANDS_ON_READY", True)

# Smallest roster that still yields two real teams
MIN_PLAYERS = _parse_int("BALANCER_MIN_PLAYERS", 4)
MAX_ROSTER_SIZE = _parse_int("MAX_ROSTER_SIZE", 40)

DEFAULT_ALGORITHM = os.getenv("DEFAULT_ALGORITHM", "GENETIC")

BALANCER_SETTINGS: dict[str, Any] = {
    "annealing_iterations": _parse_int("ANNEALING_ITERATIONS", 1000),
    # Added to the temperature so the acceptance exponent never divides by zero
    "temperature_floor": 0.01,
    # Rating points of imbalance that cost one quality point
    "quality_scale": _parse_positive_float("QUALITY_SCALE", 10.0),
    # Total-rating gap under which a matchup is called a draw
    "draw_margin": _parse_float("DRAW_MARGIN", 50.0),
}

SORT_OPTIONS_COUNT = _parse_int("SORT_OPTIONS_COUNT", 3)
SORT_OPTIONS_MAX = 5
