"""
Roster parsing helpers shared by the JSON boundary and the slash commands.
"""

import math
import re

from config import MAX_ROSTER_SIZE
from domain.models.player import Player
from services import error_codes
from services.result import Result

# Entries are separated by commas, semicolons or line breaks
_ENTRY_SEPARATOR = re.compile(r"[,;\n]+")
# "Name:1200", "Name = 1200" or "Name:1200:GOLEIRO"
_FIELD_SEPARATOR = re.compile(r"\s*[:=]\s*")


def coerce_rating(value) -> float:
    """
    Convert a raw rating into a finite float.

    Raises:
        ValueError: If the value is missing, boolean, non-numeric or not finite
    """
    if value is None or isinstance(value, bool):
        raise ValueError("rating is required and must be a number")
    try:
        rating = float(value)
    except OverflowError:
        raise ValueError("rating must be finite, got an out-of-range number") from None
    except (TypeError, ValueError):
        raise ValueError(f"rating must be a number, got {value!r}") from None
    if not math.isfinite(rating):
        raise ValueError(f"rating must be finite, got {value!r}")
    return rating


def parse_roster_text(text: str, max_players: int | None = None) -> Result[list[Player]]:
    """
    Parse a free-text roster such as "Ana:1200, Bia:1100:GOLEIRO".

    Player ids are the 1-based entry positions.

    Args:
        text: Roster entries separated by commas, semicolons or newlines
        max_players: Largest roster accepted (defaults to config.MAX_ROSTER_SIZE)

    Returns:
        Result.ok(players) or Result.fail(message, code=VALIDATION_ERROR)
    """
    max_players = max_players if max_players is not None else MAX_ROSTER_SIZE
    entries = [e.strip() for e in _ENTRY_SEPARATOR.split(text or "") if e.strip()]
    if len(entries) > max_players:
        return Result.fail(
            f"Too many players: {len(entries)} (max {max_players}).",
            code=error_codes.VALIDATION_ERROR,
        )

    players: list[Player] = []
    for index, entry in enumerate(entries, 1):
        parts = _FIELD_SEPARATOR.split(entry)
        if len(parts) not in (2, 3) or not parts[0]:
            return Result.fail(
                f"Entry {index} ('{entry}') must look like Name:rating or Name:rating:position.",
                code=error_codes.VALIDATION_ERROR,
            )
        try:
            rating = coerce_rating(parts[1])
        except ValueError as exc:
            return Result.fail(
                f"Entry {index} ('{parts[0]}'): {exc}", code=error_codes.VALIDATION_ERROR
            )
        position = parts[2].upper() if len(parts) == 3 and parts[2] else None
        players.append(Player(id=str(index), name=parts[0], rating=rating, position=position))

    return Result.ok(players)
