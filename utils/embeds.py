"""
Reusable Discord embed builders.
"""

import discord

from domain.models.balance_result import BalanceResult
from domain.models.team import Team
from domain.services.team_balancing_service import TeamBalancingService
from utils.formatting import (
    WINNER_LABELS,
    format_algorithm,
    format_names,
    format_player_line,
    format_quality_bar,
    format_rating,
)


def quality_color(quality: float) -> discord.Color:
    """Green for well balanced teams, orange for a noticeable gap, red otherwise."""
    if quality >= 75:
        return discord.Color.green()
    if quality >= 50:
        return discord.Color.orange()
    return discord.Color.red()


def format_team_field(team: Team, formation: str | None = None) -> tuple[str, str]:
    """
    Build (name, value) for a team embed field.

    The formation line is only added when some player declared a position.
    """
    name = (
        f"{team.name} — {format_rating(team.get_total_rating())} "
        f"(avg {format_rating(round(team.get_average_rating(), 1))})"
    )
    lines = [
        format_player_line(i, p.name, p.rating, p.position)
        for i, p in enumerate(team.players, 1)
    ]
    if formation and any(p.position for p in team.players):
        lines.append(f"Formation: {formation}")
    return name, "\n".join(lines) or "No players"


def create_teams_embed(
    result: BalanceResult,
    balancing_service: TeamBalancingService | None = None,
    title: str = "⚽ Teams Sorted",
) -> discord.Embed:
    """Create the embed announcing a sorted match."""
    balancing_service = balancing_service or TeamBalancingService()

    embed = discord.Embed(
        title=title,
        description=balancing_service.describe_balance(result.quality),
        color=quality_color(result.quality),
    )
    for team in result.teams:
        name, value = format_team_field(team, balancing_service.suggest_formation(team))
        embed.add_field(name=name, value=value, inline=True)

    embed.add_field(
        name="Balance",
        value=(
            f"{format_quality_bar(result.quality)}\n"
            f"Gap: {format_rating(result.rating_gap)} • {WINNER_LABELS.get(result.predicted_winner, '')}"
        ),
        inline=False,
    )
    embed.set_footer(text=f"Algorithm: {format_algorithm(result.algorithm)}")
    return embed


def create_options_embed(options: list[BalanceResult]) -> discord.Embed:
    """Summarize ranked sort options, best first."""
    best_quality = options[0].quality if options else 0.0
    embed = discord.Embed(
        title=f"🎲 {len(options)} Sort Options",
        description="Ranked by balance quality.",
        color=quality_color(best_quality),
    )
    for rank, option in enumerate(options, 1):
        embed.add_field(
            name=f"#{rank} — {format_quality_bar(option.quality)}",
            value=(
                f"**{option.team1.name}:** {format_names(p.name for p in option.team1.players)}\n"
                f"**{option.team2.name}:** {format_names(p.name for p in option.team2.players)}"
            ),
            inline=False,
        )
    if options:
        embed.set_footer(text=f"Algorithm: {format_algorithm(options[0].algorithm)}")
    return embed
