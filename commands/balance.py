"""
Team sorting commands: /sortteams and /sortoptions.
"""

import asyncio
import functools
import logging
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from config import SORT_OPTIONS_COUNT, SORT_OPTIONS_MAX
from domain.models.balance_result import BalanceAlgorithm
from services.balance_service import BalanceService
from utils.command_helpers import send_result_error
from utils.embeds import create_options_embed, create_teams_embed
from utils.roster_parser import parse_roster_text

logger = logging.getLogger("pelada_bot.commands.balance")

ALGORITHM_CHOICES = [
    app_commands.Choice(name="Greedy (default)", value=BalanceAlgorithm.GREEDY.value),
    app_commands.Choice(
        name="Simulated annealing", value=BalanceAlgorithm.SIMULATED_ANNEALING.value
    ),
]


class BalanceCommands(commands.Cog):
    """Slash commands for sorting a pelada roster into two teams."""

    def __init__(self, bot: commands.Bot, balance_service: BalanceService, balancing_service=None):
        self.bot = bot
        self.balance_service = balance_service
        self.balancing_service = balancing_service

    @app_commands.command(name="sortteams", description="Sort players into two balanced teams")
    @app_commands.describe(
        players="Roster as Name:rating[:position], separated by commas or new lines",
        algorithm="Sorting algorithm",
        seed="Optional seed to reproduce a sort",
    )
    @app_commands.choices(algorithm=ALGORITHM_CHOICES)
    async def sortteams(
        self,
        interaction: discord.Interaction,
        players: str,
        algorithm: app_commands.Choice[str] | None = None,
        seed: int | None = None,
    ):
        logger.info(f"Sortteams command: User {interaction.user.id} ({interaction.user})")
        await interaction.response.defer()

        parsed = parse_roster_text(players)
        if not parsed.success:
            await send_result_error(interaction, parsed)
            return

        selected = algorithm.value if algorithm else None
        try:
            result = await asyncio.to_thread(
                functools.partial(
                    self.balance_service.balance_players, parsed.value, selected, seed=seed
                )
            )
        except Exception as exc:
            logger.error(f"Sort error: {exc}", exc_info=True)
            await interaction.followup.send(
                "❌ Unexpected error while sorting teams. Please try again.", ephemeral=True
            )
            return

        if not result.success:
            await send_result_error(interaction, result)
            return

        embed = create_teams_embed(result.value, self.balancing_service)
        await interaction.followup.send(embed=embed)

    @app_commands.command(name="sortoptions", description="Compare several sorts and rank them")
    @app_commands.describe(
        players="Roster as Name:rating[:position], separated by commas or new lines",
        count=f"How many options to generate (1-{SORT_OPTIONS_MAX}, default {SORT_OPTIONS_COUNT})",
        algorithm="Sorting algorithm",
        seed="Optional seed to reproduce the options",
    )
    @app_commands.choices(algorithm=ALGORITHM_CHOICES)
    async def sortoptions(
        self,
        interaction: discord.Interaction,
        players: str,
        count: Optional[app_commands.Range[int, 1, SORT_OPTIONS_MAX]] = None,
        algorithm: app_commands.Choice[str] | None = None,
        seed: int | None = None,
    ):
        logger.info(f"Sortoptions command: User {interaction.user.id} ({interaction.user})")
        await interaction.response.defer()

        parsed = parse_roster_text(players)
        if not parsed.success:
            await send_result_error(interaction, parsed)
            return

        selected = algorithm.value if algorithm else None
        try:
            result = await asyncio.to_thread(
                functools.partial(
                    self.balance_service.generate_options,
                    parsed.value,
                    selected,
                    count=count,
                    seed=seed,
                )
            )
        except Exception as exc:
            logger.error(f"Sort options error: {exc}", exc_info=True)
            await interaction.followup.send(
                "❌ Unexpected error while sorting teams. Please try again.", ephemeral=True
            )
            return

        if not result.success:
            await send_result_error(interaction, result)
            return

        await interaction.followup.send(embed=create_options_embed(result.value))


async def setup(bot: commands.Bot):
    balance_service = getattr(bot, "balance_service", None)
    balancing_service = getattr(bot, "team_balancing_service", None)
    await bot.add_cog(BalanceCommands(bot, balance_service, balancing_service))
