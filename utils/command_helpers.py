"""
Command helper utilities for Discord slash commands.
"""

from typing import TYPE_CHECKING

import discord

if TYPE_CHECKING:
    from services.result import Result


def format_result_error(result: "Result") -> str:
    """
    Format a failed Result for display, e.g. '❌ [insufficient_players] Minimum 4 players required.'

    Returns an empty string for successful results.
    """
    if result.success:
        return ""
    message = result.error or "Unknown error"
    if result.error_code:
        return f"❌ [{result.error_code}] {message}"
    return f"❌ {message}"


async def send_result_error(interaction: discord.Interaction, result: "Result") -> None:
    """Report a failed Result to the invoking user only."""
    await interaction.followup.send(format_result_error(result), ephemeral=True)
