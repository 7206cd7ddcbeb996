"""Tests for utils/command_helpers.py - Discord command helper utilities."""

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from services import error_codes
from services.result import Result
from utils.command_helpers import format_result_error, send_result_error


@pytest.fixture
def mock_interaction():
    """Create a mock Discord interaction."""
    interaction = MagicMock(spec=discord.Interaction)
    interaction.followup = MagicMock()
    interaction.followup.send = AsyncMock()
    return interaction


class TestFormatResultError:
    def test_success_is_empty(self):
        assert format_result_error(Result.ok(1)) == ""

    def test_with_code(self):
        result = Result.fail("Minimum 4 players required.", code=error_codes.INSUFFICIENT_PLAYERS)
        assert format_result_error(result) == "❌ [insufficient_players] Minimum 4 players required."

    def test_without_code(self):
        assert format_result_error(Result.fail("Oops")) == "❌ Oops"


@pytest.mark.asyncio
async def test_send_result_error_is_ephemeral(mock_interaction):
    result = Result.fail("bad roster", code=error_codes.VALIDATION_ERROR)

    await send_result_error(mock_interaction, result)

    mock_interaction.followup.send.assert_awaited_once_with(
        "❌ [validation_error] bad roster", ephemeral=True
    )
