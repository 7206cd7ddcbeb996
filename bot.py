"""
Main Discord bot entry for the Pelada team sorter.
"""

import logging
import os

# Configure logging BEFORE importing discord to prevent duplicate handlers
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    force=True,  # Override any existing handlers (e.g., from discord.py)
)
logger = logging.getLogger("pelada_bot")


class _PyNaClFilter(logging.Filter):
    """Filter out the PyNaCl warning from discord.py (voice is not used)."""

    def filter(self, record):
        return "PyNaCl is not installed" not in record.getMessage()


logging.getLogger("discord.client").addFilter(_PyNaClFilter())

import discord
from discord.ext import commands

# discord.py adds its own handler to the 'discord' logger on import
_discord_logger = logging.getLogger("discord")
_discord_logger.handlers.clear()
_discord_logger.setLevel(logging.INFO)

from config import SYNC_COMMANDS_ON_READY
from infrastructure.service_container import ServiceConfig, ServiceContainer

intents = discord.Intents.default()

bot = commands.Bot(command_prefix="!", intents=intents)

# Lazy-initialized service container
_container: ServiceContainer | None = None

EXTENSIONS = [
    "commands.balance",
]


def _init_services():
    """Initialize all services via ServiceContainer (lazy, idempotent)."""
    global _container

    if _container is not None:
        return

    _container = ServiceContainer(ServiceConfig())
    _container.initialize()
    _container.expose_to_bot(bot)


async def _load_extensions():
    """Load command extensions if not already loaded."""
    _init_services()

    loaded_extensions = []
    failed_extensions = []

    for ext in EXTENSIONS:
        if ext in bot.extensions:
            logger.debug(f"Extension {ext} already loaded, skipping")
            continue
        try:
            await bot.load_extension(ext)
            loaded_extensions.append(ext)
            logger.info(f"Loaded extension: {ext}")
        except Exception as exc:
            failed_extensions.append(ext)
            logger.error(f"Failed to load extension {ext}: {exc}", exc_info=True)

    logger.info(
        f"Extension loading complete: {len(loaded_extensions)} loaded, "
        f"{len(failed_extensions)} failed"
    )


def get_existing_command_names():
    """Return the set of command names currently registered on the bot."""
    return {command.name for command in bot.tree.walk_commands()}


@bot.event
async def setup_hook():
    await _load_extensions()


@bot.event
async def on_ready():
    logger.info(f"Logged in as {bot.user} (ID: {bot.user.id if bot.user else 'unknown'})")
    if not SYNC_COMMANDS_ON_READY:
        return
    try:
        synced = await bot.tree.sync()
        logger.info(f"Synced {len(synced)} application commands")
    except Exception as exc:
        logger.error(f"Failed to sync application commands: {exc}", exc_info=True)


def main():
    """Run the bot."""
    token = os.getenv("DISCORD_BOT_TOKEN")
    if not token:
        from dotenv import load_dotenv

        load_dotenv()
        token = os.getenv("DISCORD_BOT_TOKEN")

    if not token:
        print("ERROR: DISCORD_BOT_TOKEN not found!")
        return

    try:
        # log_handler=None keeps discord.py from adding its own handler
        bot.run(token, log_handler=None)
    except KeyboardInterrupt:
        logger.info("Bot stopped by user (Ctrl+C)")
    except Exception as exc:
        logger.error(f"Bot crashed: {exc}", exc_info=True)


if __name__ == "__main__":
    main()
