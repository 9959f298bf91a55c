import discord
import asyncio
import logging
from discord.ext import commands
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

from configs.settings import COMMAND_PREFIX, ConfigurationError, load_token
from core.logger import setup_discord_logging, setup_logger

# 1. SETUP LOGGING
setup_logger("Main", "main.log")
setup_discord_logging()
logger = logging.getLogger("Main")

EXTENSIONS = (
    "core.errors",
    "cogs.tuesday",
)


def get_prefix(bot, message: discord.Message):
    """Match the command prefix case-insensitively ("TUE!role" works too)."""
    head = message.content[:len(COMMAND_PREFIX)]
    if head.lower() == COMMAND_PREFIX:
        return head
    return COMMAND_PREFIX


class TuesdayBot(commands.Bot):
    """Bot that loads its extensions before connecting."""

    async def setup_hook(self):
        logger.info("[LOADING EXTENSIONS]")
        for extension in EXTENSIONS:
            try:
                await self.load_extension(extension)
                logger.info(f"Loaded: {extension}")
            except commands.ExtensionError as e:
                logger.error(f"Error loading {extension}: {e}", exc_info=True)
                raise


def create_bot() -> TuesdayBot:
    # 2. CREATE BOT
    intents = discord.Intents.default()
    intents.message_content = True
    return TuesdayBot(
        command_prefix=get_prefix,
        intents=intents,
        help_command=None,
        case_insensitive=True,
    )


async def main():
    try:
        token = load_token()
    except ConfigurationError as e:
        logger.critical(f"Cannot start: {e}")
        raise SystemExit(1)

    bot = create_bot()
    async with bot:
        # Shards reconnect with backoff on their own
        logger.info("Attempting to start client")
        await bot.start(token)


if __name__ == '__main__':
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
