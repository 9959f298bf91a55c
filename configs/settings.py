"""Configuration settings for the bot."""

import os
from dotenv import load_dotenv
load_dotenv()


class ConfigurationError(RuntimeError):
    """Raised at startup when a required setting is missing or malformed."""


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


# Base directory paths
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Discord connection
DISCORD_TOKEN = os.getenv("DISCORD_TOKEN", "").strip()
TOKEN_FILE = os.getenv("TOKEN_FILE", os.path.join(BASE_DIR, "oauth2.tok"))

# Message handling
COMMAND_PREFIX = os.getenv("COMMAND_PREFIX", "tue!").lower()
TRIGGER_WORD = os.getenv("TRIGGER_WORD", "tues").lower()
TARGET_WEEKDAY = _int_env("TARGET_WEEKDAY", 1)  # Monday=0, Tuesday=1
if not 0 <= TARGET_WEEKDAY <= 6:
    raise ConfigurationError(f"TARGET_WEEKDAY must be 0-6, got {TARGET_WEEKDAY}")

# Role pinged in front of the countdown (0 disables)
TUESDAY_ROLE_ID = _int_env("TUESDAY_ROLE_ID", 709526709187248241)

# Logging
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def load_token() -> str:
    """Return the bot token.

    ``DISCORD_TOKEN`` from the environment wins; otherwise the token file is read.

    Raises:
        ConfigurationError: If neither source yields a token.
    """
    if DISCORD_TOKEN:
        return DISCORD_TOKEN

    try:
        with open(TOKEN_FILE, "r", encoding="utf-8") as f:
            token = f.read().strip()
    except OSError as e:
        raise ConfigurationError(f"Error opening {TOKEN_FILE}: {e}") from e

    if not token:
        raise ConfigurationError(f"{TOKEN_FILE} is empty")
    return token
