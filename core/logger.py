import logging
import os
from logging.handlers import TimedRotatingFileHandler
import sys
from pathlib import Path
from typing import Optional

from configs.settings import LOG_DIR as _LOG_DIR, LOG_LEVEL

# Base logs directory; empty LOG_DIR means console only
LOG_DIR = Path(_LOG_DIR) if _LOG_DIR else None

FORMATTER = logging.Formatter(
    '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)


def _level(level) -> int:
    if level is not None:
        return level
    return getattr(logging, LOG_LEVEL, logging.INFO)


def _file_handler(file_path: str) -> Optional[logging.Handler]:
    if LOG_DIR is None:
        return None

    full_log_path = LOG_DIR / file_path
    os.makedirs(os.path.dirname(full_log_path), exist_ok=True)

    # Rotate at midnight, keep 30 days
    handler = TimedRotatingFileHandler(
        filename=full_log_path,
        when="midnight",
        interval=1,
        backupCount=30,
        encoding="utf-8"
    )
    handler.setFormatter(FORMATTER)
    return handler


def setup_logger(logger_name: str, file_path: str, level=None) -> logging.Logger:
    """Configures a standardized logger with file and console handlers.

    Args:
        logger_name (str): Unique identifier for the logger (e.g., 'TuesdayCog').
        file_path (str): Relative path for the log file within LOG_DIR.
                         Example: 'cogs/tuesday.log'.
        level (int, optional): The logging threshold. Defaults to the LOG_LEVEL setting.

    Returns:
        logging.Logger: The configured logger instance.

    Example:
        >>> logger = setup_logger("TuesdayCog", "cogs/tuesday.log")
        >>> logger.info("[TUESDAY] Unit matcher ready")
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(_level(level))

    # Check if handler already exists to avoid duplicate logs
    if logger.handlers:
        return logger

    file_handler = _file_handler(file_path)
    if file_handler is not None:
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(FORMATTER)
    logger.addHandler(console_handler)

    return logger


def setup_discord_logging(level=logging.INFO) -> logging.Logger:
    """Route discord.py's own logger (gateway, reconnects, rate limits) to discord.log.

    ``Bot.start`` installs no handler for it, unlike ``Bot.run``.
    """
    return setup_logger("discord", "discord.log", level=level)
