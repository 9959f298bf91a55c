"""Utility functions for the Tuesday cog."""

import discord
from typing import Iterable, Optional

from core.logger import setup_logger

logger = setup_logger("TuesdayHelpers", "cogs/tuesday.log")


def find_cached_role(guilds: Iterable[discord.Guild], role_id: int) -> Optional[discord.Role]:
    """Look up a role by ID across the cached guilds.

    Args:
        guilds: Guilds the bot can see
        role_id: Role to look for

    Returns:
        The role, or None if no cached guild has it
    """
    for guild in guilds:
        role = guild.get_role(role_id)
        if role is not None:
            return role
    return None


def resolve_role_mention(bot, message: discord.Message, role_id: int) -> Optional[str]:
    """Mention string for the announcement role, if it may be pinged here.

    The role must be cached, mentionable, and belong to the guild the
    message was sent in.

    Args:
        bot: Discord bot instance
        message: Triggering message
        role_id: Configured role ID (0 disables mentions)

    Returns:
        ``role.mention`` or None
    """
    if not role_id:
        return None

    role = find_cached_role(bot.guilds, role_id)
    if role is None:
        logger.debug(f"[TUESDAY] Role {role_id} not in cache")
        return None

    if not role.mentionable:
        return None

    if message.guild is None:
        return None

    if role.guild.id != message.guild.id:
        logger.info(
            f"[TUESDAY] Activated in guild {message.guild.id}, "
            f"but wants to be in {role.guild.id}"
        )
        return None

    return role.mention


def build_roles_reply(role_ids: Iterable[int]) -> str:
    """List role IDs one per line under a header."""
    lines = ["Roles mentioned:\n"]
    lines.extend(f"{role_id}\n" for role_id in role_ids)
    return "".join(lines)
