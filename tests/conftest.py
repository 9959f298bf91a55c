"""
Pytest configuration and fixtures for the Tuesday bot test suite.

This module provides:
- Discord.py object mocks
- A compiled unit matcher shared by the unit and countdown tests
"""
import os
import sys
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# =============================================================================
# Unit Matcher
# =============================================================================

@pytest.fixture(scope="session")
def matcher():
    """Unit matcher compiled from the default tables."""
    from cogs.tuesday.units import build_unit_matcher
    return build_unit_matcher()


# =============================================================================
# Discord.py Mock Fixtures
# =============================================================================

@pytest.fixture
def mock_guild():
    """Create a mock Discord guild."""
    guild = MagicMock()
    guild.id = 987654321
    guild.name = "Test Server"
    guild.get_role = MagicMock(return_value=None)
    return guild


@pytest.fixture
def mock_role(mock_guild):
    """Create a mentionable role living in mock_guild."""
    role = MagicMock()
    role.id = 709526709187248241
    role.guild = mock_guild
    role.mentionable = True
    role.mention = "<@&709526709187248241>"
    return role


@pytest.fixture
def mock_bot(mock_guild):
    """Create a mock Discord bot instance."""
    bot = MagicMock()
    bot.user = MagicMock()
    bot.user.id = 123456789
    bot.user.name = "TuesdayBot"
    bot.guilds = [mock_guild]
    return bot


@pytest.fixture
def mock_user():
    """Create a mock Discord user."""
    user = MagicMock()
    user.id = 222222222
    user.name = "TestUser"
    user.bot = False
    user.mention = "<@222222222>"
    return user


@pytest.fixture
def mock_message(mock_guild, mock_user):
    """Create a mock Discord message; set ``content`` in the test."""
    message = MagicMock()
    message.author = mock_user
    message.guild = mock_guild
    message.content = ""
    message.raw_role_mentions = []
    message.channel = MagicMock()
    message.channel.id = 333333333
    message.channel.send = AsyncMock()
    return message
