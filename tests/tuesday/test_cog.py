"""Tests for the Tuesday cog and its helpers."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

import discord

from cogs.tuesday.cog import TuesdayCog
from cogs.tuesday.helpers import build_roles_reply, find_cached_role, resolve_role_mention

ROLE_ID = 709526709187248241


@pytest.fixture
def cog(mock_bot, matcher):
    return TuesdayCog(mock_bot, matcher=matcher, role_id=ROLE_ID, trigger="tues", target_weekday=1)


def _forbidden():
    response = MagicMock()
    response.status = 403
    response.reason = "Forbidden"
    return discord.Forbidden(response, "Missing Permissions")


class TestOnMessage:
    """Tests for the countdown listener."""

    @pytest.mark.asyncio
    async def test_replies_to_trigger(self, cog, mock_message):
        mock_message.content = "Is it TUESDAY yet?"
        with patch("cogs.tuesday.cog.countdown_message", return_value="156 hours until Tuesday.") as mock_countdown:
            await cog.on_message(mock_message)

        mock_countdown.assert_called_once_with("is it tuesday yet?", cog.matcher, target=1)
        mock_message.channel.send.assert_awaited_once_with("It is 156 hours until Tuesday.")

    @pytest.mark.asyncio
    async def test_real_countdown_text(self, cog, mock_message):
        mock_message.content = "how many minutes until tuesday"
        await cog.on_message(mock_message)

        sent = mock_message.channel.send.await_args.args[0]
        assert sent.startswith("It is ")
        assert sent.endswith(" minutes until Tuesday.")

    @pytest.mark.asyncio
    async def test_ignores_bots(self, cog, mock_message):
        mock_message.author.bot = True
        mock_message.content = "tuesday"
        await cog.on_message(mock_message)
        mock_message.channel.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ignores_unrelated(self, cog, mock_message):
        mock_message.content = "see you on wednesday"
        await cog.on_message(mock_message)
        mock_message.channel.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_prefixed_message_left_to_commands(self, cog, mock_message):
        mock_message.content = "TUE!role tuesday"
        await cog.on_message(mock_message)
        mock_message.channel.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_mentions_role_in_same_guild(self, cog, mock_bot, mock_guild, mock_role, mock_message):
        mock_guild.get_role.return_value = mock_role
        mock_message.content = "tues"
        with patch("cogs.tuesday.cog.countdown_message", return_value="1 hours until Tuesday."):
            await cog.on_message(mock_message)

        mock_message.channel.send.assert_awaited_once_with("<@&709526709187248241> It is 1 hours until Tuesday.")

    @pytest.mark.asyncio
    async def test_send_failure_is_logged(self, cog, mock_message):
        mock_message.content = "tues"
        mock_message.channel.send.side_effect = _forbidden()
        with patch("cogs.tuesday.cog.logger") as mock_logger:
            await cog.on_message(mock_message)
        mock_logger.error.assert_called_once()


class TestRoleCommand:
    """Tests for the role echo command."""

    @pytest.mark.asyncio
    async def test_lists_role_ids(self, cog):
        ctx = MagicMock()
        ctx.channel.send = AsyncMock()
        ctx.message.raw_role_mentions = [111, 222]

        await cog.role_prefix.callback(cog, ctx)

        ctx.channel.send.assert_awaited_once_with("Roles mentioned:\n111\n222\n")

    @pytest.mark.asyncio
    async def test_no_roles(self, cog):
        ctx = MagicMock()
        ctx.channel.send = AsyncMock()
        ctx.message.raw_role_mentions = []

        await cog.role_prefix.callback(cog, ctx)

        ctx.channel.send.assert_awaited_once_with("Roles mentioned:\n")

    def test_command_aliases(self, cog):
        assert cog.role_prefix.name == "role"
        assert cog.role_prefix.aliases == ["roles"]


class TestRoleMention:
    """Tests for resolve_role_mention."""

    def test_disabled(self, mock_bot, mock_message):
        assert resolve_role_mention(mock_bot, mock_message, 0) is None

    def test_role_not_cached(self, mock_bot, mock_message):
        assert resolve_role_mention(mock_bot, mock_message, ROLE_ID) is None

    def test_not_mentionable(self, mock_bot, mock_guild, mock_role, mock_message):
        mock_role.mentionable = False
        mock_guild.get_role.return_value = mock_role
        assert resolve_role_mention(mock_bot, mock_message, ROLE_ID) is None

    def test_other_guild(self, mock_bot, mock_guild, mock_role, mock_message):
        home = MagicMock()
        home.id = 555
        home.get_role = MagicMock(return_value=mock_role)
        mock_role.guild = home
        mock_bot.guilds = [mock_guild, home]

        with patch("cogs.tuesday.helpers.logger") as mock_logger:
            assert resolve_role_mention(mock_bot, mock_message, ROLE_ID) is None
        mock_logger.info.assert_called_once()

    def test_direct_message(self, mock_bot, mock_guild, mock_role, mock_message):
        mock_guild.get_role.return_value = mock_role
        mock_message.guild = None
        assert resolve_role_mention(mock_bot, mock_message, ROLE_ID) is None

    def test_same_guild(self, mock_bot, mock_guild, mock_role, mock_message):
        mock_guild.get_role.return_value = mock_role
        assert resolve_role_mention(mock_bot, mock_message, ROLE_ID) == mock_role.mention

    def test_find_cached_role_searches_all_guilds(self, mock_guild, mock_role):
        other = MagicMock()
        other.get_role = MagicMock(return_value=mock_role)
        assert find_cached_role([mock_guild, other], ROLE_ID) is mock_role


def test_build_roles_reply():
    assert build_roles_reply([1, 2, 3]) == "Roles mentioned:\n1\n2\n3\n"
