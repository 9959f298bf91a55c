"""Tuesday Cog - Main orchestrator.

Watches chat for mentions of Tuesday and answers with a countdown.
"""

import discord
from discord.ext import commands
from core.logger import setup_logger
from configs.settings import COMMAND_PREFIX, TRIGGER_WORD, TARGET_WEEKDAY, TUESDAY_ROLE_ID

from .countdown import countdown_message
from .helpers import build_roles_reply, resolve_role_mention
from .units import UnitMatcher, build_unit_matcher

logger = setup_logger("TuesdayCog", "cogs/tuesday.log")


class TuesdayCog(commands.Cog):
    """Countdown replies and role echo command.

    The cog handles:
    - Compiling the unit tables once at load
    - Replying to messages containing the trigger word
    - The ``role`` command
    """

    def __init__(
        self,
        bot: commands.Bot,
        matcher: UnitMatcher = None,
        role_id: int = TUESDAY_ROLE_ID,
        trigger: str = TRIGGER_WORD,
        target_weekday: int = TARGET_WEEKDAY,
    ):
        """Initialize the Tuesday cog.

        Args:
            bot: Discord bot instance
            matcher: Pre-built unit matcher; compiled from the default tables if omitted
            role_id: Role to mention in replies (0 disables)
            trigger: Lowercase substring that triggers a countdown
            target_weekday: Weekday to count down to (Monday=0)

        Raises:
            re.error: If the unit tables contain a malformed pattern
        """
        self.bot = bot
        self.matcher = matcher if matcher is not None else build_unit_matcher()
        self.role_id = role_id
        self.trigger = trigger
        self.target_weekday = target_weekday
        logger.info("[TUESDAY] Unit matcher ready")

    @commands.Cog.listener()
    async def on_ready(self):
        logger.info(f"{self.bot.user.name} is connected!")

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        """Reply with the countdown when a message mentions the trigger word."""
        if message.author.bot:
            return

        content = message.content.lower()

        # Prefixed messages belong to the command handler
        if content.startswith(COMMAND_PREFIX):
            return

        if self.trigger not in content:
            return

        await self.handle_countdown(message, content)

    async def handle_countdown(self, message: discord.Message, content: str):
        """Send the countdown reply for ``message``.

        Args:
            message: Triggering message
            content: Lowercased message content
        """
        output = ""
        mention = resolve_role_mention(self.bot, message, self.role_id)
        if mention:
            output += f"{mention} "

        output += "It is " + countdown_message(content, self.matcher, target=self.target_weekday)

        await self._send(message.channel, output)

    @commands.command(name="role", aliases=["roles"])
    async def role_prefix(self, ctx: commands.Context):
        """Echo the IDs of the roles mentioned in the message."""
        await self._send(ctx.channel, build_roles_reply(ctx.message.raw_role_mentions))

    async def _send(self, channel, content: str):
        # Network, auth or permission failures are logged, not raised
        try:
            await channel.send(content)
        except discord.HTTPException as e:
            logger.error(f"Error sending message: {e}")


async def setup(bot: commands.Bot):
    """Load the Tuesday cog.

    Args:
        bot: Discord bot instance
    """
    await bot.add_cog(TuesdayCog(bot))
