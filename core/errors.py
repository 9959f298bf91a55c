import discord
from discord.ext import commands
from core.logger import setup_logger

logger = setup_logger("ErrorHandler", "core/errors.log")


class ErrorHandler(commands.Cog):
    """Global Error Handler to catch and process command errors."""

    def __init__(self, bot):
        self.bot = bot

    @commands.Cog.listener()
    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError):
        """The event triggered when an error is raised while invoking a command."""

        # If command has its own error handler, ignore global one
        if ctx.command is not None and ctx.command.has_error_handler():
            return

        # Get original error if it exists
        error = getattr(error, 'original', error)

        # 1. IGNORED ERRORS (Normal operation)
        # "tue!" followed by anything that isn't a command is just chatter
        if isinstance(error, commands.CommandNotFound):
            return

        # 2. UNHANDLED SYSTEM ERRORS (Log & Report)
        logger.error(f'Ignoring exception in command {ctx.command}:', exc_info=error)
        await self._reply(ctx, "❌ Something went wrong while running that command.")

    async def _reply(self, ctx: commands.Context, content: str):
        try:
            await ctx.send(content)
        except discord.HTTPException as e:
            logger.error(f"Error sending message: {e}")


async def setup(bot):
    await bot.add_cog(ErrorHandler(bot))
